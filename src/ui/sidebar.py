"""Sidebar component: stock import, stats, settings."""

import sqlite3

import streamlit as st

from src.database.schema import initialize_database
from src.database.import_data import import_stock_spreadsheet
from src.database import queries
from src.services.stock_service import invalidate_stock_cache
from src.ui.components import render_import_log, render_import_result
from config.constants import STOCK_VIEWS


def render_sidebar(conn: sqlite3.Connection):
    """Render the sidebar with import and stats sections."""
    with st.sidebar:
        st.header("Estoque")
        st.caption("Importador de Estoque Unificado")

        st.divider()

        # ── Database Stats ─────────────────────────
        st.subheader("Status da Base")
        _show_database_stats(conn)

        st.divider()

        # ── Stock Import ───────────────────────────
        with st.expander("Importar Estoque", expanded=False):
            st.caption('Processa "Estoque Geral" e "Estoque Pronto" do mesmo arquivo XLS.')
            uploaded_file = st.file_uploader(
                "Arquivo Excel (.xls / .xlsx)",
                type=["xls", "xlsx"],
            )

            if st.button("Importar Estoques", use_container_width=True, disabled=uploaded_file is None):
                if uploaded_file:
                    _handle_import(conn, uploaded_file)

            render_import_log(st.session_state.get("import_log", []))

        st.divider()

        # ── Actions ────────────────────────────────
        with st.expander("Acoes Avancadas", expanded=False):
            if st.button("Limpar Cache de Estoque", use_container_width=True):
                invalidate_stock_cache()
                st.rerun()

            if st.button("Inicializar Banco de Dados", use_container_width=True):
                initialize_database(conn)
                st.success("Banco de dados inicializado!")
                st.rerun()


def _handle_import(conn: sqlite3.Connection, uploaded_file):
    """Run the stock import for the uploaded spreadsheet."""
    with st.spinner("Importando..."):
        result = import_stock_spreadsheet(
            uploaded_file,
            uploaded_file.name,
            conn,
            invalidate_cache=invalidate_stock_cache,
        )
    st.session_state.import_log = result.log
    render_import_result(result)


def _show_database_stats(conn: sqlite3.Connection):
    """Display database statistics."""
    try:
        cols = st.columns(len(STOCK_VIEWS))
        for col, view in zip(cols, STOCK_VIEWS):
            with col:
                st.metric(view.label, queries.count_stock_entries(conn, view.table))

        recent = queries.get_recent_imports(conn, limit=3)
        for row in recent:
            icon = "✅" if row["status"] == "success" else "⚠️"
            st.caption(f"{icon} {row['file_type']} — {row['file_name']} ({row['imported_at']})")
    except sqlite3.Error:
        st.caption("Banco de dados nao inicializado. Clique em 'Inicializar Banco de Dados'.")
