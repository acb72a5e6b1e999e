"""Reusable UI components for the stock app."""

import pandas as pd
import streamlit as st

from config.constants import SIZES


def render_import_log(messages: list[str]):
    """Render the progress log of an import."""
    with st.container(border=True, height=200):
        if not messages:
            st.caption("Aguardando início da importação...")
        for message in messages:
            st.text(message)


def render_import_result(result):
    """Render import result feedback."""
    if result.success:
        st.success("Ambos os estoques foram atualizados!")
        for table, count in result.counts.items():
            st.caption(f"{table}: {count} SKUs")
    elif result.partial:
        st.warning("Importação parcial")
        for table, ok in result.tables.items():
            st.caption(f"{'✅' if ok else '❌'} {table}")
    else:
        st.error("Ocorreu um erro na importação.")

    for error in result.errors:
        st.error(error)
    for warning in result.warnings:
        st.warning(warning)


def products_dataframe(products) -> pd.DataFrame:
    """Build the size grid (one row per product, one column per size)."""
    rows = []
    for p in products:
        row = {"Produto": p.produto, "Linha": p.linha, "Modelo": p.modelo}
        for size in SIZES:
            row[size] = p.tamanhos.get(size, 0)
        row["Total"] = p.total_quantidade
        rows.append(row)
    return pd.DataFrame(rows, columns=["Produto", "Linha", "Modelo", *SIZES, "Total"])
