"""Estoque: stock report importer and browser."""

import streamlit as st
from config.settings import APP_PASSWORD, DB_PATH
from src.database.connection import create_connection
from src.database.schema import initialize_database
from src.utils.logging_setup import configure_logging

st.set_page_config(
    page_title="Controle de Estoque",
    page_icon="👟",
    layout="wide",
)

configure_logging()


@st.cache_resource
def get_connection():
    """One connection per server process, initialized on first use."""
    conn = create_connection(DB_PATH)
    initialize_database(conn)
    return conn


def check_password() -> bool:
    """Simple password authentication."""
    if not APP_PASSWORD:
        return True  # No password configured, allow access

    if "authenticated" not in st.session_state:
        st.session_state.authenticated = False

    if st.session_state.authenticated:
        return True

    st.title("Controle de Estoque")

    password = st.text_input("Senha de acesso", type="password")
    if st.button("Entrar", use_container_width=True):
        if password == APP_PASSWORD:
            st.session_state.authenticated = True
            st.rerun()
        else:
            st.error("Senha incorreta")

    return False


if check_password():
    from src.ui.sidebar import render_sidebar
    from src.ui.stock_page import render_stock_page

    conn = get_connection()
    render_sidebar(conn)
    render_stock_page(conn)
