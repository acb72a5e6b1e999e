"""Main page: stock browser by product and size."""

import sqlite3

import streamlit as st

from src.services import stock_service
from src.ui.components import products_dataframe
from config.constants import STOCK_VIEWS, STOCK_VIEWS_BY_KEY


def render_stock_page(conn: sqlite3.Connection):
    st.title("Controle de Estoque")
    st.caption("Gestão de inventário por produto e tamanho")

    view_key = st.radio(
        "Estoque",
        [view.key for view in STOCK_VIEWS],
        format_func=lambda key: STOCK_VIEWS_BY_KEY[key].label,
        horizontal=True,
    )

    entries = stock_service.load_stock(conn, view_key)
    products = stock_service.group_by_product(entries)
    if not products:
        st.info("Nenhum dado de estoque encontrado no banco de dados")
        return

    stats = stock_service.summarize(products)
    col1, col2, col3, col4 = st.columns(4)
    col1.metric("Produtos", stats["total_products"])
    col2.metric("Pares", stats["total_quantity"])
    col3.metric("Com estoque", stats["products_in_stock"])
    col4.metric("Sem estoque", stats["products_without_stock"])

    term = st.text_input("Buscar por produto, linha ou modelo")
    filtered = stock_service.filter_products(products, term)
    st.dataframe(products_dataframe(filtered), use_container_width=True, hide_index=True)
