"""Stock browsing service: load a stock view and group it by product."""

import logging
import sqlite3

import streamlit as st

from src.database import queries
from src.models.stock import StockEntry, ProductStock
from src.utils.text_processing import normalize_text, split_sku, product_line, product_model
from config.constants import STOCK_VIEWS_BY_KEY
from config.settings import STOCK_CACHE_TTL_SECONDS

logger = logging.getLogger(__name__)


@st.cache_data(ttl=STOCK_CACHE_TTL_SECONDS, show_spinner=False)
def _load_table(_conn: sqlite3.Connection, table: str) -> list[StockEntry]:
    rows = queries.get_stock(_conn, table)
    return [StockEntry(sku=row["sku"], quantidade=row["quantidade"]) for row in rows]


def invalidate_stock_cache():
    """Drop cached stock tables so the next load reads the database."""
    _load_table.clear()
    logger.info("Cache de estoque invalidado")


def load_stock(conn: sqlite3.Connection, view_key: str) -> list[StockEntry]:
    """Load all rows of a stock view, served from cache when fresh."""
    view = STOCK_VIEWS_BY_KEY[view_key]
    try:
        entries = _load_table(conn, view.table)
    except sqlite3.Error as e:
        logger.error("Erro ao buscar %s: %s", view.table, e)
        return []

    logger.info("%s carregado: %d itens", view.label, len(entries))
    return entries


def group_by_product(entries: list[StockEntry]) -> list[ProductStock]:
    """Group child SKUs (pai-tamanho) into products, sorted by parent SKU."""
    products: dict[str, ProductStock] = {}
    for entry in entries:
        parts = split_sku(entry.sku)
        if parts is None:
            logger.debug("SKU fora do padrao ignorado: %s", entry.sku)
            continue
        produto, tamanho = parts
        product = products.get(produto)
        if product is None:
            product = ProductStock(
                produto=produto,
                linha=product_line(produto),
                modelo=product_model(produto),
            )
            products[produto] = product
        product.tamanhos[tamanho] = entry.quantidade
        product.total_quantidade += entry.quantidade
    return sorted(products.values(), key=lambda p: p.produto)


def filter_products(products: list[ProductStock], term: str) -> list[ProductStock]:
    """Filter products whose parent SKU, line or model contains term."""
    term = normalize_text(term)
    if not term:
        return products
    return [
        p for p in products
        if term in p.produto.lower() or term in p.linha.lower() or term in p.modelo.lower()
    ]


def summarize(products: list[ProductStock]) -> dict:
    """Aggregate statistics for a list of products."""
    total = len(products)
    without_stock = sum(1 for p in products if p.total_quantidade == 0)
    return {
        "total_products": total,
        "total_quantity": sum(p.total_quantidade for p in products),
        "products_in_stock": total - without_stock,
        "products_without_stock": without_stock,
    }
