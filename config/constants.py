"""Constants for the stock report layout and the stock views."""

from src.models.stock import StockView

# Stock report layout: every product occupies a fixed block of rows
BLOCK_SIZE = 10
COLOR_ROW_OFFSET = 1
SIZE_ROW_OFFSET = 2
SIZE_COLUMN_RANGE = range(1, 8)
MODEL_SEPARATOR = " - "
MODEL_PREFIX_DIGITS = 3

# Sizes shown in the stock grid (columns 1-7 of the size row)
SIZES = ["34", "35", "36", "37", "38", "39", "40"]

GENERAL_STOCK = StockView(
    key="geral",
    label="Estoque Geral",
    marker="[G] Saldo",
    offset=9,
    table="estoque_geral",
)

READY_STOCK = StockView(
    key="pronto",
    label="Estoque Pronto",
    marker="[C] Disponível",
    offset=5,
    table="estoque_pronto",
)

# Import order matters for the progress log: general first, then ready
STOCK_VIEWS = [GENERAL_STOCK, READY_STOCK]
STOCK_VIEWS_BY_KEY = {view.key: view for view in STOCK_VIEWS}
STOCK_TABLES = {view.table for view in STOCK_VIEWS}
