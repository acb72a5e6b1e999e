"""Extraction of per-size stock from the inventory report grid.

The report has no header or schema. Each product occupies a block of
BLOCK_SIZE rows:

- row i:          model header, e.g. "203 - AZUL"
- row i+1:        color, e.g. "025 - MARINHO"
- row i+2:        sizes in columns 1-7 (34..40)
- row i+offset:   quantities, first cell carries the section marker
                  ("[G] Saldo" for general stock, "[C] Disponível" for
                  ready stock)

Malformed cells never abort the scan: a bad quantity skips that column,
an empty model or color code skips the whole block.
"""

import logging

from src.models.cell import Grid, cell_at, text_of
from src.models.stock import StockEntry
from src.utils.text_processing import digits_only, format_model, parse_int_or_none
from config.constants import (
    BLOCK_SIZE,
    COLOR_ROW_OFFSET,
    SIZE_ROW_OFFSET,
    SIZE_COLUMN_RANGE,
    MODEL_SEPARATOR,
)

logger = logging.getLogger(__name__)


def _code_part(text: str | None) -> str:
    if text is None:
        return ""
    return digits_only(text.split(MODEL_SEPARATOR)[0])


def base_code(model_text: str | None, color_text: str | None) -> str | None:
    """Build the parent SKU (model.color) or None if either code is empty."""
    model_part = format_model(_code_part(model_text))
    color_part = _code_part(color_text)
    if not model_part or not color_part:
        return None
    return f"{model_part}.{color_part}"


def _is_data_row(grid: Grid, row: int, marker: str) -> bool:
    text = text_of(cell_at(grid, row, 0))
    return text is not None and marker in text


def extract(grid: Grid, marker: str, offset: int) -> list[StockEntry]:
    """Scan the grid and return the summed quantity per child SKU."""
    totals: dict[str, int] = {}
    blocks = 0
    skipped = 0

    i = 0
    while i < len(grid):
        model_text = text_of(cell_at(grid, i, 0))
        if model_text is None or not _is_data_row(grid, i + offset, marker):
            i += 1
            continue

        color_text = text_of(cell_at(grid, i + COLOR_ROW_OFFSET, 0))
        code = base_code(model_text, color_text)
        if code is None:
            skipped += 1
            i += BLOCK_SIZE
            continue

        blocks += 1
        for k in SIZE_COLUMN_RANGE:
            size = parse_int_or_none(cell_at(grid, i + SIZE_ROW_OFFSET, k))
            qty = parse_int_or_none(cell_at(grid, i + offset, k))
            if size is None or size <= 0 or qty is None or qty <= 0:
                continue
            sku = f"{code}-{size}"
            totals[sku] = totals.get(sku, 0) + qty

        i += BLOCK_SIZE

    logger.debug(
        "Extracted %d SKUs for %r (%d blocks, %d skipped)",
        len(totals), marker, blocks, skipped,
    )
    return [StockEntry(sku=sku, quantidade=qty) for sku, qty in totals.items()]
