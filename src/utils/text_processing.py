"""Text normalization and code parsing utilities."""

import math
import re
import unicodedata

from src.models.cell import Cell, Empty, Number, Text
from config.constants import MODEL_PREFIX_DIGITS

_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")
_NON_DIGITS = re.compile(r"\D")


def normalize_text(text: str) -> str:
    """Lowercase, strip accents, remove extra spaces."""
    if not text:
        return ""
    text = text.strip().lower()
    text = unicodedata.normalize("NFKD", text)
    text = "".join(c for c in text if not unicodedata.combining(c))
    text = re.sub(r"\s+", " ", text)
    return text


def digits_only(text: str | None) -> str:
    """Keep only the digits of a text ("107 - PRETO" -> "107")."""
    if not isinstance(text, str):
        return ""
    return _NON_DIGITS.sub("", text)


def format_model(model_part: str) -> str:
    """Insert a dot after the line prefix ("1070470" -> "107.0470")."""
    if len(model_part) > MODEL_PREFIX_DIGITS:
        return f"{model_part[:MODEL_PREFIX_DIGITS]}.{model_part[MODEL_PREFIX_DIGITS:]}"
    return model_part


def parse_int_or_none(cell: Cell) -> int | None:
    """Parse a cell as an integer, or None when it holds no integer.

    Numbers are truncated toward zero; text takes its leading integer
    ("12abc" -> 12, "abc" -> None).
    """
    match cell:
        case Number(value=value):
            if math.isnan(value) or math.isinf(value):
                return None
            return int(value)
        case Text(value=value):
            found = _LEADING_INT.match(value)
            return int(found.group(1)) if found else None
        case Empty():
            return None
    return None


def split_sku(sku: str) -> tuple[str, str] | None:
    """Split a child SKU into (parent SKU, size). None if not 'pai-tamanho'."""
    parts = sku.split("-")
    if len(parts) != 2:
        return None
    return parts[0], parts[1]


def product_line(sku_pai: str) -> str:
    return sku_pai[:3]


def product_model(sku_pai: str) -> str:
    return sku_pai[:7]
