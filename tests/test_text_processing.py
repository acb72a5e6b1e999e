import math
from datetime import datetime

import numpy as np
import pandas as pd
import pytest

from src.models.cell import Empty, Number, Text, cell_at, text_of, to_cell, to_grid
from src.utils.text_processing import (
    digits_only,
    format_model,
    parse_int_or_none,
    split_sku,
    product_line,
    product_model,
)


class TestDigitsOnly:
    def test_keeps_digits_of_code(self):
        assert digits_only("107 - PRETO") == "107"

    def test_empty_string(self):
        assert digits_only("") == ""

    def test_non_string(self):
        assert digits_only(None) == ""

    def test_digits_spread_in_text(self):
        assert digits_only("REF 1.070-470") == "1070470"


class TestFormatModel:
    def test_long_model_gets_dot_after_line(self):
        assert format_model("1070470") == "107.0470"

    def test_four_digits(self):
        assert format_model("1234") == "123.4"

    def test_three_digits_unchanged(self):
        assert format_model("107") == "107"

    def test_empty(self):
        assert format_model("") == ""


class TestParseIntOrNone:
    @pytest.mark.parametrize(
        "cell, expected",
        [
            (Number(5.0), 5),
            (Number(5.7), 5),
            (Number(-1.0), -1),
            (Text("12"), 12),
            (Text(" 12abc"), 12),
            (Text("-3"), -3),
            (Text("abc"), None),
            (Text(""), None),
            (Empty(), None),
            (Number(math.nan), None),
        ],
    )
    def test_parse(self, cell, expected):
        assert parse_int_or_none(cell) == expected


class TestCells:
    def test_to_cell_variants(self):
        assert to_cell(None) == Empty()
        assert to_cell("") == Empty()
        assert to_cell(float("nan")) == Empty()
        assert to_cell("203 - AZUL") == Text("203 - AZUL")
        assert to_cell(34) == Number(34.0)
        assert to_cell(np.int64(7)) == Number(7.0)
        assert to_cell(np.float64(2.5)) == Number(2.5)

    def test_booleans_and_dates_are_empty(self):
        assert to_cell(True) == Empty()
        assert to_cell(np.bool_(False)) == Empty()
        assert to_cell(datetime(2024, 5, 1)) == Empty()
        assert to_cell(pd.Timestamp("2024-05-01")) == Empty()
        assert to_cell(pd.NaT) == Empty()

    def test_cell_at_out_of_range_is_empty(self):
        grid = to_grid([["a", 1], ["b"]])
        assert cell_at(grid, 0, 1) == Number(1.0)
        assert cell_at(grid, 1, 1) == Empty()
        assert cell_at(grid, 5, 0) == Empty()
        assert cell_at(grid, -1, 0) == Empty()

    def test_text_of_only_reads_text(self):
        assert text_of(Text("x")) == "x"
        assert text_of(Number(1.0)) is None
        assert text_of(Empty()) is None


class TestSku:
    def test_split_child_sku(self):
        assert split_sku("107.047.008-34") == ("107.047.008", "34")

    def test_split_rejects_other_shapes(self):
        assert split_sku("107.047.008") is None
        assert split_sku("a-b-c") is None

    def test_line_and_model(self):
        assert product_line("107.047.008") == "107"
        assert product_model("107.047.008") == "107.047"
