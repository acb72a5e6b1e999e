"""
Fixtures comuns para os testes do importador de estoque.
"""
import io

import pandas as pd
import pytest

from src.database.connection import create_connection
from src.database.schema import initialize_database
from src.models.cell import to_grid
from src.services.stock_service import invalidate_stock_cache

SIZES_ROW = [None, 34, 35, 36, 37, 38, 39, 40]


def make_block(model, color, general=None, ready=None, sizes=SIZES_ROW, filler=None):
    """Build the 10 rows of one product block.

    general goes in row 9 ("[G] Saldo"), ready in row 5 ("[C] Disponível").
    Quantity lists hold the values of columns 1-7.
    """
    rows = [[model], [color], list(sizes)]
    rows += [[filler] for _ in range(7)]
    if ready is not None:
        rows[5] = ["[C] Disponível"] + list(ready)
    if general is not None:
        rows[9] = ["[G] Saldo"] + list(general)
    return rows


@pytest.fixture
def conn():
    """Conexao SQLite em memoria com o schema criado."""
    connection = create_connection(":memory:", timeout=1)
    initialize_database(connection)
    yield connection
    connection.close()


@pytest.fixture(autouse=True)
def clear_stock_cache():
    """Cada teste comeca com o cache de estoque vazio."""
    invalidate_stock_cache()
    yield
    invalidate_stock_cache()


@pytest.fixture
def sample_rows():
    """Duas referencias com estoque geral e pronto."""
    return (
        make_block("203 - AZUL", "025 - MARINHO",
                   general=[5, 0, 3, None, 12, None, None],
                   ready=[2, None, None, None, 4, None, None],
                   filler="[A] Entradas")
        + make_block("1070470 - PRETO", "008 - VERNIZ",
                     general=[None, 1, 1, 1, None, None, 7],
                     filler="[A] Entradas")
    )


@pytest.fixture
def sample_grid(sample_rows):
    return to_grid(sample_rows)


def excel_file(rows) -> io.BytesIO:
    """Write rows to an in-memory .xlsx without header or index."""
    buffer = io.BytesIO()
    pd.DataFrame(rows).to_excel(buffer, header=False, index=False)
    buffer.seek(0)
    return buffer
