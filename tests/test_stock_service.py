import pytest

from src.database import queries
from src.models.stock import StockEntry
from src.services import stock_service


def entries(**quantities):
    return [StockEntry(sku=sku, quantidade=qty) for sku, qty in quantities.items()]


class TestUpsertStock:
    def test_last_write_wins(self, conn):
        queries.upsert_stock(conn, "estoque_geral", [StockEntry(sku="203.025-34", quantidade=5)])
        queries.upsert_stock(conn, "estoque_geral", [StockEntry(sku="203.025-34", quantidade=3)])

        row = queries.get_stock_by_sku(conn, "estoque_geral", "203.025-34")
        assert row["quantidade"] == 3
        assert queries.count_stock_entries(conn, "estoque_geral") == 1

    def test_unknown_table_is_rejected(self, conn):
        with pytest.raises(ValueError):
            queries.upsert_stock(conn, "produtos; DROP TABLE x", [])

    def test_overflowing_quantity_leaves_no_open_transaction(self, conn):
        with pytest.raises(OverflowError):
            queries.upsert_stock(conn, "estoque_geral", entries(**{
                "203.025-34": 5,
                "203.025-35": 10 ** 20,
            }))

        assert not conn.in_transaction
        assert queries.count_stock_entries(conn, "estoque_geral") == 0


class TestLoadStock:
    def test_cached_until_invalidated(self, conn):
        queries.upsert_stock(conn, "estoque_geral", entries(**{"203.025-34": 5}))
        assert stock_service.load_stock(conn, "geral") == entries(**{"203.025-34": 5})

        queries.upsert_stock(conn, "estoque_geral", entries(**{"203.025-34": 9}))
        assert stock_service.load_stock(conn, "geral")[0].quantidade == 5

        stock_service.invalidate_stock_cache()
        assert stock_service.load_stock(conn, "geral")[0].quantidade == 9

    def test_views_are_cached_separately(self, conn):
        queries.upsert_stock(conn, "estoque_geral", entries(**{"203.025-34": 5}))
        queries.upsert_stock(conn, "estoque_pronto", entries(**{"203.025-34": 1}))

        assert stock_service.load_stock(conn, "geral")[0].quantidade == 5
        assert stock_service.load_stock(conn, "pronto")[0].quantidade == 1

    def test_database_error_returns_empty(self, conn):
        conn.execute("DROP TABLE estoque_pronto")

        assert stock_service.load_stock(conn, "pronto") == []


class TestGroupByProduct:
    def test_groups_sizes_under_parent_sku(self):
        products = stock_service.group_by_product(entries(**{
            "107.047.008-35": 2,
            "107.047.008-34": 1,
            "203.025-34": 0,
            "SEMTAMANHO": 4,
        }))

        assert [p.produto for p in products] == ["107.047.008", "203.025"]
        first = products[0]
        assert first.linha == "107"
        assert first.modelo == "107.047"
        assert first.tamanhos == {"35": 2, "34": 1}
        assert first.total_quantidade == 3
        assert not products[1].in_stock

    def test_filter_and_summary(self):
        products = stock_service.group_by_product(entries(**{
            "107.047.008-35": 2,
            "203.025-34": 0,
        }))

        assert [p.produto for p in stock_service.filter_products(products, " 107.047 ")] == ["107.047.008"]
        assert stock_service.filter_products(products, "") == products
        assert stock_service.summarize(products) == {
            "total_products": 2,
            "total_quantity": 2,
            "products_in_stock": 1,
            "products_without_stock": 1,
        }


def test_stock_tables_are_created_with_updated_at(conn):
    for table in ("estoque_geral", "estoque_pronto"):
        columns = [row["name"] for row in conn.execute(f"PRAGMA table_info({table})")]
        assert columns == ["sku", "quantidade", "updated_at"]
