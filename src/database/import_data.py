"""Stock report import pipeline into SQLite."""

import logging
import sqlite3
from dataclasses import dataclass, field
from datetime import datetime
from typing import IO, Callable, Sequence

import pandas as pd

from src.database.queries import log_import, upsert_stock
from src.models.cell import Grid, to_grid
from src.models.stock import StockEntry, StockView
from src.services.stock_extractor import extract
from src.utils.validators import validate_file_name, validate_grid
from config.constants import STOCK_VIEWS

logger = logging.getLogger(__name__)

NO_DATA_MESSAGE = (
    "Nenhum dado de estoque ([G] Saldo ou [C] Disponível) foi encontrado no arquivo."
)


class ImportProgress:
    """Ordered, timestamped progress messages shown in the import log panel."""

    def __init__(self, clock: Callable[[], datetime] = datetime.now):
        self._clock = clock
        self.messages: list[str] = []

    def add(self, message: str):
        timestamp = self._clock().strftime("%H:%M:%S")
        self.messages.append(f"[{timestamp}] {message}")
        logger.info(message)


@dataclass
class StockImportResult:
    success: bool
    partial: bool = False
    tables: dict[str, bool] = field(default_factory=dict)
    counts: dict[str, int] = field(default_factory=dict)
    errors: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)
    log: list[str] = field(default_factory=list)

    @property
    def rows_imported(self) -> int:
        return sum(
            count for table, count in self.counts.items() if self.tables.get(table)
        )


def read_grid(file: IO, file_name: str) -> Grid:
    """Read the first sheet of an Excel file as a grid of cells, no header."""
    validation = validate_file_name(file_name)
    if not validation.is_valid:
        raise ValueError(validation.errors[0])
    df = pd.read_excel(file, header=None, sheet_name=0, dtype=object)
    return to_grid(df.itertuples(index=False, name=None))


def _send_to_table(
    conn: sqlite3.Connection,
    entries: Sequence[StockEntry],
    view: StockView,
    file_name: str,
    progress: ImportProgress,
) -> bool:
    if not entries:
        progress.add(f"🟡 Nenhum dado para atualizar na tabela {view.table}.")
        return True

    progress.add(f"📤 Enviando {len(entries)} registros para {view.table}...")
    try:
        upsert_stock(conn, view.table, entries)
    except (sqlite3.Error, OverflowError) as e:
        logger.exception("Erro ao importar para %s", view.table)
        progress.add(f"❌ Erro no {view.table}: {e}")
        _audit(conn, file_name, view.table, 0, len(entries), "failed", str(e))
        return False

    progress.add(f"✅ Tabela {view.table} atualizada com sucesso!")
    _audit(conn, file_name, view.table, len(entries), 0, "success")
    return True


def _audit(conn, file_name, table, imported, failed, status, error=None):
    try:
        log_import(conn, file_name, table, imported, failed, status, error)
    except sqlite3.Error as e:
        logger.warning("Nao foi possivel registrar a importacao de %s: %s", table, e)


def import_stock_spreadsheet(
    file: IO,
    file_name: str,
    conn: sqlite3.Connection,
    invalidate_cache: Callable[[], None] | None = None,
    views: Sequence[StockView] = STOCK_VIEWS,
) -> StockImportResult:
    """Import general and ready stock from one inventory report spreadsheet.

    Each view is extracted from the same grid and upserted into its own
    table, one after the other. A failure in one table does not undo the
    other; the result tells which tables succeeded.
    """
    progress = ImportProgress()
    progress.add("🚀 Iniciando processo de importação...")
    result = StockImportResult(success=False, log=progress.messages)

    try:
        grid = read_grid(file, file_name)
    except Exception as e:
        logger.exception("Falha ao ler %s", file_name)
        progress.add(f"❌ Erro Crítico: {e}")
        result.errors.append(str(e))
        _audit(conn, file_name, "stock_report", 0, 0, "failed", str(e))
        return result

    validation = validate_grid(grid)
    result.warnings.extend(validation.warnings)
    if not validation.is_valid:
        for error in validation.errors:
            progress.add(f"❌ Erro Crítico: {error}")
        result.errors.extend(validation.errors)
        _audit(conn, file_name, "stock_report", 0, 0, "failed", "; ".join(validation.errors))
        return result

    progress.add("📄 Arquivo Excel lido, iniciando processamento...")
    extracted: dict[str, list[StockEntry]] = {}
    for view in views:
        progress.add(f"⚙️ Processando {view.label} ({view.marker})...")
        entries = extract(grid, view.marker, view.offset)
        extracted[view.table] = entries
        result.counts[view.table] = len(entries)
        progress.add(f"  -> {len(entries)} SKUs encontrados para {view.label}.")

    if not any(extracted.values()):
        progress.add(f"❌ Erro Crítico: {NO_DATA_MESSAGE}")
        result.errors.append(NO_DATA_MESSAGE)
        _audit(conn, file_name, "stock_report", 0, 0, "failed", NO_DATA_MESSAGE)
        return result

    for view in views:
        result.tables[view.table] = _send_to_table(
            conn, extracted[view.table], view, file_name, progress
        )

    succeeded = [table for table, ok in result.tables.items() if ok]
    failed = [table for table, ok in result.tables.items() if not ok]

    if not failed:
        result.success = True
        progress.add("🎉 Importação concluída com sucesso!")
        if invalidate_cache is not None:
            invalidate_cache()
        return result

    result.partial = bool(succeeded)
    message = f"Falha ao enviar os dados para: {', '.join(failed)}."
    if succeeded:
        message += f" Atualizadas com sucesso: {', '.join(succeeded)}."
    result.errors.append(message)
    progress.add(f"❌ {message}")
    return result
