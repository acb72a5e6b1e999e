"""Data validation for imports."""

from pathlib import Path

from src.models.cell import Grid
from config.settings import SUPPORTED_FILE_TYPES


class ValidationResult:
    def __init__(self):
        self.errors: list[str] = []
        self.warnings: list[str] = []

    @property
    def is_valid(self) -> bool:
        return len(self.errors) == 0

    def add_error(self, msg: str):
        self.errors.append(msg)

    def add_warning(self, msg: str):
        self.warnings.append(msg)


def validate_file_name(file_name: str) -> ValidationResult:
    result = ValidationResult()
    suffix = Path(file_name or "").suffix.lower()
    if suffix not in SUPPORTED_FILE_TYPES:
        result.add_error(
            f"Tipo de arquivo nao suportado: {file_name} "
            f"(use {', '.join(SUPPORTED_FILE_TYPES)})"
        )
    return result


def validate_grid(grid: Grid) -> ValidationResult:
    result = ValidationResult()
    if not grid:
        result.add_error("A planilha esta vazia")
        return result

    widest = max(len(row) for row in grid)
    if widest < 8:
        result.add_warning(
            f"A planilha tem apenas {widest} colunas; "
            "os tamanhos sao lidos das colunas 1 a 7"
        )
    return result
