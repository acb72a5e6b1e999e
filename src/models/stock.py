from pydantic import BaseModel, Field


class StockEntry(BaseModel):
    sku: str
    quantidade: int = 0


class StockView(BaseModel):
    """One section of the stock report and the table it is stored in."""

    key: str
    label: str
    marker: str
    offset: int = Field(gt=0)
    table: str


class ProductStock(BaseModel):
    produto: str  # SKU pai, e.g. 107.047.008
    linha: str
    modelo: str
    tamanhos: dict[str, int] = Field(default_factory=dict)
    total_quantidade: int = 0

    @property
    def in_stock(self) -> bool:
        return self.total_quantidade > 0
