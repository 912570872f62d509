from pydantic import BaseModel, ConfigDict, Field, FiniteFloat
from typing import Optional, Union

# NaN and infinity have no JSON representation.
Number = Union[int, FiniteFloat]


class Product(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: int
    name: str
    price: Number
    stock: int
    low_stock_threshold: int = Field(..., alias="lowStockThreshold")
    category: str

    @property
    def is_low_stock(self) -> bool:
        return self.stock < self.low_stock_threshold


# Request bodies. Every field is optional here so that absent fields reach the
# store's own presence checks and produce the documented error messages.

class StockUpdateIn(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: Optional[int] = None
    new_quantity: Optional[int] = Field(None, alias="newQuantity")


class ProductIn(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    name: Optional[str] = None
    price: Optional[Number] = None
    stock: Optional[int] = None
    category: Optional[str] = None
    low_stock_threshold: Optional[int] = Field(None, alias="lowStockThreshold")
