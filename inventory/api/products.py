from fastapi import APIRouter, Depends
from typing import List, Optional
from inventory.api.deps import get_store
from inventory.core.errors import InvalidArgument
from inventory.models.schemas import Product, ProductIn, StockUpdateIn
from inventory.services.inventory_service import InventoryStore

router = APIRouter()

@router.get("/products", response_model=List[Product])
def list_products(store: InventoryStore = Depends(get_store)):
    return store.list_products()

@router.post("/update-stock", response_model=Product)
def update_stock(payload: Optional[StockUpdateIn] = None, store: InventoryStore = Depends(get_store)):
    if payload is None or payload.id is None or payload.new_quantity is None:
        raise InvalidArgument("Missing 'id' or 'newQuantity'.")
    return store.update_stock(payload.id, payload.new_quantity)

@router.post("/add-product", response_model=Product)
def add_product(payload: Optional[ProductIn] = None, store: InventoryStore = Depends(get_store)):
    payload = payload or ProductIn()
    return store.add_product(
        payload.name,
        payload.price,
        payload.stock,
        payload.category,
        payload.low_stock_threshold,
    )
