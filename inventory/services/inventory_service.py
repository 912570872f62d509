import logging
import math
import threading
from typing import Iterable, List, Optional

from inventory.core.config import DEFAULT_LOW_STOCK_THRESHOLD
from inventory.core.errors import InvalidArgument, NotFound
from inventory.models.schemas import Product

logger = logging.getLogger(__name__)

MISSING_FIELDS = "Missing required fields: name, price, stock, category."
NEGATIVE_STOCK = "Stock quantity cannot be negative."

SEED_PRODUCTS = [
    {"id": 1, "name": "Quantum Processor Unit", "price": 450000, "stock": 1, "lowStockThreshold": 2, "category": "Components"},
    {"id": 2, "name": "Neural Interface Headset", "price": 120000, "stock": 4, "lowStockThreshold": 5, "category": "Wearables"},
    {"id": 3, "name": "Holographic Display Emitter", "price": 85000, "stock": 1, "lowStockThreshold": 3, "category": "Displays"},
    {"id": 4, "name": "Fusion Battery Cell", "price": 32000, "stock": 45, "lowStockThreshold": 10, "category": "Power"},
    {"id": 5, "name": "Exoskeleton Armature", "price": 750000, "stock": 3, "lowStockThreshold": 1, "category": "Robotics"},
]


def _to_number(value, field: str):
    if isinstance(value, bool):
        raise InvalidArgument(f"Field '{field}' must be a number.")
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        number = value
    else:
        try:
            number = float(value)
        except (TypeError, ValueError):
            raise InvalidArgument(f"Field '{field}' must be a number.")
    if not math.isfinite(number):
        raise InvalidArgument(f"Field '{field}' must be a finite number.")
    return int(number) if number.is_integer() else number


def _to_whole(value, field: str) -> int:
    number = _to_number(value, field)
    if isinstance(number, float):
        if not number.is_integer():
            raise InvalidArgument(f"Field '{field}' must be a whole number.")
        number = int(number)
    return number


class InventoryStore:
    """
    In-memory product list. Lives for the lifetime of the process and is
    the only holder of the product records: everything handed out is a copy.
    """

    def __init__(self, products: Optional[Iterable[dict]] = None):
        seed = SEED_PRODUCTS if products is None else products
        self._products: List[Product] = [Product.model_validate(p) for p in seed]
        self._lock = threading.Lock()

    def list_products(self) -> List[Product]:
        with self._lock:
            return [p.model_copy() for p in self._products]

    def update_stock(self, product_id: int, new_quantity: int) -> Product:
        """Set a product's stock to an absolute quantity."""
        new_quantity = _to_whole(new_quantity, "newQuantity")
        if new_quantity < 0:
            raise InvalidArgument(NEGATIVE_STOCK)

        with self._lock:
            product = next((p for p in self._products if p.id == product_id), None)
            if product is None:
                raise NotFound("Product not found.")
            old = product.stock
            product.stock = new_quantity
            updated = product.model_copy()

        logger.info(f"Stock for product {product_id} changed {old} -> {new_quantity}")
        return updated

    def add_product(self, name, price, stock, category, low_stock_threshold=None) -> Product:
        """
        Append a new product and return it.

        price and stock only need to be present, so 0 is a valid value.
        name and category must be non-empty. A falsy threshold falls back to
        DEFAULT_LOW_STOCK_THRESHOLD.
        """
        if not name or price is None or stock is None or not category:
            raise InvalidArgument(MISSING_FIELDS)

        price = _to_number(price, "price")
        stock = _to_whole(stock, "stock")
        threshold = _to_whole(low_stock_threshold or DEFAULT_LOW_STOCK_THRESHOLD, "lowStockThreshold")
        if price < 0:
            raise InvalidArgument("Price cannot be negative.")
        if stock < 0:
            raise InvalidArgument(NEGATIVE_STOCK)
        if threshold < 0:
            raise InvalidArgument("Low stock threshold cannot be negative.")

        with self._lock:
            max_id = max((p.id for p in self._products), default=0)
            product = Product(
                id=max_id + 1,
                name=name,
                price=price,
                stock=stock,
                low_stock_threshold=threshold,
                category=category,
            )
            self._products.append(product)
            created = product.model_copy()

        logger.info(f"Added product {created.id} ({created.name}) in {created.category}")
        return created
