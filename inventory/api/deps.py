from fastapi import Request
from inventory.services.inventory_service import InventoryStore


def get_store(request: Request) -> InventoryStore:
    return request.app.state.store
