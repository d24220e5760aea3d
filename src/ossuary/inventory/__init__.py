from .inventory import MAX_INVENTORY_ITEMS, Inventory

__all__ = ["Inventory", "MAX_INVENTORY_ITEMS"]
