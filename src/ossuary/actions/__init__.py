from .drop import drop_item
from .pickup import PickupOutcome, pick_item_up, pickup

__all__ = ["PickupOutcome", "pickup", "pick_item_up", "drop_item"]
