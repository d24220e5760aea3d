class OssuaryError(Exception):
    """Base exception for the Ossuary project."""


class InventoryError(OssuaryError):
    """Raised when inventory operations fail."""


class InventoryFullError(InventoryError):
    """Raised when adding to an inventory that already holds its maximum."""


class EntityStoreError(OssuaryError, IndexError):
    """Raised for invalid entity store removals (bad index, player slot)."""


class MenuOverflowError(OssuaryError, ValueError):
    """Raised when a menu is built with more options than there are letter labels."""


class ConfigError(OssuaryError):
    """Raised when the YAML configuration cannot be interpreted."""
