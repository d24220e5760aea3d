from .tags import ItemTag, UseResult

__all__ = ["ItemTag", "UseResult"]
