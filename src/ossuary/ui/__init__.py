"""Presentation layer: menus, the renderer interface and its backends."""
