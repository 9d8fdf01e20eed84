"""Truth algebras."""

from .truth import LOGICS, Boolean, Godel, Lukasiewicz, Product, Truth, get_logic, resolve_logic

__all__ = ["Truth", "Boolean", "Lukasiewicz", "Godel", "Product", "LOGICS", "get_logic", "resolve_logic"]
