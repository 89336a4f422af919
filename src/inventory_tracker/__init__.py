"""
Inventory Tracker - A console inventory management system

Features:
- Add, update and remove items (id, name, quantity, price, category)
- Filter by category or low stock, search by ID
- Sort the inventory by price
- Interactive numbered menu
"""

__version__ = "0.1.0"

from .models import (
    CATEGORIES,
    LOW_STOCK_THRESHOLD,
    InventoryItem,
)
from .store import Inventory
from .validation import (
    ValidationResult,
    validate_category,
    validate_price,
    validate_quantity,
)

__all__ = [
    "CATEGORIES",
    "LOW_STOCK_THRESHOLD",
    "InventoryItem",
    "Inventory",
    "ValidationResult",
    "validate_category",
    "validate_price",
    "validate_quantity",
]
