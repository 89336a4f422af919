"""
Text table rendering for inventory items.
"""
from typing import Iterable, List

from .models import InventoryItem


# (heading, width) for each column, right-aligned
COLUMNS = [
    ('ID', 10),
    ('Name', 20),
    ('Quantity', 10),
    ('Price', 10),
    ('Category', 20),
]

EMPTY_INVENTORY = "Empty items"
NOTHING_TO_SEARCH = "There is no item to search."
NO_ITEMS = "No items."
NO_LOW_STOCK = "No low stock items."


def format_header() -> str:
    return ''.join(f"{heading:>{width}}" for heading, width in COLUMNS)


def format_item(item: InventoryItem) -> str:
    """Format one item as a fixed-width row."""
    return (
        f"{item.id:>10}"
        f"{item.name:>20}"
        f"{item.quantity:>10}"
        f"{item.price:>10.2f}"
        f"{item.category:>20}"
    )


def format_table(items: Iterable[InventoryItem]) -> str:
    lines: List[str] = [format_header()]
    lines.extend(format_item(item) for item in items)
    return '\n'.join(lines)


def no_items_in_category(category: str) -> str:
    return f"No items in category {category}."
