"""
In-memory item store.

Holds the ordered list of inventory items and the operations over it.
Mutations return result dicts ({"success": True, ...} or {"error": ...})
so the caller can report the outcome without catching exceptions.
"""
from collections import defaultdict
from typing import Any, Dict, List, Optional

from pydantic import ValidationError

from .models import CATEGORIES, LOW_STOCK_THRESHOLD, InventoryItem, is_valid_category
from .validation import validate_sort_order


UPDATABLE_FIELDS = ('quantity', 'price')


def _first_error(exc: ValidationError) -> str:
    """Turn a pydantic ValidationError into a one-line message."""
    error = exc.errors()[0]
    field = '.'.join(str(part) for part in error.get('loc', ()))
    message = error.get('msg', str(exc))
    # Custom validator errors carry a "Value error, " prefix
    message = message.removeprefix('Value error, ')
    return f"{field}: {message}" if field else message


class Inventory:
    """Ordered collection of InventoryItem objects."""

    def __init__(self, unique_ids: bool = False):
        self.items: List[InventoryItem] = []
        self.unique_ids = unique_ids

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self):
        return iter(self.items)

    def is_empty(self) -> bool:
        return not self.items

    def find_item_by_id(self, item_id: str) -> Optional[InventoryItem]:
        """Return the first item with a matching id (case-insensitive), or None."""
        upper_id = item_id.strip().upper()
        for item in self.items:
            if item.id == upper_id:
                return item
        return None

    def add_item(self, category: str, item_id: str, name: str, quantity: int, price: float) -> Dict[str, Any]:
        """Append a new item. The id is uppercased and the category lowercased."""
        if not is_valid_category(category):
            return {"error": f"Category {category.strip()} does not exist!"}

        existing = self.find_item_by_id(item_id)
        if existing is not None and self.unique_ids:
            return {"error": f"Item ID {existing.id} already exists!"}

        try:
            item = InventoryItem(id=item_id, name=name, quantity=quantity, price=price, category=category)
        except ValidationError as e:
            return {"error": f"Invalid item: {_first_error(e)}"}

        self.items.append(item)

        result = {
            "success": True,
            "message": "Item added successfully!",
            "item": item,
        }
        if existing is not None:
            result["warning"] = f"Item ID {item.id} is now used by more than one item"
        return result

    def update_item(self, item_id: str, field: str, new_value: float) -> Dict[str, Any]:
        """Change the quantity or price of the item with the given id."""
        item = self.find_item_by_id(item_id)
        if item is None:
            return {"error": "Item not found!"}

        field = field.strip().lower()
        if field not in UPDATABLE_FIELDS:
            return {"error": "Invalid choice!"}

        try:
            if field == 'quantity':
                old_value = item.update_quantity(new_value)
                old_text, new_text = str(old_value), str(item.quantity)
            else:
                old_value = item.update_price(new_value)
                old_text, new_text = f"{old_value:.2f}", f"{item.price:.2f}"
        except ValidationError as e:
            return {"error": f"Invalid {field}: {_first_error(e)}"}

        return {
            "success": True,
            "message": f"{field.capitalize()} of item {item.name} updated from {old_text} to {new_text}",
            "item": item,
            "field": field,
            "old_value": old_value,
            "new_value": getattr(item, field),
        }

    def remove_item(self, item_id: str) -> Dict[str, Any]:
        """Remove every item sharing the id of the first match."""
        item = self.find_item_by_id(item_id)
        if item is None:
            return {"error": "Item not found!"}

        before = len(self.items)
        self.items = [i for i in self.items if i.id != item.id]

        return {
            "success": True,
            "message": f"Item {item.name} has been removed from the inventory.",
            "item": item,
            "removed": before - len(self.items),
        }

    def all_items(self) -> List[InventoryItem]:
        return list(self.items)

    def items_by_category(self, category: str) -> Dict[str, Any]:
        category = category.strip()
        if not is_valid_category(category):
            return {"error": f"Category {category} does not exist!"}

        wanted = category.lower()
        return {
            "success": True,
            "category": wanted,
            "items": [item for item in self.items if item.category.lower() == wanted],
        }

    def low_stock_items(self, threshold: int = LOW_STOCK_THRESHOLD) -> List[InventoryItem]:
        """Items with quantity strictly below the threshold."""
        return [item for item in self.items if item.quantity < threshold]

    def search_item(self, item_id: str) -> Dict[str, Any]:
        item = self.find_item_by_id(item_id)
        if item is None:
            return {"error": "Item not found!"}
        return {"success": True, "item": item}

    def sort_items(self, order: str) -> Dict[str, Any]:
        """Reorder the store by price. Anything but ascending/descending is a no-op."""
        checked = validate_sort_order(order)
        if not checked.ok:
            return {"error": checked.reason}

        self.items.sort(key=lambda item: item.price, reverse=checked.value == 'descending')
        return {
            "success": True,
            "order": checked.value,
            "message": f"Items sorted by price in {checked.value} order.",
        }

    def find_duplicate_ids(self) -> Dict[str, int]:
        """Map of id -> count for ids stored more than once."""
        counts = defaultdict(int)
        for item in self.items:
            counts[item.id] += 1
        return {item_id: count for item_id, count in counts.items() if count > 1}

    def validate_inventory(self) -> List[str]:
        """
        Check the store for consistency problems and return a list of issues.

        Items are validated on creation, but duplicate ids are allowed unless
        the store was created with unique_ids=True.
        """
        issues = []

        for item_id, count in self.find_duplicate_ids().items():
            issues.append(f"⚠️  Duplicate item ID: {item_id} ({count} items)")

        for item in self.items:
            if item.category not in CATEGORIES:
                issues.append(f"❌ {item.id}: unknown category '{item.category}'")

        return issues
