"""
Data model for inventory items.
"""
from pydantic import BaseModel, ConfigDict, Field, field_validator


CATEGORIES = ("clothing", "electronics", "entertainment")

# Items with quantity strictly below this are low stock
LOW_STOCK_THRESHOLD = 5


def is_valid_category(category: str) -> bool:
    """Check a category name against CATEGORIES, ignoring case."""
    return category.strip().lower() in CATEGORIES


class InventoryItem(BaseModel):
    """A single inventory record."""
    model_config = ConfigDict(validate_assignment=True)

    id: str
    name: str
    quantity: int = Field(ge=0)
    price: float = Field(ge=0, allow_inf_nan=False)
    category: str

    @field_validator('id')
    @classmethod
    def normalize_id(cls, value: str) -> str:
        return value.strip().upper()

    @field_validator('category')
    @classmethod
    def normalize_category(cls, value: str) -> str:
        value = value.strip().lower()
        if value not in CATEGORIES:
            raise ValueError(f"Category {value} does not exist!")
        return value

    def update_quantity(self, new_quantity: int) -> int:
        """Set a new quantity and return the old one."""
        old = self.quantity
        self.quantity = new_quantity
        return old

    def update_price(self, new_price: float) -> float:
        """Set a new price and return the old one."""
        old = self.price
        self.price = new_price
        return old
