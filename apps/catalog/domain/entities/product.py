"""
Product entity.
"""
from dataclasses import dataclass, field
from typing import List

from shared.domain import BaseEntity
from ..value_objects.money import Money
from ..exceptions import InvalidProductError

PLACEHOLDER_IMAGE = "assets/images/placeholder.jpg"


@dataclass(eq=False)
class Product(BaseEntity):
    """A purchasable catalog entry. Identity is the spreadsheet product id."""
    name: str
    price: Money
    description: str = ""
    category: str = ""
    image_url: str = PLACEHOLDER_IMAGE
    images: List[str] = field(default_factory=list)
    sizes: List[str] = field(default_factory=list)
    colors: List[str] = field(default_factory=list)
    age_range: str = ""
    in_stock: bool = True

    def __post_init__(self):
        self._validate()

    def _validate(self) -> None:
        """Validate product data."""
        if not self.id:
            raise InvalidProductError("Product id is required")
        if not self.name:
            raise InvalidProductError(f"Product '{self.id}' has no name")
        if self.price.amount < 0:
            raise InvalidProductError("Price must be non-negative")
        if not self.image_url:
            self.image_url = self.images[0] if self.images else PLACEHOLDER_IMAGE

    def matches(self, term: str) -> bool:
        """Case-insensitive match against name, description and category."""
        needle = term.strip().lower()
        if not needle:
            return True
        return any(
            needle in value.lower()
            for value in (self.name, self.description, self.category)
        )

    def has_size(self, size: str) -> bool:
        return size in self.sizes
