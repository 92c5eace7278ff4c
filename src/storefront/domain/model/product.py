"""Product aggregate.

Products live independently of orders. They have their own lifecycle:
the admin adds, edits and removes them. Orders and cart lines keep their
own deep copies, so none of these edits ever reach them.
"""

from __future__ import annotations

import copy
from dataclasses import dataclass, field
from enum import Enum

from storefront.domain.model.value_objects import Money


class Category(Enum):
    AUDIO = "Audio"
    WEARABLE = "Wearable"
    MOBILE = "Mobile"
    HOME = "Home"

    @classmethod
    def parse(cls, raw: object) -> Category:
        """Return the matching category, falling back to HOME."""
        if isinstance(raw, Category):
            return raw
        for category in cls:
            if isinstance(raw, str) and raw.strip().lower() == category.value.lower():
                return category
        return cls.HOME


@dataclass
class Product:
    """A product in the catalog.

    ``id`` is assigned once by the catalog store and never changes.
    Everything else may be replaced by an admin update.
    """

    id: str
    name: str
    price: Money
    category: Category = Category.HOME
    tagline: str = ""
    description: str = ""
    long_description: str | None = None
    image_url: str = ""
    features: list[str] = field(default_factory=list)

    def __post_init__(self) -> None:
        if self.long_description is None:
            self.long_description = self.description

    def snapshot(self) -> Product:
        """Deep copy decoupled from the catalog entry."""
        return copy.deepcopy(self)
