"""Product model for catalog file representation."""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping

# Checked in this order; the first missing one is reported.
REQUIRED_FIELDS = ("title", "description", "code", "price", "stock", "category")


@dataclass
class Product:
    """Product data model representing one catalog record."""

    id: int
    title: str
    description: str
    code: str  # Unique across the catalog
    price: float
    stock: int
    category: str
    status: bool = True
    thumbnails: List[str] = field(default_factory=list)
    extra: Dict[str, Any] = field(default_factory=dict)  # Caller fields outside the schema

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Product":
        """Build a Product from a decoded JSON object.

        Args:
            data: Mapping with at least ``id`` and every required field.

        Returns:
            The Product, with unknown keys kept in ``extra``.

        Raises:
            KeyError: If ``id`` or a required field is missing.
        """
        for name in ("id",) + REQUIRED_FIELDS:
            if name not in data:
                raise KeyError(name)

        extra = {key: value for key, value in data.items() if key not in _FIELD_NAMES}

        return cls(
            id=data["id"],
            title=data["title"],
            description=data["description"],
            code=data["code"],
            price=data["price"],
            stock=data["stock"],
            category=data["category"],
            status=data.get("status", True),
            thumbnails=list(data.get("thumbnails", [])),
            extra=extra,
        )

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to a JSON-ready dict, schema fields first."""
        data = {
            "id": self.id,
            "title": self.title,
            "description": self.description,
            "code": self.code,
            "price": self.price,
            "stock": self.stock,
            "category": self.category,
            "status": self.status,
            "thumbnails": self.thumbnails,
        }
        data.update(self.extra)
        return data


_FIELD_NAMES = frozenset(
    ("id",) + REQUIRED_FIELDS + ("status", "thumbnails")
)
