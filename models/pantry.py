"""
Pantry Models

Contains the PantryItem value read by the pantry matcher and the
PantryMatch result it returns.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class PantryItem:
    """Ingredient a user already has. Quantity/unit only for countable items."""
    name: str
    category: str = 'other'
    quantity: Optional[float] = None
    unit: Optional[str] = None
    id: str = ''
    owner_id: str = ''
    created_at: Optional[str] = None
    updated_at: Optional[str] = None

    @classmethod
    def from_dict(cls, data):
        quantity = data.get('quantity')
        try:
            quantity = float(quantity) if quantity is not None else None
        except (ValueError, TypeError):
            quantity = None
        return cls(
            name=str(data.get('name') or ''),
            category=str(data.get('category') or 'other'),
            quantity=quantity,
            unit=data.get('unit') or None,
            id=str(data.get('id') or ''),
            owner_id=str(data.get('ownerId') or ''),
            created_at=data.get('createdAt'),
            updated_at=data.get('updatedAt'),
        )

    def to_dict(self):
        return {
            'id': self.id,
            'ownerId': self.owner_id,
            'name': self.name,
            'category': self.category,
            'quantity': self.quantity,
            'unit': self.unit,
            'createdAt': self.created_at,
            'updatedAt': self.updated_at,
        }


@dataclass(frozen=True)
class PantryMatch:
    """Result of matching a grocery name against the pantry.

    match_type is 'exact', 'fuzzy' or None (no match, item is None).
    """
    item: Optional[PantryItem] = None
    match_type: Optional[str] = None

    def to_dict(self):
        return {
            'item': self.item.to_dict() if self.item else None,
            'matchType': self.match_type,
        }
