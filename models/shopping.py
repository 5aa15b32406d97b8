"""
Shopping Models

Contains the GroceryItem and CandidateItem values handled by the grocery
grouping engine, plus the CategoryGroup and DuplicateResult views it returns.
Persistence is owned by the caller; these are plain values.
"""

from dataclasses import dataclass, field
from typing import List, Optional, Tuple


def _float_or(value, default):
    try:
        return float(value)
    except (ValueError, TypeError):
        return default


@dataclass
class GroceryItem:
    """Grocery list entry as stored by the list owner."""
    name: str
    quantity: float = 1.0
    unit: str = ''
    category: Optional[str] = None
    notes: str = ''
    completed: bool = False
    id: str = ''
    list_id: str = ''    # list membership, external
    owner_id: str = ''
    created_at: Optional[str] = None  # ISO timestamps, set by the store
    updated_at: Optional[str] = None

    @classmethod
    def from_dict(cls, data):
        return cls(
            name=str(data.get('name') or ''),
            quantity=_float_or(data.get('quantity'), 1.0),
            unit=str(data.get('unit') or ''),
            category=data.get('category') or None,
            notes=str(data.get('notes') or ''),
            completed=bool(data.get('completed', False)),
            id=str(data.get('id') or ''),
            list_id=str(data.get('listId') or ''),
            owner_id=str(data.get('ownerId') or ''),
            created_at=data.get('createdAt'),
            updated_at=data.get('updatedAt'),
        )

    def to_dict(self):
        return {
            'id': self.id,
            'listId': self.list_id,
            'ownerId': self.owner_id,
            'name': self.name,
            'quantity': self.quantity,
            'unit': self.unit,
            'category': self.category,
            'notes': self.notes,
            'completed': self.completed,
            'createdAt': self.created_at,
            'updatedAt': self.updated_at,
        }


@dataclass
class CandidateItem:
    """Item about to be added to a list (no identity yet)."""
    name: str
    quantity: float = 1.0
    unit: str = ''
    category: Optional[str] = None
    notes: str = ''

    @classmethod
    def from_dict(cls, data):
        return cls(
            name=str(data.get('name') or ''),
            quantity=_float_or(data.get('quantity'), 1.0),
            unit=str(data.get('unit') or ''),
            category=data.get('category') or None,
            notes=str(data.get('notes') or ''),
        )

    @classmethod
    def from_parsed(cls, parsed, category=None):
        return cls(name=parsed.name, quantity=parsed.quantity, unit=parsed.unit,
                   category=category, notes=parsed.notes)

    def to_dict(self):
        return {
            'name': self.name,
            'quantity': self.quantity,
            'unit': self.unit,
            'category': self.category,
            'notes': self.notes,
        }


@dataclass
class CategoryGroup:
    """Display bucket: one category and its similarity clusters."""
    category: str
    groups: List[List[GroceryItem]] = field(default_factory=list)

    def to_dict(self):
        return {
            'category': self.category,
            'groups': [[item.to_dict() for item in group] for group in self.groups],
        }


@dataclass
class DuplicateResult:
    """Incoming items split into merge targets and brand new entries."""
    to_merge: List[Tuple[GroceryItem, CandidateItem]] = field(default_factory=list)
    to_add: List[CandidateItem] = field(default_factory=list)

    def to_dict(self):
        return {
            'toMerge': [{'existing': existing.to_dict(), 'new': new.to_dict()}
                        for existing, new in self.to_merge],
            'toAdd': [item.to_dict() for item in self.to_add],
        }
