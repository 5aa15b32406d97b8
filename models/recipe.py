"""
Recipe Models

Contains the CookingConstraints detected in recipe text and the
ScalingWarning values produced when portions change.
"""

from dataclasses import dataclass, field, asdict
from typing import List


@dataclass(frozen=True)
class CookingConstraints:
    """Capacity/baking signals found in a recipe's text."""
    has_capacity_limits: bool = False
    has_baking: bool = False
    equipment: List[str] = field(default_factory=list)
    confidence: float = 0.0

    def to_dict(self):
        return {
            'hasCapacityLimits': self.has_capacity_limits,
            'hasBaking': self.has_baking,
            'equipment': list(self.equipment),
            'confidence': self.confidence,
        }


@dataclass(frozen=True)
class ScalingWarning:
    """A user-facing note about scaling a recipe.

    severity: 'info' | 'warning' | 'critical'
    category: 'capacity' | 'timing' | 'baking'
    """
    severity: str
    message: str
    category: str

    def to_dict(self):
        return asdict(self)
