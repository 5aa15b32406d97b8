"""
Cooking Constraints Service

Detects equipment capacity limits and baking in recipe text and turns a
portion change into user-facing scaling warnings.
"""

from constants import (
    CAPACITY_LIMITED_EQUIPMENT,
    CONSTRAINT_PHRASES,
    BAKED_GOOD_NAMES,
    EQUIPMENT_CONFIDENCE,
    BAKING_CONFIDENCE,
    PHRASE_CONFIDENCE,
    MAX_PHRASE_CONFIDENCE,
    SIGNIFICANT_SCALE_CHANGE,
    SIGNIFICANT_SERVINGS_CHANGE,
)
from models import CookingConstraints, ScalingWarning

CAPACITY_UP_MESSAGE = (
    'This recipe uses equipment with limited capacity (wok, pan, air fryer, pot, '
    'baking dish, etc.). You may need to cook in batches or use larger cookware.'
)
CAPACITY_DOWN_MESSAGE = (
    'This recipe uses equipment with limited capacity. Smaller portions may require '
    'adjusted cookware sizes or cooking times.'
)
BAKING_UP_MESSAGE = (
    'Baking especially requires careful consideration - pan sizes, heat distribution, '
    'and timing all matter. You may need multiple pans or larger bakeware.'
)
BAKING_DOWN_MESSAGE = (
    'Baking especially requires careful consideration - pan sizes, heat distribution, '
    'and timing all matter. Scaling down may require different pan sizes or adjusted '
    'baking times.'
)


def detect_cooking_constraints(instructions, title=None, description=None):
    """
    Detect cooking constraints in recipe instructions, title and description.

    Baking is only flagged when a baked good is named in the title; generic
    oven wording in the steps is too common to rely on.
    """
    if isinstance(instructions, str):
        instructions = [instructions]

    texts = []
    if instructions:
        texts.append(' '.join(str(step) for step in instructions).lower())
    if title:
        texts.append(title.lower())
    if description:
        texts.append(description.lower())

    if not texts:
        return CookingConstraints()

    all_text = ' '.join(texts)

    equipment = [name for name in CAPACITY_LIMITED_EQUIPMENT if name in all_text]
    phrase_count = sum(1 for phrase in CONSTRAINT_PHRASES if phrase in all_text)
    has_capacity_limits = bool(equipment) or phrase_count > 0

    title_lower = (title or '').lower()
    has_baking = any(name in title_lower for name in BAKED_GOOD_NAMES)

    confidence = 0.0
    if equipment:
        confidence += EQUIPMENT_CONFIDENCE
    if has_baking:
        confidence += BAKING_CONFIDENCE
    if phrase_count:
        confidence += min(phrase_count * PHRASE_CONFIDENCE, MAX_PHRASE_CONFIDENCE)

    return CookingConstraints(
        has_capacity_limits=has_capacity_limits,
        has_baking=has_baking,
        equipment=list(dict.fromkeys(equipment)),
        confidence=min(round(confidence, 2), 1.0),
    )


def check_scaling_constraints(from_portions, to_portions, constraints):
    """
    Build the warnings to show when a recipe is scaled.

    A timing note is added for any change. Capacity and baking warnings are
    only added for significant changes (20% or more, or 2+ servings).
    """
    if not from_portions or from_portions <= 0 or to_portions <= 0:
        return []

    warnings = []
    scale_factor = to_portions / from_portions
    scaling_up = scale_factor > 1
    scaling_down = scale_factor < 1

    if from_portions != to_portions:
        if scaling_up:
            change = ("increase when scaling up, but not proportionally. "
                      "For example, doubling portions doesn't mean double time.")
        else:
            change = 'decrease when scaling down, but not proportionally.'
        warnings.append(ScalingWarning(
            severity='info',
            message=f"Cooking times may {change} Monitor food closely and adjust as needed.",
            category='timing',
        ))

    significant = (abs(scale_factor - 1) >= SIGNIFICANT_SCALE_CHANGE
                   or abs(to_portions - from_portions) >= SIGNIFICANT_SERVINGS_CHANGE)
    if not significant:
        return warnings

    if constraints.has_capacity_limits:
        if scaling_up:
            warnings.append(ScalingWarning('warning', CAPACITY_UP_MESSAGE, 'capacity'))
        elif scaling_down:
            warnings.append(ScalingWarning('info', CAPACITY_DOWN_MESSAGE, 'capacity'))

    if constraints.has_baking:
        if scaling_up:
            warnings.append(ScalingWarning('warning', BAKING_UP_MESSAGE, 'baking'))
        elif scaling_down:
            warnings.append(ScalingWarning('warning', BAKING_DOWN_MESSAGE, 'baking'))

    return warnings
