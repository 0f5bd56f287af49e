"""
Cost resolution service for trip budgets.

A trip carries optional per-category daily cost overrides, stored in cents.
City presets are resolved to major currency units before they reach this
module. Everything here is a pure computation over already-validated values.
"""
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Dict, Iterable, List, Optional
from tripcalc.models.city import TravelStyle
from tripcalc.models.trip import TripStyle

COST_CATEGORIES = ("accommodation", "food", "transport", "activities")

# Share of the planned total within which spending counts as on track
ON_TRACK_TOLERANCE = Decimal("0.05")

TRIP_STYLE_TO_TRAVEL_STYLE = {
    TripStyle.BUDGET: TravelStyle.BUDGET,
    TripStyle.MID_RANGE: TravelStyle.MID_RANGE,
    TripStyle.LUXURY: TravelStyle.LUXURY,
}


@dataclass(frozen=True)
class DailyCostSet:
    """Fully populated daily costs in major currency units."""
    accommodation: Decimal
    food: Decimal
    transport: Decimal
    activities: Decimal

    @classmethod
    def zero(cls) -> "DailyCostSet":
        return cls(Decimal(0), Decimal(0), Decimal(0), Decimal(0))

    @classmethod
    def from_cents(cls, preset) -> "DailyCostSet":
        """Build from a preset whose category attributes are in cents."""
        return cls(**{category: _cents_to_units(getattr(preset, category)) for category in COST_CATEGORIES})

    @property
    def total(self) -> Decimal:
        return self.accommodation + self.food + self.transport + self.activities

    def as_dict(self) -> Dict[str, Decimal]:
        return {category: getattr(self, category) for category in COST_CATEGORIES}


@dataclass(frozen=True)
class CategoryBudget:
    """Planned vs. actual spending for one cost category."""
    category: str
    planned: Decimal
    actual: Decimal
    difference: Decimal
    percent_used: float


@dataclass(frozen=True)
class BudgetSummary:
    """Planned vs. actual spending for a whole trip, major currency units."""
    days: int
    daily_total: Decimal
    planned_total: Decimal
    actual_total: Decimal
    difference: Decimal
    percent_used: float
    status: str  # onTrack, underBudget or overBudget
    categories: List[CategoryBudget] = field(default_factory=list)


def _cents_to_units(cents: int) -> Decimal:
    return Decimal(cents) / 100


def _percent(part: Decimal, whole: Decimal) -> float:
    return float(part / whole * 100) if whole > 0 else 0.0


def trip_overrides(trip) -> Dict[str, Optional[int]]:
    """Read the four override fields of a trip, None where not set."""
    return {category: getattr(trip, f"budget_{category}", None) for category in COST_CATEGORIES}


def is_override_set(override: Optional[int]) -> bool:
    """
    Whether an override takes precedence over the city default.

    A zero override counts as not set, so a user cannot force a genuine
    zero-cost category; clearing a value to 0 falls back to the city default.
    """
    return override is not None and override != 0


def resolve_effective_costs(trip, city_defaults: DailyCostSet) -> DailyCostSet:
    """
    Resolve the daily costs a trip's budget is calculated from.

    Each category is resolved independently: a set override (cents) is
    converted to major units, otherwise the city default for that category
    is used.

    Args:
        trip: Object exposing budget_accommodation, budget_food,
            budget_transport and budget_activities (Optional[int], cents)
        city_defaults: City preset for the trip's travel style (major units)

    Returns:
        DailyCostSet with every category populated
    """
    resolved = {}
    for category, override in trip_overrides(trip).items():
        if is_override_set(override):
            resolved[category] = _cents_to_units(override)
        else:
            resolved[category] = getattr(city_defaults, category)
    return DailyCostSet(**resolved)


def count_custom_costs(trip) -> int:
    """Number of categories (0-4) with a set override."""
    return sum(1 for override in trip_overrides(trip).values() if is_override_set(override))


def has_custom_costs(trip) -> bool:
    """True if at least one category is overridden."""
    return count_custom_costs(trip) > 0


def travel_style_for(trip_style: TripStyle) -> TravelStyle:
    """Map a trip's style to the matching city preset key."""
    return TRIP_STYLE_TO_TRAVEL_STYLE[TripStyle(trip_style)]


def summarize_budget(costs: DailyCostSet, days: int, expenses: Iterable) -> BudgetSummary:
    """
    Compare the planned budget with recorded expenses.

    Expenses expose `category` (ItemCategory or its string value) and
    `amount` in cents. SHOPPING and OTHER expenses count toward the actual
    total but have no planned category of their own.
    """
    actual_by_category: Dict[str, Decimal] = {}
    for expense in expenses:
        key = getattr(expense.category, "value", expense.category).lower()
        actual_by_category[key] = actual_by_category.get(key, Decimal(0)) + _cents_to_units(expense.amount)

    planned_total = costs.total * days
    actual_total = sum(actual_by_category.values(), Decimal(0))
    difference = planned_total - actual_total

    if abs(difference) < planned_total * ON_TRACK_TOLERANCE:
        status = "onTrack"
    elif difference >= 0:
        status = "underBudget"
    else:
        status = "overBudget"

    categories = []
    for category in COST_CATEGORIES:
        planned = getattr(costs, category) * days
        actual = actual_by_category.get(category, Decimal(0))
        categories.append(CategoryBudget(
            category=category,
            planned=planned,
            actual=actual,
            difference=planned - actual,
            percent_used=_percent(actual, planned)
        ))

    return BudgetSummary(
        days=days,
        daily_total=costs.total,
        planned_total=planned_total,
        actual_total=actual_total,
        difference=difference,
        percent_used=_percent(actual_total, planned_total),
        status=status,
        categories=categories
    )
