"""
Diet adherence summary.

Pure computation over a user's meals, already ordered by the caller. Nothing
here touches the database, so it is safe to call from any request concurrently.
"""

from dataclasses import dataclass, field
from typing import List, Sequence

from domain.models import Meal


@dataclass(frozen=True)
class DietSummary:
    """Aggregate diet statistics for one user's meals."""

    amount: int = 0
    amount_in_diet: int = 0
    amount_not_in_diet: int = 0
    best_sequence_in_diet: List[Meal] = field(default_factory=list)


def summarize(meals: Sequence[Meal]) -> DietSummary:
    """
    Count meals and find the longest run of consecutive in-diet meals.

    The run is taken in the order ``meals`` is given; the input is neither
    sorted nor mutated. When two runs have the same length the earlier one
    is kept.

    Args:
        meals: All meals of a single user in a stable order (any objects
            exposing an ``in_diet`` attribute are accepted)

    Returns:
        DietSummary with counts and the best in-diet run
    """
    amount_in_diet = 0
    best_run: List[Meal] = []
    current_run: List[Meal] = []

    for meal in meals:
        if meal.in_diet:
            amount_in_diet += 1
            current_run.append(meal)
            # strictly longer only: ties keep the leftmost run
            if len(current_run) > len(best_run):
                best_run = list(current_run)
        else:
            current_run = []

    return DietSummary(
        amount=len(meals),
        amount_in_diet=amount_in_diet,
        amount_not_in_diet=len(meals) - amount_in_diet,
        best_sequence_in_diet=best_run,
    )
