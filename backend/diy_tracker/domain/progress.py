"""Deterministic progress computation functions.

Pure functions with no external dependencies.
"""

from collections.abc import Sequence

from diy_tracker.domain.models import TutorialStep


def round_half_up(numerator: int, denominator: int) -> int:
    """Round ``numerator / denominator`` to the nearest integer, halves up.

    Integer arithmetic, so 12.5 always becomes 13 (Python's ``round`` would
    give 12).
    """
    return (2 * numerator + denominator) // (2 * denominator)


def compute_step_progress(steps: Sequence[TutorialStep]) -> int:
    """Compute project progress (0-100) from its tutorial steps.

    Args:
        steps: The project's tutorial steps, in order

    Returns:
        Percentage of completed steps, rounded half up; 0 for no steps
    """
    if not steps:
        return 0

    completed = sum(1 for step in steps if step.completed)
    return round_half_up(100 * completed, len(steps))
