"""Read-only derivations over project snapshots.

These back the list view (search/filter, dashboard counters) and the
materials/steps panels. Pure functions -- no store access, no side effects.
"""

from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal

from diy_tracker.domain.models import Material, Project, ProjectStatus, TutorialStep
from diy_tracker.domain.progress import compute_step_progress, round_half_up

# Categories offered when creating a project
PRESET_CATEGORIES = [
    "Home Improvement",
    "Furniture",
    "Decor",
    "Garden",
    "Electronics",
    "Automotive",
    "Crafts",
    "Other",
]

# Filter value meaning "do not filter on this attribute"
ALL = "all"

CENTS = Decimal("0.01")


@dataclass
class ProjectStats:
    """Dashboard counters for the whole collection."""

    total: int
    in_progress: int
    completed: int
    average_progress: int


@dataclass
class MaterialTotals:
    total_cost: Decimal
    purchased: int
    count: int


@dataclass
class StepTotals:
    completed: int
    count: int
    estimated_minutes: float
    progress: int


def _is_unset(value: str | None) -> bool:
    return value is None or value == ALL


def filter_projects(
    projects: Iterable[Project],
    search: str | None = None,
    status: str | None = None,
    difficulty: str | None = None,
    category: str | None = None,
) -> list[Project]:
    """Return the projects matching every given filter, in their original order.

    Args:
        projects: Projects to filter
        search: Case-insensitive substring matched against title or description
        status: Exact status value (e.g. "in-progress")
        difficulty: Exact difficulty value
        category: Exact category name

    ``None`` or ``"all"`` disables the corresponding filter; an empty search
    matches everything.
    """
    needle = (search or "").lower()

    def matches(project: Project) -> bool:
        if needle and needle not in project.title.lower() and needle not in project.description.lower():
            return False
        if not _is_unset(status) and project.status.value != status:
            return False
        if not _is_unset(difficulty) and project.difficulty.value != difficulty:
            return False
        if not _is_unset(category) and project.category != category:
            return False
        return True

    return [project for project in projects if matches(project)]


def project_stats(projects: Sequence[Project]) -> ProjectStats:
    """Compute dashboard counters.

    Average progress is the half-up rounded mean of stored progress values,
    0 when there are no projects.
    """
    total = len(projects)
    average = round_half_up(sum(p.progress for p in projects), total) if total else 0
    return ProjectStats(
        total=total,
        in_progress=sum(1 for p in projects if p.status == ProjectStatus.IN_PROGRESS),
        completed=sum(1 for p in projects if p.status == ProjectStatus.COMPLETED),
        average_progress=average,
    )


def categories_in_use(projects: Iterable[Project]) -> list[str]:
    """Unique project categories in first-seen order."""
    return list(dict.fromkeys(p.category for p in projects))


def material_totals(materials: Sequence[Material]) -> MaterialTotals:
    """Sum material costs (missing cost counts as zero) and count purchases."""
    total = sum((Decimal(str(m.cost)) for m in materials if m.cost is not None), Decimal("0"))
    return MaterialTotals(
        total_cost=total.quantize(CENTS, rounding=ROUND_HALF_UP),
        purchased=sum(1 for m in materials if m.purchased),
        count=len(materials),
    )


def step_totals(steps: Sequence[TutorialStep]) -> StepTotals:
    """Count completed steps and sum estimated minutes (missing estimate counts as zero)."""
    return StepTotals(
        completed=sum(1 for s in steps if s.completed),
        count=len(steps),
        estimated_minutes=sum(s.estimated_time or 0 for s in steps),
        progress=compute_step_progress(steps),
    )
