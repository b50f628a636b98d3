"""Pydantic schemas for the project API.

Request schemas add the input checks the store deliberately does not make
(non-empty titles and names, non-negative amounts). Responses use the same
camelCase keys as the persisted snapshot.
"""

from typing import Annotated

from pydantic import Field, StringConstraints, field_validator

from diy_tracker.domain.models import (
    CamelModel,
    MaterialFields,
    MaterialUpdate,
    Project,
    ProjectFields,
    ProjectUpdate,
    TutorialStepFields,
    TutorialStepUpdate,
)
from diy_tracker.domain.summaries import MaterialTotals, ProjectStats, StepTotals

RequiredText = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]
NonNegative = Annotated[float, Field(ge=0)]


def _unique_ids(items: list | None) -> list | None:
    """Child ids are client-chosen in a full-list write; reject repeats."""
    if items is None:
        return items
    seen = set()
    for item in items:
        if item.id in seen:
            raise ValueError(f"duplicate id '{item.id}'")
        seen.add(item.id)
    return items


class ProjectCreateRequest(ProjectFields):
    title: RequiredText
    estimated_time: NonNegative = 0
    budget: NonNegative | None = None

    @field_validator("materials", "tutorial_steps")
    @classmethod
    def check_unique_ids(cls, items):
        return _unique_ids(items)


class ProjectUpdateRequest(ProjectUpdate):
    title: RequiredText | None = None
    estimated_time: NonNegative | None = None
    budget: NonNegative | None = None
    progress: Annotated[int, Field(ge=0, le=100)] | None = None

    @field_validator("materials", "tutorial_steps")
    @classmethod
    def check_unique_ids(cls, items):
        return _unique_ids(items)


class MaterialCreateRequest(MaterialFields):
    name: RequiredText
    quantity: NonNegative = 1
    cost: NonNegative | None = None


class MaterialUpdateRequest(MaterialUpdate):
    name: RequiredText | None = None
    quantity: NonNegative | None = None
    cost: NonNegative | None = None


class StepCreateRequest(TutorialStepFields):
    title: RequiredText
    estimated_time: NonNegative | None = None


class StepUpdateRequest(TutorialStepUpdate):
    title: RequiredText | None = None
    estimated_time: NonNegative | None = None


class MaterialSummary(CamelModel):
    """Totals shown above the materials checklist."""

    total_cost: float = Field(..., description="Sum of material costs, missing cost counted as 0")
    purchased: int = Field(..., description="Materials marked purchased")
    count: int = Field(..., description="Materials on the list")

    @classmethod
    def from_totals(cls, totals: MaterialTotals) -> "MaterialSummary":
        return cls(total_cost=float(totals.total_cost), purchased=totals.purchased, count=totals.count)


class StepSummary(CamelModel):
    """Totals shown above the tutorial steps."""

    completed: int = Field(..., description="Steps marked completed")
    count: int = Field(..., description="Steps in the tutorial")
    estimated_minutes: float = Field(..., description="Sum of step estimates in minutes")

    @classmethod
    def from_totals(cls, totals: StepTotals) -> "StepSummary":
        return cls(completed=totals.completed, count=totals.count, estimated_minutes=totals.estimated_minutes)


class ProjectDetailResponse(Project):
    """A project with its material and step totals."""

    material_summary: MaterialSummary
    step_summary: StepSummary


class ProjectStatsResponse(CamelModel):
    """Dashboard counters across all projects."""

    total: int
    in_progress: int
    completed: int
    average_progress: int = Field(..., ge=0, le=100)
    categories: list[str] = Field(default_factory=list, description="Categories in use, first-seen order")

    @classmethod
    def from_stats(cls, stats: ProjectStats, categories: list[str]) -> "ProjectStatsResponse":
        return cls(
            total=stats.total,
            in_progress=stats.in_progress,
            completed=stats.completed,
            average_progress=stats.average_progress,
            categories=categories,
        )
