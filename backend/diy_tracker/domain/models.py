"""Project, Material and TutorialStep entities.

Attributes are snake_case in Python and camelCase on the wire
(``estimated_time`` <-> ``estimatedTime``), so persisted snapshots and HTTP
payloads keep the browser-era key names.

Each entity has three shapes:
- ``*Fields``: everything a caller supplies on creation
- the entity itself: ``*Fields`` plus the store-assigned attributes
- ``*Update``: every caller-editable attribute, all optional, for partial updates
"""

from datetime import datetime
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base model that reads and writes camelCase keys."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ProjectStatus(str, Enum):
    """Where a project sits in its lifecycle."""

    PLANNING = "planning"
    IN_PROGRESS = "in-progress"
    COMPLETED = "completed"
    ON_HOLD = "on-hold"


class Difficulty(str, Enum):
    BEGINNER = "beginner"
    INTERMEDIATE = "intermediate"
    ADVANCED = "advanced"


# ──────────────────────────────────────────────────────────────────────────────
# Material
# ──────────────────────────────────────────────────────────────────────────────


class MaterialFields(CamelModel):
    name: str
    quantity: float = 1
    unit: str = ""
    purchased: bool = False
    cost: float | None = None
    notes: str | None = None


class Material(MaterialFields):
    """An item needed for a project. Owned by exactly one Project."""

    id: str


class MaterialUpdate(CamelModel):
    name: str | None = None
    quantity: float | None = None
    unit: str | None = None
    purchased: bool | None = None
    cost: float | None = None
    notes: str | None = None


# ──────────────────────────────────────────────────────────────────────────────
# TutorialStep
# ──────────────────────────────────────────────────────────────────────────────


class TutorialStepFields(CamelModel):
    title: str
    description: str = ""
    completed: bool = False
    estimated_time: float | None = None  # minutes
    image_url: str | None = None
    # Free-text material names for display, not references to Material ids
    materials: list[str] | None = None


class TutorialStep(TutorialStepFields):
    """One instruction in a project's build sequence. List position is the step number."""

    id: str


class TutorialStepUpdate(CamelModel):
    title: str | None = None
    description: str | None = None
    completed: bool | None = None
    estimated_time: float | None = None
    image_url: str | None = None
    materials: list[str] | None = None


# ──────────────────────────────────────────────────────────────────────────────
# Project
# ──────────────────────────────────────────────────────────────────────────────


class ProjectFields(CamelModel):
    title: str
    description: str = ""
    category: str = ""
    status: ProjectStatus = ProjectStatus.PLANNING
    difficulty: Difficulty = Difficulty.BEGINNER
    estimated_time: float = 0  # hours
    actual_time: float | None = None
    image_url: str | None = None
    budget: float | None = None
    total_cost: float | None = None
    materials: list[Material] = Field(default_factory=list)
    tutorial_steps: list[TutorialStep] = Field(default_factory=list)


class Project(ProjectFields):
    """A tracked DIY undertaking.

    ``id``, ``created_at``, ``updated_at`` and ``progress`` are assigned by the
    store and never supplied by callers on creation.
    """

    id: str
    created_at: datetime
    updated_at: datetime
    progress: int = 0


class ProjectUpdate(CamelModel):
    title: str | None = None
    description: str | None = None
    category: str | None = None
    status: ProjectStatus | None = None
    difficulty: Difficulty | None = None
    estimated_time: float | None = None
    actual_time: float | None = None
    image_url: str | None = None
    budget: float | None = None
    total_cost: float | None = None
    materials: list[Material] | None = None
    tutorial_steps: list[TutorialStep] | None = None
    # Accepted as given; the next step mutation re-derives it
    progress: int | None = None


class Snapshot(CamelModel):
    """The full project collection, as persisted."""

    projects: list[Project] = Field(default_factory=list)

    def to_document(self) -> dict:
        """Render the JSON document written to snapshot storage.

        Unset optional attributes are omitted rather than written as null.
        """
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)
