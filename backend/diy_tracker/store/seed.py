"""Demo projects for a first run with an empty store."""

import structlog

from diy_tracker.domain.models import (
    Difficulty,
    MaterialFields,
    ProjectFields,
    ProjectStatus,
    TutorialStepFields,
)
from diy_tracker.store.project_store import ProjectStore

logger = structlog.get_logger(__name__)

DEMO_PROJECTS = [
    {
        "project": ProjectFields(
            title="Kitchen Cabinet Makeover",
            description="Transform old kitchen cabinets with paint and new hardware for a fresh modern look.",
            category="Home Improvement",
            status=ProjectStatus.IN_PROGRESS,
            difficulty=Difficulty.INTERMEDIATE,
            estimated_time=16,
            image_url="https://images.unsplash.com/photo-1586023492125-27b2c045efd7?w=400&h=300&fit=crop",
            budget=300,
        ),
        "materials": [
            MaterialFields(name="Cabinet Paint", quantity=2, unit="gallons", purchased=True, cost=89.99),
            MaterialFields(name="Cabinet Hardware", quantity=20, unit="pieces", purchased=False, cost=120.00),
            MaterialFields(name="Sandpaper", quantity=5, unit="sheets", purchased=True, cost=15.99),
        ],
        "steps": [
            TutorialStepFields(title="Remove Cabinet Doors", description="Carefully remove all cabinet doors and hardware", completed=True, estimated_time=60),
            TutorialStepFields(title="Sand Surfaces", description="Sand all surfaces to prepare for painting", completed=True, estimated_time=180),
            TutorialStepFields(title="Prime Cabinets", description="Apply primer to all cabinet surfaces", completed=False, estimated_time=120),
            TutorialStepFields(title="Paint Cabinets", description="Apply paint in thin, even coats", completed=False, estimated_time=180),
        ],
    },
    {
        "project": ProjectFields(
            title="Garden Storage Bench",
            description="Build a weatherproof storage bench for garden tools and outdoor cushions.",
            category="Garden",
            status=ProjectStatus.COMPLETED,
            difficulty=Difficulty.BEGINNER,
            estimated_time=8,
            image_url="https://images.unsplash.com/photo-1416879595882-3373a0480b5b?w=400&h=300&fit=crop",
            budget=150,
        ),
        "materials": [
            MaterialFields(name="Cedar Boards", quantity=6, unit="pieces", purchased=True, cost=75.00),
            MaterialFields(name="Wood Screws", quantity=1, unit="box", purchased=True, cost=12.99),
            MaterialFields(name="Wood Stain", quantity=1, unit="quart", purchased=True, cost=28.99),
        ],
        "steps": [
            TutorialStepFields(title="Cut Wood to Size", description="Cut all cedar boards to the required dimensions", completed=True, estimated_time=45),
            TutorialStepFields(title="Assemble Frame", description="Build the basic frame structure", completed=True, estimated_time=90),
            TutorialStepFields(title="Add Storage Compartment", description="Create the internal storage space", completed=True, estimated_time=60),
            TutorialStepFields(title="Apply Stain", description="Stain the bench for weather protection", completed=True, estimated_time=90),
        ],
    },
]


def seed_demo_projects(store: ProjectStore) -> int:
    """Create the demo projects if the store holds no projects. Idempotent.

    Skipped after a failed load: the empty store is then not really empty.

    Goes through the normal store operations, so ids, timestamps and
    progress are derived exactly as for user-created projects.

    Returns:
        Number of projects created (0 when the store was not empty)
    """
    if store.load_failed:
        logger.info("demo_seed_skipped", reason="load_failed")
        return 0
    if store.project_count:
        logger.info("demo_seed_skipped", reason="store_not_empty")
        return 0

    for demo in DEMO_PROJECTS:
        project = store.create_project(demo["project"])
        for material in demo["materials"]:
            store.add_material(project.id, material)
        for step in demo["steps"]:
            store.add_tutorial_step(project.id, step)

    logger.info("demo_projects_seeded", count=len(DEMO_PROJECTS))
    return len(DEMO_PROJECTS)
