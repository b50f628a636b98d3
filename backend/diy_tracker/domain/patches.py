"""Partial-update (shallow merge) rules, one function per entity type.

Every attribute set on the patch replaces the prior value wholesale; attributes
left unset keep their prior value. Lists are never merged element-wise.

Explicitly setting an attribute to ``None`` clears it when the entity treats
the attribute as optional, and is ignored when the attribute is mandatory.
"""

from pydantic import BaseModel

from diy_tracker.domain.models import (
    Material,
    MaterialUpdate,
    Project,
    ProjectUpdate,
    TutorialStep,
    TutorialStepUpdate,
)

# Attributes that may not be cleared to None through a patch
PROJECT_MANDATORY = frozenset({
    "title", "description", "category", "status", "difficulty",
    "estimated_time", "materials", "tutorial_steps", "progress",
})
MATERIAL_MANDATORY = frozenset({"name", "quantity", "unit", "purchased"})
STEP_MANDATORY = frozenset({"title", "description", "completed"})


def _patch_values(patch: BaseModel, mandatory: frozenset[str]) -> dict:
    values = {}
    for name in patch.model_fields_set:
        value = getattr(patch, name)
        if value is None and name in mandatory:
            continue
        values[name] = value
    return values


def apply_project_update(project: Project, patch: ProjectUpdate) -> Project:
    """Shallow-merge ``patch`` onto ``project`` and return the new Project.

    Field by field:
    - title, description, category, status, difficulty, estimated_time:
      replaced when set; ``None`` is ignored
    - actual_time, image_url, budget, total_cost: replaced when set;
      ``None`` clears
    - materials, tutorial_steps: the whole list is replaced
    - progress: taken as given, not re-derived

    ``id``, ``created_at`` and ``updated_at`` are not patchable. The caller
    stamps ``updated_at``.
    """
    values = _patch_values(patch.model_copy(deep=True), PROJECT_MANDATORY)
    return project.model_copy(update=values)


def apply_material_update(material: Material, patch: MaterialUpdate) -> Material:
    """Shallow-merge ``patch`` onto ``material``.

    name, quantity, unit and purchased are replaced when set (``None`` ignored);
    cost and notes are replaced when set and cleared by ``None``.
    """
    return material.model_copy(update=_patch_values(patch, MATERIAL_MANDATORY))


def apply_step_update(step: TutorialStep, patch: TutorialStepUpdate) -> TutorialStep:
    """Shallow-merge ``patch`` onto ``step``.

    title, description and completed are replaced when set (``None`` ignored);
    estimated_time, image_url and materials are replaced when set and cleared
    by ``None``.
    """
    values = _patch_values(patch.model_copy(deep=True), STEP_MANDATORY)
    return step.model_copy(update=values)
