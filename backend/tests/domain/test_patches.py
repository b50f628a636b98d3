"""Tests for per-entity shallow merge rules."""
from datetime import UTC, datetime

import pytest

from diy_tracker.domain.models import (
    Material,
    MaterialUpdate,
    Project,
    ProjectStatus,
    ProjectUpdate,
    TutorialStep,
    TutorialStepUpdate,
)
from diy_tracker.domain.patches import (
    apply_material_update,
    apply_project_update,
    apply_step_update,
)

pytestmark = pytest.mark.unit

NOW = datetime(2024, 1, 15, 10, 0, tzinfo=UTC)


@pytest.fixture
def project():
    return Project(
        id="p1",
        title="Kitchen Cabinet Makeover",
        description="Paint and new hardware",
        category="Home Improvement",
        budget=300,
        materials=[Material(id="m1", name="Paint", quantity=2, unit="gallons")],
        created_at=NOW,
        updated_at=NOW,
        progress=25,
    )


class TestProjectUpdate:
    def test_unset_fields_keep_prior_values(self, project):
        updated = apply_project_update(project, ProjectUpdate(status=ProjectStatus.ON_HOLD))

        assert updated.status == ProjectStatus.ON_HOLD
        assert updated.title == "Kitchen Cabinet Makeover"
        assert updated.budget == 300
        assert updated.progress == 25

    def test_original_is_not_mutated(self, project):
        apply_project_update(project, ProjectUpdate(title="Renamed"))

        assert project.title == "Kitchen Cabinet Makeover"

    def test_none_clears_optional_field(self, project):
        updated = apply_project_update(project, ProjectUpdate(budget=None))

        assert updated.budget is None

    def test_none_is_ignored_for_mandatory_field(self, project):
        updated = apply_project_update(project, ProjectUpdate(title=None))

        assert updated.title == "Kitchen Cabinet Makeover"

    def test_list_replaced_wholesale(self, project):
        replacement = [Material(id="m9", name="Screws", quantity=1, unit="box")]

        updated = apply_project_update(project, ProjectUpdate(materials=replacement))

        assert [m.id for m in updated.materials] == ["m9"]

    def test_progress_taken_as_given(self, project):
        updated = apply_project_update(project, ProjectUpdate(progress=90))

        assert updated.progress == 90

    def test_identity_and_timestamps_untouched(self, project):
        updated = apply_project_update(project, ProjectUpdate(title="Renamed"))

        assert updated.id == "p1"
        assert updated.created_at == NOW
        assert updated.updated_at == NOW


class TestMaterialUpdate:
    def test_tick_purchased(self):
        material = Material(id="m1", name="Paint", quantity=2, unit="gallons", cost=89.99)

        updated = apply_material_update(material, MaterialUpdate(purchased=True))

        assert updated.purchased is True
        assert updated.cost == 89.99

    def test_none_clears_cost_but_not_name(self):
        material = Material(id="m1", name="Paint", quantity=2, unit="gallons", cost=89.99)

        updated = apply_material_update(material, MaterialUpdate(cost=None, name=None))

        assert updated.cost is None
        assert updated.name == "Paint"


class TestStepUpdate:
    def test_complete_step(self):
        step = TutorialStep(id="s1", title="Sand", estimated_time=60)

        updated = apply_step_update(step, TutorialStepUpdate(completed=True))

        assert updated.completed is True
        assert updated.estimated_time == 60

    def test_materials_list_replaced(self):
        step = TutorialStep(id="s1", title="Sand", materials=["sandpaper"])

        updated = apply_step_update(step, TutorialStepUpdate(materials=["sandpaper", "tack cloth"]))

        assert updated.materials == ["sandpaper", "tack cloth"]
        assert step.materials == ["sandpaper"]
