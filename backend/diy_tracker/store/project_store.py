"""ProjectStore: single source of truth for projects and their owned collections.

The store keeps the derived fields consistent at the write boundary:
- every mutation of a project, or of a Material/TutorialStep it owns, stamps
  ``updated_at``
- every tutorial-step mutation recomputes ``progress``

Readers never recompute anything; they read ``progress`` as a plain field.

Lookups that miss are silent no-ops: mutating methods return None (or False
for deletes) and log at debug level, nothing is raised. The store does not
validate input either. Both are the caller's concern.

Persistence is a side effect of every mutation (``autosave``) or of an
explicit ``flush()``. A failed write is logged and never rolls back or
corrupts the in-memory state. After a failed load nothing is written at all,
so an unreadable snapshot is left in place rather than replaced.
"""

import structlog
from pydantic import ValidationError

from diy_tracker.core.exceptions import PersistenceError
from diy_tracker.domain.models import (
    Material,
    MaterialFields,
    MaterialUpdate,
    Project,
    ProjectFields,
    ProjectUpdate,
    Snapshot,
    TutorialStep,
    TutorialStepFields,
    TutorialStepUpdate,
)
from diy_tracker.domain.patches import (
    apply_material_update,
    apply_project_update,
    apply_step_update,
)
from diy_tracker.domain.progress import compute_step_progress
from diy_tracker.store.ids import Clock, IdGenerator, utc_now, uuid_id
from diy_tracker.store.persistence import SnapshotStore

logger = structlog.get_logger(__name__)


class ProjectStore:
    """In-process, single-consumer container for the project collection.

    Usage:
        store = ProjectStore(JsonFileSnapshotStore("projects.json"))
        store.load()
        project = store.create_project(ProjectFields(title="Garden bench"))
        store.add_tutorial_step(project.id, TutorialStepFields(title="Cut boards"))

    Not thread-safe: exactly one logical caller is assumed.
    """

    def __init__(
        self,
        persistence: SnapshotStore,
        *,
        id_generator: IdGenerator = uuid_id,
        clock: Clock = utc_now,
        autosave: bool = True,
    ) -> None:
        self._persistence = persistence
        self._new_id = id_generator
        self._now = clock
        self._autosave = autosave
        self._projects: list[Project] = []
        # Set when the saved snapshot could not be read; writes are refused so
        # the unreadable document is never overwritten with a partial collection
        self._load_failed = False
        self._dirty = False

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def load(self) -> int:
        """Replace the in-memory collection with the persisted snapshot.

        Falls back to an empty collection when nothing was saved yet. When the
        saved document cannot be read or does not validate, the store also
        starts empty but refuses every later write (see ``load_failed``), so
        the stored snapshot survives for manual recovery.

        Returns:
            Number of projects loaded
        """
        try:
            document = self._persistence.load()
        except PersistenceError as exc:
            logger.error("snapshot_load_failed", error=str(exc))
            self._projects = []
            self._load_failed = True
            return 0

        self._load_failed = False
        self._dirty = False
        if document is None:
            self._projects = []
            return 0

        try:
            snapshot = Snapshot.model_validate(document)
        except ValidationError as exc:
            logger.error("snapshot_invalid", error_count=exc.error_count())
            self._projects = []
            self._load_failed = True
            return 0

        self._projects = list(snapshot.projects)
        logger.info("snapshot_loaded", project_count=len(self._projects))
        return len(self._projects)

    def flush(self) -> bool:
        """Write the current collection to persistence.

        Returns:
            True on success, False if the backend failed or writes are refused
            after a failed load (both are logged)
        """
        if self._load_failed:
            logger.warning(
                "snapshot_save_skipped",
                reason="load_failed",
                project_count=len(self._projects),
            )
            return False

        document = Snapshot(projects=self._projects).to_document()
        try:
            self._persistence.save(document)
        except PersistenceError as exc:
            logger.error(
                "snapshot_save_failed",
                error=str(exc),
                project_count=len(self._projects),
            )
            return False
        self._dirty = False
        return True

    @property
    def load_failed(self) -> bool:
        """True when the last ``load()`` could not read or validate the snapshot."""
        return self._load_failed

    @property
    def has_unsaved_changes(self) -> bool:
        return self._dirty

    def _changed(self) -> None:
        self._dirty = True
        if self._autosave:
            self.flush()

    # ------------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------------

    @property
    def project_count(self) -> int:
        return len(self._projects)

    @property
    def projects(self) -> list[Project]:
        """Copy of the collection in insertion order."""
        return [project.model_copy(deep=True) for project in self._projects]

    def get_project(self, project_id: str) -> Project | None:
        index = self._find(project_id)
        if index is None:
            return None
        return self._projects[index].model_copy(deep=True)

    def _find(self, project_id: str) -> int | None:
        for index, project in enumerate(self._projects):
            if project.id == project_id:
                return index
        logger.debug("project_not_found", project_id=project_id)
        return None

    def _fresh_id(self, taken: set[str]) -> str:
        new_id = self._new_id()
        while new_id in taken:
            new_id = self._new_id()
        return new_id

    # ------------------------------------------------------------------
    # Projects
    # ------------------------------------------------------------------

    def create_project(self, fields: ProjectFields) -> Project:
        """Append a new project; id, timestamps and progress are assigned here."""
        now = self._now()
        project = Project(
            **dict(fields.model_copy(deep=True)),
            id=self._fresh_id({p.id for p in self._projects}),
            created_at=now,
            updated_at=now,
            progress=0,
        )
        self._projects.append(project)
        logger.info("project_created", project_id=project.id)
        self._changed()
        return project.model_copy(deep=True)

    def update_project(self, project_id: str, patch: ProjectUpdate) -> Project | None:
        """Shallow-merge ``patch`` onto the project and stamp ``updated_at``.

        A ``progress`` value in the patch is stored as given.
        """
        index = self._find(project_id)
        if index is None:
            return None

        project = apply_project_update(self._projects[index], patch)
        project = project.model_copy(update={"updated_at": self._now()})
        self._projects[index] = project
        logger.info("project_updated", project_id=project_id, fields=sorted(patch.model_fields_set))
        self._changed()
        return project.model_copy(deep=True)

    def delete_project(self, project_id: str) -> bool:
        """Remove the project together with its materials and steps."""
        index = self._find(project_id)
        if index is None:
            return False

        del self._projects[index]
        logger.info("project_deleted", project_id=project_id)
        self._changed()
        return True

    # ------------------------------------------------------------------
    # Materials
    # ------------------------------------------------------------------

    def add_material(self, project_id: str, fields: MaterialFields) -> Material | None:
        index = self._find(project_id)
        if index is None:
            return None

        project = self._projects[index]
        material = Material(
            **dict(fields.model_copy(deep=True)),
            id=self._fresh_id({m.id for m in project.materials}),
        )
        self._projects[index] = project.model_copy(update={
            "materials": [*project.materials, material],
            "updated_at": self._now(),
        })
        logger.info("material_added", project_id=project_id, material_id=material.id)
        self._changed()
        return material.model_copy(deep=True)

    def update_material(
        self, project_id: str, material_id: str, patch: MaterialUpdate
    ) -> Material | None:
        index = self._find(project_id)
        if index is None:
            return None

        project = self._projects[index]
        materials = list(project.materials)
        for position, material in enumerate(materials):
            if material.id == material_id:
                break
        else:
            logger.debug("material_not_found", project_id=project_id, material_id=material_id)
            return None

        updated = apply_material_update(material, patch)
        materials[position] = updated
        self._projects[index] = project.model_copy(update={
            "materials": materials,
            "updated_at": self._now(),
        })
        logger.info("material_updated", project_id=project_id, material_id=material_id)
        self._changed()
        return updated.model_copy(deep=True)

    def delete_material(self, project_id: str, material_id: str) -> bool:
        index = self._find(project_id)
        if index is None:
            return False

        project = self._projects[index]
        remaining = [m for m in project.materials if m.id != material_id]
        if len(remaining) == len(project.materials):
            logger.debug("material_not_found", project_id=project_id, material_id=material_id)
            return False

        self._projects[index] = project.model_copy(update={
            "materials": remaining,
            "updated_at": self._now(),
        })
        logger.info("material_deleted", project_id=project_id, material_id=material_id)
        self._changed()
        return True

    # ------------------------------------------------------------------
    # Tutorial steps
    # ------------------------------------------------------------------

    def add_tutorial_step(
        self, project_id: str, fields: TutorialStepFields
    ) -> TutorialStep | None:
        """Append a step as the new last step and recompute progress."""
        index = self._find(project_id)
        if index is None:
            return None

        project = self._projects[index]
        step = TutorialStep(
            **dict(fields.model_copy(deep=True)),
            id=self._fresh_id({s.id for s in project.tutorial_steps}),
        )
        self._projects[index] = project.model_copy(update={
            "tutorial_steps": [*project.tutorial_steps, step],
            "updated_at": self._now(),
        })
        self._recompute_progress(index)
        logger.info("step_added", project_id=project_id, step_id=step.id)
        self._changed()
        return step.model_copy(deep=True)

    def update_tutorial_step(
        self, project_id: str, step_id: str, patch: TutorialStepUpdate
    ) -> TutorialStep | None:
        index = self._find(project_id)
        if index is None:
            return None

        project = self._projects[index]
        steps = list(project.tutorial_steps)
        for position, step in enumerate(steps):
            if step.id == step_id:
                break
        else:
            logger.debug("step_not_found", project_id=project_id, step_id=step_id)
            return None

        updated = apply_step_update(step, patch)
        steps[position] = updated
        self._projects[index] = project.model_copy(update={
            "tutorial_steps": steps,
            "updated_at": self._now(),
        })
        self._recompute_progress(index)
        logger.info("step_updated", project_id=project_id, step_id=step_id)
        self._changed()
        return updated.model_copy(deep=True)

    def delete_tutorial_step(self, project_id: str, step_id: str) -> bool:
        """Remove a step and recompute progress.

        Removing the last remaining step leaves ``progress`` at its previous value.
        """
        index = self._find(project_id)
        if index is None:
            return False

        project = self._projects[index]
        remaining = [s for s in project.tutorial_steps if s.id != step_id]
        if len(remaining) == len(project.tutorial_steps):
            logger.debug("step_not_found", project_id=project_id, step_id=step_id)
            return False

        self._projects[index] = project.model_copy(update={
            "tutorial_steps": remaining,
            "updated_at": self._now(),
        })
        self._recompute_progress(index)
        logger.info("step_deleted", project_id=project_id, step_id=step_id)
        self._changed()
        return True

    # ------------------------------------------------------------------
    # Progress
    # ------------------------------------------------------------------

    def compute_progress(self, project_id: str) -> int:
        """Re-derive and store the project's progress.

        Returns 0 without touching the project when it has no steps (or does
        not exist). Otherwise writes the value, stamps ``updated_at`` and
        returns it.
        """
        index = self._find(project_id)
        if index is None:
            return 0

        progress = self._recompute_progress(index)
        if progress is None:
            return 0
        self._changed()
        return progress

    def _recompute_progress(self, index: int) -> int | None:
        project = self._projects[index]
        if not project.tutorial_steps:
            return None

        progress = compute_step_progress(project.tutorial_steps)
        self._projects[index] = project.model_copy(update={
            "progress": progress,
            "updated_at": self._now(),
        })
        return progress
