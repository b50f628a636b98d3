class DiyTrackerError(Exception):
    """Base exception for the DIY project tracker."""

    pass


class PersistenceError(DiyTrackerError):
    """Raised when a snapshot cannot be read from or written to its backend."""

    def __init__(self, backend: str, reason: str):
        self.backend = backend
        self.reason = reason
        super().__init__(f"{backend} snapshot storage failed: {reason}")
