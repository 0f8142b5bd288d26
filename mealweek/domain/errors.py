"""Error taxonomy shared by the stores, the sync engine and the API layer."""


class PlannerError(Exception):
    """Base class for meal planner failures."""
    pass


class ValidationError(PlannerError, ValueError):
    """Input rejected before any store call (e.g. empty meal name)."""
    pass


class NotFound(PlannerError, LookupError):
    """Update/delete/toggle referenced an id that does not exist."""

    def __init__(self, collection: str, record_id: str):
        self.collection = collection
        self.record_id = record_id
        super().__init__(f"{collection[:-1].capitalize()} not found: {record_id}")


class PersistenceUnavailable(PlannerError, RuntimeError):
    """The backing document store could not be read or written."""
    pass


__all__ = ["PlannerError", "ValidationError", "NotFound", "PersistenceUnavailable"]
