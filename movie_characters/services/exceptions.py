"""
Domain errors raised by the service layer.

Routers translate these into HTTP responses: EntityNotFoundError becomes a
404 and InvalidReferenceError a 400.
"""

from typing import Iterable


class EntityNotFoundError(LookupError):
    """The entity addressed by the request does not exist."""

    def __init__(self, entity: str, entity_id: int):
        self.entity = entity
        self.entity_id = entity_id
        super().__init__(f"{entity} not found")


class InvalidReferenceError(ValueError):
    """One or more referenced related ids do not exist."""

    def __init__(self, entity: str, missing_ids: Iterable[int]):
        self.entity = entity
        self.missing_ids = sorted(set(missing_ids))
        ids = ", ".join(str(i) for i in self.missing_ids)
        super().__init__(f"{entity} does not exist: {ids}")
