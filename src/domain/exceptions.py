"""Domain exceptions shared by every layer."""


class DomainError(Exception):
    """Base class for errors raised by the marketplace core."""


class ValidationError(DomainError):
    """Input that cannot be defaulted away."""


class NotFoundError(DomainError):
    """An entity id does not resolve."""

    def __init__(self, entity: str, entity_id: object):
        self.entity = entity
        self.entity_id = entity_id
        super().__init__(f"{entity} {entity_id} not found")


class UnauthorizedError(DomainError):
    """Missing actor or admin context."""


class DependencyFailureError(DomainError):
    """Persistence or notification backend is unreachable or failed."""
