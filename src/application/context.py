"""Per-request identity context."""

from dataclasses import dataclass
from uuid import UUID


@dataclass(frozen=True)
class SessionContext:
    """
    Already-authenticated caller of a request.

    Built by the presentation layer from the upstream auth headers and
    passed explicitly to handlers instead of living in a global store.
    """

    user_id: UUID
    is_admin: bool = False
