"""
In-Memory Person Registry

DESIGN DECISION: Spouse links are stored as person IDs and resolved through
a registry, not held as direct object references. Marriage is a peer
relation, so neither person owns the other.

The registry is intentionally simple - a dict keyed by ID, kept in
insertion order. It is not persistence.
"""

from typing import TYPE_CHECKING, Iterator, Optional
from uuid import UUID

from domain_model.errors import DuplicatePersonIdError

if TYPE_CHECKING:
    from domain_model.models.person import Person


class PersonRegistry:
    """Looks up persons by ID."""

    def __init__(self) -> None:
        self._by_id: dict[UUID, "Person"] = {}

    def register(self, person: "Person") -> None:
        """
        Add a person. Registering the same person again is a no-op.

        Raises:
            DuplicatePersonIdError: If a different person holds the ID
        """
        existing = self._by_id.get(person.id)
        if existing is not None and existing is not person:
            raise DuplicatePersonIdError(person.id)
        self._by_id[person.id] = person

    def get(self, person_id: Optional[UUID]) -> Optional["Person"]:
        """Return the person with the given ID, or None."""
        if person_id is None:
            return None
        return self._by_id.get(person_id)

    def __contains__(self, person: object) -> bool:
        person_id = getattr(person, "id", person)
        return person_id in self._by_id

    def __len__(self) -> int:
        return len(self._by_id)

    def __iter__(self) -> Iterator["Person"]:
        return iter(self._by_id.values())
