from dataclasses import dataclass


@dataclass(frozen=True)
class Contributor:
    id: str
    user_id: str
    name: str
    email: str
    relationship_type: str
    relationship_years: int
    created_at: str | None = None


@dataclass(frozen=True)
class Memory:
    id: str
    contributor_id: str
    photo_url: str
    description: str
    event_date: str | None = None
    created_at: str | None = None


@dataclass(frozen=True)
class MemoryView:
    """A memory joined with the contributor who submitted it."""

    memory: Memory
    contributor_name: str
    relationship_type: str
    user_id: str
