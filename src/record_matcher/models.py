from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(slots=True)
class Record:
    """One input row keyed by an opaque handle assigned at load time."""

    key: int
    attributes: dict[str, str | None]
    group_id: int | None = None


@dataclass(slots=True)
class Group:
    """Records transitively linked by shared match values."""

    group_id: int
    record_keys: list[int] = field(default_factory=list)
