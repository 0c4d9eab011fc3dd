"""Selection models: the raw host report and its reduced tagged variant."""

from dataclasses import dataclass, field
from typing import Any


@dataclass
class CurrentSelection:
    """What the host reports as currently selected.

    ``hierarchy`` and ``container`` are opaque host handles that must be
    released once the selection has been read. ``multi_items`` is set only
    when more than one item is selected.
    """

    hierarchy: Any = None
    item_id: int = 0
    multi_items: list[tuple[Any, int]] | None = None
    container: Any = None


@dataclass(frozen=True)
class NoSelection:
    pass


@dataclass(frozen=True)
class SingleSelection:
    path: str


@dataclass(frozen=True)
class MultipleSelection:
    paths: tuple[str, ...] = field(default_factory=tuple)


Selection = NoSelection | SingleSelection | MultipleSelection
