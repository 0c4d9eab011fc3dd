"""Resolve the host's current selection to a folder path."""

import logging
import os
from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any, Protocol

from pshere.errors import HostError, NoSelectionAvailable
from pshere.models import (
    CurrentSelection,
    MultipleSelection,
    NoSelection,
    Selection,
    SingleSelection,
)

log = logging.getLogger(__name__)


class SelectionProvider(Protocol):
    """The host capability the resolver depends on."""

    def get_current_selection(self) -> CurrentSelection: ...

    def get_solution_path(self) -> str | None: ...

    def get_document_path(self, hierarchy: Any, item_id: int) -> str | None: ...

    def release(self, handle: Any) -> None: ...


@contextmanager
def _acquired_selection(provider: SelectionProvider) -> Iterator[CurrentSelection]:
    """Yield the current selection and release its host handles afterwards."""
    current = provider.get_current_selection()
    try:
        yield current
    finally:
        if current.container is not None:
            provider.release(current.container)
        if current.hierarchy is not None:
            provider.release(current.hierarchy)


def read_selection(provider: SelectionProvider) -> Selection:
    """Reduce the provider's raw report to NoSelection/Single/Multiple."""
    with _acquired_selection(provider) as current:
        if current.multi_items:
            paths = [
                provider.get_document_path(hierarchy, item_id)
                for hierarchy, item_id in current.multi_items
            ]
            found = tuple(path for path in paths if path)
            log.debug("multi-select resolved %d of %d items", len(found), len(paths))
            return MultipleSelection(found) if found else NoSelection()

        if current.hierarchy is None:
            solution_path = provider.get_solution_path()
            log.debug("no hierarchy selected, solution=%r", solution_path)
            return SingleSelection(solution_path) if solution_path else NoSelection()

        path = provider.get_document_path(current.hierarchy, current.item_id)
        log.debug("item %s resolved to %r", current.item_id, path)
        return SingleSelection(path) if path else NoSelection()


def folder_of(path: str) -> str:
    """Return ``path`` if it is a directory, otherwise its parent directory."""
    if os.path.isdir(path):
        return path
    if path.endswith(("/", "\\")):
        return path.rstrip("/\\") or path
    if os.path.isfile(path) or os.path.splitext(path)[1]:
        return os.path.dirname(path)
    return path


def resolve_folder(provider: SelectionProvider) -> str:
    """Return the folder for the current selection.

    With several items selected the first one wins.
    """
    try:
        selection = read_selection(provider)
    except (HostError, OSError, LookupError) as e:
        raise NoSelectionAvailable(f"Selection provider failed: {e}") from e

    if isinstance(selection, SingleSelection):
        path = selection.path
    elif isinstance(selection, MultipleSelection) and selection.paths:
        path = selection.paths[0]
    else:
        raise NoSelectionAvailable("Nothing is selected and no solution is open")

    folder = folder_of(path)
    if not folder:
        raise NoSelectionAvailable(f"Could not determine a folder for {path!r}")
    log.debug("selection %r -> folder %r", path, folder)
    return folder


class FileSystemSelectionProvider:
    """A selection provider backed by plain paths instead of an IDE.

    Handles are the absolute paths themselves; item ids are their index.
    """

    def __init__(self, paths: list[str] | None = None, solution_path: str | None = None) -> None:
        self._paths = [os.path.abspath(path) for path in paths or []]
        self._solution_path = solution_path
        self.released: list[Any] = []

    def get_current_selection(self) -> CurrentSelection:
        if not self._paths:
            return CurrentSelection()
        if len(self._paths) == 1:
            return CurrentSelection(hierarchy=self._paths[0], item_id=0)
        return CurrentSelection(
            multi_items=[(path, index) for index, path in enumerate(self._paths)],
        )

    def get_solution_path(self) -> str | None:
        return self._solution_path

    def get_document_path(self, hierarchy: Any, item_id: int) -> str | None:
        if not isinstance(hierarchy, str):
            raise HostError(f"Unknown hierarchy handle: {hierarchy!r}")
        if not os.path.exists(hierarchy):
            raise HostError(f"No such file or directory: {hierarchy}")
        return hierarchy

    def release(self, handle: Any) -> None:
        self.released.append(handle)
