"""Shared fakes for pshere tests."""

from typing import Any

import pytest

from pshere.errors import HostError
from pshere.models import CurrentSelection


class FakeHost:
    """Selection provider with scripted answers and a release log."""

    def __init__(
        self,
        selection: CurrentSelection | None = None,
        solution_path: str | None = None,
        documents: dict[tuple[Any, int], str] | None = None,
        fail_documents: bool = False,
    ) -> None:
        self.selection = selection or CurrentSelection()
        self.solution_path = solution_path
        self.documents = documents or {}
        self.fail_documents = fail_documents
        self.released: list[Any] = []
        self.solution_queries = 0

    def get_current_selection(self) -> CurrentSelection:
        return self.selection

    def get_solution_path(self) -> str | None:
        self.solution_queries += 1
        return self.solution_path

    def get_document_path(self, hierarchy: Any, item_id: int) -> str | None:
        if self.fail_documents:
            raise HostError("hierarchy is gone")
        return self.documents.get((hierarchy, item_id))

    def release(self, handle: Any) -> None:
        self.released.append(handle)


class RecordingSpawn:
    """Spawn stand-in: starts only executables listed as launchable."""

    def __init__(self, launchable: set[str] | None = None) -> None:
        self.launchable = launchable or set()
        self.calls: list[str] = []
        self.requests = []

    def __call__(self, request) -> None:
        self.calls.append(request.executable)
        self.requests.append(request)
        if request.executable not in self.launchable:
            raise FileNotFoundError(2, "No such file or directory", request.executable)


@pytest.fixture
def fake_host():
    return FakeHost


@pytest.fixture
def recording_spawn():
    return RecordingSpawn
