"""Model package for pshere."""

from pshere.models.launch_request import LaunchRequest
from pshere.models.pshere_config import DEFAULT_PWSH_VERSION, PshereConfig
from pshere.models.selection import (
    CurrentSelection,
    MultipleSelection,
    NoSelection,
    Selection,
    SingleSelection,
)

__all__ = [
    "CurrentSelection",
    "DEFAULT_PWSH_VERSION",
    "LaunchRequest",
    "MultipleSelection",
    "NoSelection",
    "PshereConfig",
    "Selection",
    "SingleSelection",
]
