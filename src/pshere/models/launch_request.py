"""Launch request model for the shell launcher."""

from dataclasses import dataclass


@dataclass(frozen=True)
class LaunchRequest:
    """One attempt to start a shell executable in a working directory."""

    working_directory: str
    executable: str
