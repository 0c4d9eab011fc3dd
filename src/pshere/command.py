"""The "Open PowerShell Here" menu command."""

import logging
import threading
import uuid
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import Protocol

from pshere.config import load_config
from pshere.errors import NoSelectionAvailable, NoShellAvailable
from pshere.launcher import candidate_shell_paths, launch_shell_in
from pshere.models import LaunchRequest, PshereConfig
from pshere.selection import SelectionProvider, resolve_folder

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class CommandID:
    """Menu command identity: command-set GUID plus numeric id."""

    group: uuid.UUID
    id: int


COMMAND_SET = uuid.UUID("0dc193e5-18d2-4acc-8438-d01ddc43b95a")
COMMAND_ID = 0x0100
MENU_COMMAND_ID = CommandID(COMMAND_SET, COMMAND_ID)


class CommandService(Protocol):
    """Host service menu commands register with."""

    def add_command(self, command_id: CommandID, handler: Callable[[], object]) -> None: ...


Launcher = Callable[[str, Iterable[str]], LaunchRequest]


class OpenShellHereCommand:
    """Open a shell in the folder of the selected item."""

    def __init__(
        self,
        provider: SelectionProvider,
        candidates: Iterable[str] | None = None,
        config: PshereConfig | None = None,
        launcher: Launcher = launch_shell_in,
    ) -> None:
        if provider is None:
            raise ValueError("provider is required")
        self._provider = provider
        self._config = config if config is not None else load_config()
        if candidates is None:
            candidates = candidate_shell_paths(self._config)
        self.candidates = tuple(candidates)
        self._launcher = launcher

    def register(self, command_service: CommandService) -> None:
        if command_service is None:
            raise ValueError("command_service is required")
        command_service.add_command(MENU_COMMAND_ID, self.execute)

    def execute(self) -> LaunchRequest | None:
        """Resolve the selected folder and open a shell there.

        Returns the successful launch, or None when nothing was launched.
        """
        if threading.current_thread() is not threading.main_thread():
            raise RuntimeError("OpenShellHereCommand.execute must run on the main thread")
        try:
            folder = resolve_folder(self._provider)
        except NoSelectionAvailable as e:
            log.warning("nothing to open: %s", e)
            return None
        try:
            return self._launcher(folder, self.candidates)
        except NoShellAvailable as e:
            log.warning("%s", e)
            return None


def initialize(
    command_service: CommandService,
    provider: SelectionProvider,
    config: PshereConfig | None = None,
) -> OpenShellHereCommand:
    """Create the command and register it with the host."""
    command = OpenShellHereCommand(provider, config=config)
    command.register(command_service)
    return command
