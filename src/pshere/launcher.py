"""Start a shell in a folder, falling back through known install locations."""

import logging
import ntpath
import os
import subprocess
import sys
from collections.abc import Callable, Iterable, Mapping

from pshere.errors import NoShellAvailable
from pshere.models import LaunchRequest, PshereConfig

log = logging.getLogger(__name__)

POSIX_PWSH_ROOT = "/opt/microsoft/powershell"


def _dedupe(candidates: Iterable[str]) -> tuple[str, ...]:
    deduped: list[str] = []
    seen: set[str] = set()
    for item in candidates:
        key = item.lower()
        if key in seen:
            continue
        seen.add(key)
        deduped.append(item)
    return tuple(deduped)


def _windows_candidates(config: PshereConfig, env: Mapping[str, str]) -> list[str]:
    candidates: list[str] = []
    program_files = env.get("ProgramW6432", "").strip()
    if program_files:
        candidates.append(
            ntpath.join(program_files, "PowerShell", config.pwsh_version, "pwsh.exe")
        )
    else:
        log.debug("ProgramW6432 not set, skipping versioned pwsh")
    candidates.append("pwsh.exe")

    system_root = env.get("SystemRoot", "").strip() or env.get("windir", "").strip()
    if system_root:
        candidates.append(
            ntpath.join(system_root, "System32", "WindowsPowerShell", "v1.0", "powershell.exe")
        )
    else:
        log.debug("SystemRoot not set, skipping Windows PowerShell install path")
    candidates.append("powershell.exe")
    return candidates


def _posix_candidates(config: PshereConfig) -> list[str]:
    return [
        f"{POSIX_PWSH_ROOT}/{config.pwsh_version}/pwsh",
        "pwsh",
        "powershell",
    ]


def candidate_shell_paths(
    config: PshereConfig | None = None,
    environ: Mapping[str, str] | None = None,
    platform: str | None = None,
) -> tuple[str, ...]:
    """Return shell executables to try, most specific first."""
    config = config or PshereConfig()
    env = os.environ if environ is None else environ
    platform = sys.platform if platform is None else platform

    candidates: list[str] = []
    if config.shell:
        candidates.append(config.shell)
    if platform == "win32":
        candidates.extend(_windows_candidates(config, env))
    else:
        candidates.extend(_posix_candidates(config))
    return _dedupe(candidates)


def spawn_detached(request: LaunchRequest) -> subprocess.Popen:
    """Start the executable in its own window without waiting for it.

    The returned process is never waited on; the shell outlives the caller.
    """
    if sys.platform == "win32":
        return subprocess.Popen(
            [request.executable],
            cwd=request.working_directory,
            shell=False,
            creationflags=subprocess.CREATE_NEW_CONSOLE,
        )
    return subprocess.Popen(
        [request.executable],
        cwd=request.working_directory,
        shell=False,
        stdin=subprocess.DEVNULL,
        stdout=subprocess.DEVNULL,
        stderr=subprocess.DEVNULL,
        start_new_session=True,
    )


def launch_shell_in(
    directory: str,
    candidates: Iterable[str],
    spawn: Callable[[LaunchRequest], object] = spawn_detached,
) -> LaunchRequest:
    """Start the first candidate shell that launches in ``directory``.

    Raises NoShellAvailable when every candidate fails to start.
    """
    attempts: list[str] = []
    for executable in candidates:
        request = LaunchRequest(working_directory=directory, executable=executable)
        attempts.append(executable)
        try:
            spawn(request)
        except OSError as e:
            log.debug("could not start %s: %s", executable, e)
            continue
        log.info("started %s in %s", executable, directory)
        return request

    log.warning("no shell could be started in %s (tried %d candidates)", directory, len(attempts))
    raise NoShellAvailable(attempts)
