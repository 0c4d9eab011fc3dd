"""Error types for pshere."""


class PshereError(Exception):
    """Base class for pshere errors."""


class HostError(PshereError):
    """Raised by a selection provider when the host cannot answer a query."""


class NoSelectionAvailable(PshereError):
    """The current selection did not yield a usable folder."""


class NoShellAvailable(PshereError):
    """Every candidate shell executable failed to start."""

    def __init__(self, attempts: list[str]) -> None:
        self.attempts = list(attempts)
        tried = ", ".join(self.attempts) if self.attempts else "none"
        super().__init__(f"No shell could be started (tried: {tried})")
