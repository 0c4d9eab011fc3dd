"""pshere - open a PowerShell window in the folder of the current selection."""

__version__ = "0.1.0"
