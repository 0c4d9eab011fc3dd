"""Configuration model for pshere."""

from pydantic import BaseModel, field_validator

DEFAULT_PWSH_VERSION = "6"


class PshereConfig(BaseModel):
    """Runtime configuration for pshere."""

    shell: str | None = None
    pwsh_version: str = DEFAULT_PWSH_VERSION
    debug: bool = False

    @field_validator("shell")
    @classmethod
    def _blank_shell_is_unset(cls, value: str | None) -> str | None:
        if value is None or not value.strip():
            return None
        return value.strip()

    @field_validator("pwsh_version")
    @classmethod
    def _version_is_single_segment(cls, value: str) -> str:
        value = value.strip()
        if not value or "/" in value or "\\" in value:
            raise ValueError("pwsh_version must be a single path segment such as '6' or '7'")
        return value
