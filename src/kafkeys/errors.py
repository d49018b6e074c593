"""Errors raised while rendering client configuration."""

from typing import Any


class KafkeysError(Exception):
    """Base class for kafkeys errors."""

    def __init__(self, message: str | None = None) -> None:
        self.message = message
        super().__init__(self.message)

    def to_dict(self) -> dict[str, Any]:
        """Return a dictionary representation of the error."""
        return {"error": self.message}

    def __str__(self) -> str:
        return self.message or ""


class InvalidConfigValue(KafkeysError, ValueError):
    """A configured value converted to a null or blank wire value.

    Attributes:
        key_id: Property id of the offending key (e.g. "bootstrap.servers").
    """

    def __init__(self, key_id: str, message: str | None = None) -> None:
        if message is None:
            message = (
                f"Invalid value for config key '{key_id}': "
                "value must not be null or blank."
            )
        super().__init__(message)
        self.key_id = key_id

    def to_dict(self) -> dict[str, Any]:
        return {"error": self.message, "key_id": self.key_id}
