"""Error kinds raised by the core.

Every error carries a machine-readable ``code``, a human-readable ``message`` and an optional
``details`` mapping. Presentation (emoji, help banners) is left to the MCP facade.
"""

from __future__ import annotations

from typing import Any


class FigmaGenuiError(Exception):
    code = "figma_genui_error"

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        self.message = message
        self.details: dict[str, Any] = details or {}
        super().__init__(message)

    def to_payload(self) -> dict[str, Any]:
        return {"code": self.code, "message": self.message, "details": self.details}


class ConfigurationError(FigmaGenuiError):
    """A required setting is missing. Fatal at startup."""

    code = "configuration_error"


class NotFoundError(FigmaGenuiError):
    code = "not_found"


class NoActiveFileError(NotFoundError):
    code = "no_active_file"

    def __init__(self, details: dict[str, Any] | None = None) -> None:
        super().__init__(
            "No active Figma file. Please set an active file first using set_active_figma_file.",
            details,
        )


class MalformedAddressError(FigmaGenuiError):
    code = "malformed_address"


class RemoteApiError(FigmaGenuiError):
    """The Figma API call failed (network, auth or rate limit)."""

    code = "remote_error"

    def __init__(self, message: str, *, cause: str = "", status_code: int | None = None) -> None:
        details: dict[str, Any] = {"cause": cause}
        if status_code is not None:
            details["status_code"] = status_code
        super().__init__(f"{message}: {cause}" if cause else message, details)
        self.status_code = status_code


class InvalidArgumentError(FigmaGenuiError):
    code = "invalid_argument"
