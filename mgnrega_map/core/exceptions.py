"""Error hierarchy for the map path generator.

All raised errors derive from ``MapError``.  Each one knows which
component raised it (``stage``), a stable machine code (``code``), the
``requestId`` of the message being handled (``correlation_id``) and how
the HTTP layer should answer (``http_status``).

Categories:

- ``ContractError``: a worker or HTTP message is malformed (bad JSON,
  missing keys, unknown ``type``).  Answered with 400.
- ``ValidationError``: configuration or styling input is out of range.
- ``PermanentError``: the worker cannot serve at all (e.g. it was closed).

Bad feature geometry is not an error: it degrades that feature's path to
``""`` and the batch carries on.
"""

from __future__ import annotations

from typing import ClassVar

_ERROR_FIELDS = ("category", "code", "stage", "message", "retryable", "correlation_id")


class MapError(Exception):
    """Root of the map error hierarchy.

    Attributes:
        message: Human-readable description.
        stage: Component that raised (``"ingress"``, ``"worker"``, ``"config"``...).
        code: Machine-readable code such as ``"UNKNOWN_MESSAGE_TYPE"``.
        retryable: ``True`` if resending the same message may succeed.
        correlation_id: ``requestId`` of the offending message, or ``""``.
    """

    default_stage: ClassVar[str] = ""
    default_code: ClassVar[str] = ""
    http_status: ClassVar[int] = 500
    _category: ClassVar[str] = ""

    def __init__(
        self,
        message: str = "",
        *,
        stage: str = "",
        code: str = "",
        retryable: bool = False,
        correlation_id: str = "",
    ) -> None:
        super().__init__(message)
        self.message = message
        self.stage = stage if stage else self.default_stage
        self.code = code if code else self.default_code
        self.retryable = retryable
        self.correlation_id = correlation_id

    @property
    def category(self) -> str:
        """Category name; bare ``MapError``s are ``transient`` when retryable."""
        if self._category:
            return self._category
        return "transient" if self.retryable else "permanent"

    def to_error_dict(self) -> dict[str, object]:
        """Structured body for HTTP error responses and log records."""
        return {name: getattr(self, name) for name in _ERROR_FIELDS}


class ContractError(MapError):
    """Malformed message at the worker or HTTP boundary."""

    http_status = 400
    _category = "contract"


class ValidationError(MapError):
    """Out-of-range configuration or input."""

    http_status = 400
    _category = "validation"


class PermanentError(MapError):
    """The request can never succeed as sent."""

    http_status = 503
    _category = "permanent"
