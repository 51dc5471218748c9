"""Canonical message contracts for the path worker boundary.

Every request and response crossing the worker (or HTTP) boundary is
defined here as a ``TypedDict``.  Field names are the camelCase names
used by the dashboard's map components, so messages can be passed
through unchanged.

- Request contracts mark optional fields with ``NotRequired``.
- ``validate_payload`` checks required keys at runtime and raises
  ``ContractError`` on drift.
"""

from __future__ import annotations

from typing import Any, NotRequired, TypedDict

from mgnrega_map.core.exceptions import ContractError

# ---------------------------------------------------------------------------
# GENERATE_PATHS request
# ---------------------------------------------------------------------------


class GeneratePathsData(TypedDict):
    """Body of a ``GENERATE_PATHS`` request.

    Omitted projection fields fall back to the configured default view.
    """

    features: list[dict[str, Any]]
    scale: NotRequired[float]
    centerLon: NotRequired[float]
    centerLat: NotRequired[float]
    labelType: NotRequired[str]


class RenderSvgData(GeneratePathsData):
    """Body of an SVG render request: path inputs plus styling."""

    fills: NotRequired[dict[str, str]]
    showLabels: NotRequired[bool]


class GeneratePathsRequest(TypedDict):
    """Caller → worker message."""

    type: str
    data: GeneratePathsData
    requestId: NotRequired[str | int]


# ---------------------------------------------------------------------------
# PATHS_READY response
# ---------------------------------------------------------------------------


class PathResultPayload(TypedDict):
    """Serialised ``PathResult``."""

    id: int
    name: str
    path: str


class PathsReadyResponse(TypedDict):
    """Worker → caller message."""

    type: str
    paths: list[PathResultPayload]
    requestId: NotRequired[str | int]


# ---------------------------------------------------------------------------
# Required-key registrations (used by validate_payload)
# ---------------------------------------------------------------------------

_REQUIRED_KEYS: dict[type, frozenset[str]] = {
    GeneratePathsRequest: frozenset({"type", "data"}),
    GeneratePathsData: frozenset({"features"}),
    RenderSvgData: frozenset({"features"}),
    PathsReadyResponse: frozenset({"type", "paths"}),
}


# ---------------------------------------------------------------------------
# Runtime validation
# ---------------------------------------------------------------------------


def validate_payload(
    raw: dict[str, Any],
    schema: type,
    *,
    stage: str,
    correlation_id: str = "",
) -> None:
    """Validate that *raw* contains the required keys for *schema*.

    Raises:
        ContractError: If required keys are missing from the payload.
    """
    required = _REQUIRED_KEYS.get(schema)
    if required is None:
        return

    missing = required - raw.keys()
    if missing:
        msg = f"{stage}: missing required payload key(s): {', '.join(sorted(missing))}"
        raise ContractError(
            msg,
            stage=stage,
            code="PAYLOAD_MISSING_KEYS",
            correlation_id=correlation_id,
        )
