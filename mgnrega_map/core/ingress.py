"""Thin ingress boundary helpers for worker and HTTP entry points.

Centralises the transport concerns so that ``function_app.py`` and the
path worker contain only handoff logic:

- **deserialize_message** — normalises a JSON string, bytes or dict
  message into a plain dict.
- **parse_generate_request** — validates a ``GENERATE_PATHS`` message
  and turns it into a typed ``PathRequest``, keeping the optional
  ``requestId`` correlation token exactly as sent and filling omitted
  projection fields from ``MapConfig``.

Only the envelope is validated here.  Feature geometry is never
rejected at ingress; bad features degrade to empty paths later.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from mgnrega_map.core.config import MapConfig
from mgnrega_map.core.constants import LABEL_PRESETS, MSG_GENERATE_PATHS
from mgnrega_map.core.exceptions import ContractError
from mgnrega_map.models.contracts import (
    GeneratePathsData,
    GeneratePathsRequest,
    validate_payload,
)
from mgnrega_map.models.projection import ProjectionParameters

logger = logging.getLogger("mgnrega_map.core.ingress")


@dataclass(frozen=True, slots=True)
class PathRequest:
    """A validated ``GENERATE_PATHS`` request.

    Attributes:
        features: Raw GeoJSON feature dicts, in request order.
        params: Projection parameters from the message, with omitted
            fields taken from the configured default view.
        name_keys: Display-name properties for this request; empty means
            "use the configured default".
        request_id: The raw ``requestId`` JSON value to echo, or ``None``
            when the message carries none.
        options: Remaining optional fields of ``data`` (e.g. ``fills``).
    """

    features: list[Any]
    params: ProjectionParameters
    name_keys: tuple[str, ...] = ()
    request_id: str | int | float | None = None
    options: dict[str, Any] = field(default_factory=dict)

    @property
    def correlation_id(self) -> str:
        """``requestId`` as the string carried by ``MapError``."""
        return "" if self.request_id is None else str(self.request_id)


# ---------------------------------------------------------------------------
# Message deserialisation
# ---------------------------------------------------------------------------


def deserialize_message(raw: str | bytes | dict[str, Any] | object) -> dict[str, Any]:
    """Normalise a worker or HTTP message to a plain dict.

    Raises:
        ContractError: If *raw* is not a JSON object or a dict.
    """
    if isinstance(raw, bytes | bytearray):
        try:
            raw = raw.decode("utf-8")
        except UnicodeDecodeError as exc:
            msg = f"Message is not valid UTF-8: {exc}"
            raise ContractError(msg, stage="ingress", code="INVALID_JSON") from exc
    if isinstance(raw, str):
        try:
            parsed = json.loads(raw)
        except (json.JSONDecodeError, ValueError) as exc:
            msg = f"Message is not valid JSON: {exc}"
            raise ContractError(msg, stage="ingress", code="INVALID_JSON") from exc
        if not isinstance(parsed, dict):
            msg = f"Message JSON must be an object, got {type(parsed).__name__}"
            raise ContractError(msg, stage="ingress", code="INVALID_INPUT_TYPE")
        return parsed
    if isinstance(raw, dict):
        return raw
    msg = f"Unexpected message type: {type(raw).__name__}"
    raise ContractError(msg, stage="ingress", code="INVALID_INPUT_TYPE")


# ---------------------------------------------------------------------------
# GENERATE_PATHS parsing
# ---------------------------------------------------------------------------


def _number(data: Mapping[str, Any], key: str, default: float, request_id: str) -> float:
    if key not in data:
        return default
    value = data[key]
    # bool is an int subclass; JSON true/false is never a coordinate
    if isinstance(value, bool) or not isinstance(value, int | float):
        msg = f"{key} must be a number, got {type(value).__name__}"
        raise ContractError(
            msg, stage="ingress", code="INVALID_NUMBER", correlation_id=request_id
        )
    return float(value)


def parse_generate_request(
    message: dict[str, Any], config: MapConfig | None = None
) -> PathRequest:
    """Validate a ``GENERATE_PATHS`` message.

    ``scale``, ``centerLon`` and ``centerLat`` are each optional; an
    omitted one comes from *config* (``MAP_DEFAULT_SCALE``,
    ``MAP_CENTER_LON``, ``MAP_CENTER_LAT``).  Values are type-checked but
    not range-checked.

    Raises:
        ContractError: On a missing key, an unknown message type, a
            non-list ``features``, a non-numeric projection field or an
            unknown ``labelType``.
    """
    raw_id = message.get("requestId")
    request_id = "" if raw_id is None else str(raw_id)
    defaults = ProjectionParameters.from_config(config or MapConfig())

    validate_payload(message, GeneratePathsRequest, stage="ingress", correlation_id=request_id)

    message_type = message["type"]
    if message_type != MSG_GENERATE_PATHS:
        msg = f"Unknown message type: {message_type!r}"
        raise ContractError(
            msg, stage="ingress", code="UNKNOWN_MESSAGE_TYPE", correlation_id=request_id
        )

    data = message["data"]
    if not isinstance(data, dict):
        msg = f"data must be an object, got {type(data).__name__}"
        raise ContractError(
            msg, stage="ingress", code="INVALID_INPUT_TYPE", correlation_id=request_id
        )
    validate_payload(data, GeneratePathsData, stage="ingress", correlation_id=request_id)

    features = data["features"]
    if not isinstance(features, list):
        msg = f"features must be a list, got {type(features).__name__}"
        raise ContractError(
            msg, stage="ingress", code="INVALID_INPUT_TYPE", correlation_id=request_id
        )

    params = ProjectionParameters(
        scale=_number(data, "scale", defaults.scale, request_id),
        center_lon=_number(data, "centerLon", defaults.center_lon, request_id),
        center_lat=_number(data, "centerLat", defaults.center_lat, request_id),
    )

    name_keys: tuple[str, ...] = ()
    label_type = data.get("labelType")
    if label_type is not None:
        if not isinstance(label_type, str) or label_type not in LABEL_PRESETS:
            msg = f"Unknown labelType {label_type!r}; expected one of {sorted(LABEL_PRESETS)}"
            raise ContractError(
                msg, stage="ingress", code="UNKNOWN_LABEL_TYPE", correlation_id=request_id
            )
        name_keys = LABEL_PRESETS[label_type]

    options = {
        k: v
        for k, v in data.items()
        if k not in {"features", "scale", "centerLon", "centerLat", "labelType"}
    }

    logger.debug(
        "Parsed GENERATE_PATHS | features=%d | scale=%s | request_id=%s",
        len(features),
        params.scale,
        request_id,
    )

    return PathRequest(
        features=features,
        params=params,
        name_keys=name_keys,
        request_id=raw_id,
        options=options,
    )
