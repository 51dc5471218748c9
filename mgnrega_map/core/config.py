"""Map configuration loaded from environment variables.

All values have defaults matching the dashboard's whole-India view.
Azure Functions app settings (or ``local.settings.json`` for local dev)
are the source of truth.

Fail-fast validation:
    ``from_env()`` raises ``ConfigValidationError`` if any value is out
    of its valid range.  The projection scale is intentionally left
    unchecked: zero or negative scales produce degenerate or mirrored
    maps, which callers are allowed to ask for.
"""

from __future__ import annotations

import os
from dataclasses import dataclass

from mgnrega_map.core.constants import (
    DEFAULT_CANVAS_HEIGHT,
    DEFAULT_CANVAS_WIDTH,
    DEFAULT_CENTER_LAT,
    DEFAULT_CENTER_LON,
    DEFAULT_NAME_KEYS,
    DEFAULT_SCALE,
)
from mgnrega_map.core.exceptions import ValidationError


class ConfigValidationError(ValidationError):
    """Raised when configuration values are out of valid range.

    Attributes:
        key: The configuration key that failed validation.
        value: The invalid value.
        message: Human-readable description of the valid range.
    """

    default_stage = "config"
    default_code = "CONFIG_VALIDATION_FAILED"

    def __init__(self, key: str, value: object, message: str) -> None:
        self.key = key
        self.value = value
        super().__init__(f"Invalid configuration {key}={value!r}: {message}")


@dataclass(frozen=True, slots=True)
class MapConfig:
    """Immutable map configuration.

    Attributes:
        default_scale: Projection scale used when a request omits ``scale``.
        default_center_lon: Centre longitude (degrees) used when a request
            omits ``centerLon``.
        default_center_lat: Centre latitude (degrees) used when a request
            omits ``centerLat``.
        canvas_width: Width of rendered SVG documents in pixels.
        canvas_height: Height of rendered SVG documents in pixels.
        worker_threads: Thread pool size of the path worker.
        name_keys: Feature properties tried, in order, for display names.
    """

    default_scale: float = DEFAULT_SCALE
    default_center_lon: float = DEFAULT_CENTER_LON
    default_center_lat: float = DEFAULT_CENTER_LAT
    canvas_width: int = DEFAULT_CANVAS_WIDTH
    canvas_height: int = DEFAULT_CANVAS_HEIGHT
    worker_threads: int = 2
    name_keys: tuple[str, ...] = DEFAULT_NAME_KEYS

    @classmethod
    def from_env(cls) -> MapConfig:
        """Load and validate configuration from environment variables.

        Raises:
            ConfigValidationError: If a value is out of range or a
                required value is empty.
            ValueError: If a numeric environment variable cannot be
                parsed (e.g. ``MAP_CANVAS_WIDTH=wide``).
        """
        raw_keys = os.getenv("MAP_NAME_KEYS", ",".join(DEFAULT_NAME_KEYS))
        config = cls(
            default_scale=float(os.getenv("MAP_DEFAULT_SCALE", str(DEFAULT_SCALE))),
            default_center_lon=float(os.getenv("MAP_CENTER_LON", str(DEFAULT_CENTER_LON))),
            default_center_lat=float(os.getenv("MAP_CENTER_LAT", str(DEFAULT_CENTER_LAT))),
            canvas_width=int(os.getenv("MAP_CANVAS_WIDTH", str(DEFAULT_CANVAS_WIDTH))),
            canvas_height=int(os.getenv("MAP_CANVAS_HEIGHT", str(DEFAULT_CANVAS_HEIGHT))),
            worker_threads=int(os.getenv("MAP_WORKER_THREADS", "2")),
            name_keys=tuple(k.strip() for k in raw_keys.split(",") if k.strip()),
        )
        _validate(config)
        return config


def _validate(config: MapConfig) -> None:
    """Validate configuration ranges.  Raises ``ConfigValidationError``."""
    if not -180.0 <= config.default_center_lon <= 180.0:
        raise ConfigValidationError(
            "MAP_CENTER_LON",
            config.default_center_lon,
            "must be between -180 and 180 (degrees)",
        )

    # tan(pi/4 + lat*pi/360) has no finite log at the poles
    if not -90.0 < config.default_center_lat < 90.0:
        raise ConfigValidationError(
            "MAP_CENTER_LAT",
            config.default_center_lat,
            "must be strictly between -90 and 90 (degrees)",
        )

    if config.canvas_width <= 0:
        raise ConfigValidationError(
            "MAP_CANVAS_WIDTH",
            config.canvas_width,
            "must be > 0 (pixels)",
        )

    if config.canvas_height <= 0:
        raise ConfigValidationError(
            "MAP_CANVAS_HEIGHT",
            config.canvas_height,
            "must be > 0 (pixels)",
        )

    if config.worker_threads < 1:
        raise ConfigValidationError(
            "MAP_WORKER_THREADS",
            config.worker_threads,
            "must be >= 1",
        )

    if not config.name_keys:
        raise ConfigValidationError(
            "MAP_NAME_KEYS",
            config.name_keys,
            "must name at least one property",
        )
