"""Shared constants — single source of truth.

Centralises canvas geometry, message type tags, GeoJSON property keys,
and choropleth colour scales used by the renderer, the worker and the
HTTP entry points.
"""

from __future__ import annotations

# ---------------------------------------------------------------------------
# Canvas
# ---------------------------------------------------------------------------

CANVAS_OFFSET_X: float = 400.0
"""Canvas x coordinate that the projection centre maps to."""

CANVAS_OFFSET_Y: float = 450.0
"""Canvas y coordinate that the projection centre maps to."""

DEFAULT_CANVAS_WIDTH: int = 800
DEFAULT_CANVAS_HEIGHT: int = 900

# Whole-India view used by the dashboard's landing map.
DEFAULT_SCALE: float = 600.0
DEFAULT_CENTER_LON: float = 82.8
DEFAULT_CENTER_LAT: float = 23.0

# ---------------------------------------------------------------------------
# Worker message types
# ---------------------------------------------------------------------------

MSG_GENERATE_PATHS: str = "GENERATE_PATHS"
"""Request tag: convert a batch of features to paths."""

MSG_PATHS_READY: str = "PATHS_READY"
"""Response tag: the converted batch."""

# ---------------------------------------------------------------------------
# Feature display-name keys
# ---------------------------------------------------------------------------

DEFAULT_NAME_KEYS: tuple[str, ...] = ("NAME_1", "NAME")
"""Primary then fallback display property for generated paths."""

STATE_NAME_KEYS: tuple[str, ...] = ("st_nm", "ST_NM", "NAME_1")
DISTRICT_NAME_KEYS: tuple[str, ...] = ("district", "dtname", "NAME_2")

LABEL_PRESETS: dict[str, tuple[str, ...]] = {
    "state": STATE_NAME_KEYS,
    "district": DISTRICT_NAME_KEYS,
}

# ---------------------------------------------------------------------------
# Choropleth colour scales (low → high)
# ---------------------------------------------------------------------------

COLOR_SCALES: dict[str, tuple[str, ...]] = {
    "expenditure": ("#fee5d9", "#fcae91", "#fb6a4a", "#de2d26", "#a50f15"),
    "households": ("#eff6ff", "#bfdbfe", "#60a5fa", "#2563eb", "#1e3a8a"),
    "personDays": ("#f0fdf4", "#bbf7d0", "#4ade80", "#16a34a", "#14532d"),
    "works": ("#fef3c7", "#fde047", "#facc15", "#eab308", "#854d0e"),
}

DEFAULT_COLOR_SCALE: tuple[str, ...] = COLOR_SCALES["expenditure"]
