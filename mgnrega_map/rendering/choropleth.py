"""Choropleth colouring for district and state maps.

Buckets a metric (expenditure, households, person-days, works) into one
of the colours of a low-to-high scale and builds the matching legend.
Names are matched case-insensitively, as GeoJSON sources disagree on
capitalisation (``"PUNE"`` vs ``"Pune"``).
"""

from __future__ import annotations

import math
from collections.abc import Callable, Iterable, Mapping, Sequence
from dataclasses import dataclass

from mgnrega_map.core.constants import DEFAULT_COLOR_SCALE
from mgnrega_map.core.exceptions import ValidationError

NO_DATA_COLOR = "#e5e7eb"


class ChoroplethError(ValidationError):
    """Raised when a colour scale cannot be used."""

    default_stage = "choropleth"
    default_code = "EMPTY_COLOR_SCALE"


@dataclass(frozen=True, slots=True)
class LegendItem:
    color: str
    label: str
    range: str


def _require_scale(color_scale: Sequence[str]) -> None:
    if not color_scale:
        msg = "Colour scale must contain at least one colour"
        raise ChoroplethError(msg)


def color_for_value(
    value: float,
    min_value: float,
    max_value: float,
    color_scale: Sequence[str] = DEFAULT_COLOR_SCALE,
) -> str:
    """Pick the bucket colour for *value* within ``[min_value, max_value]``.

    Zero, NaN and a degenerate range map to the first colour; values
    outside the range are clamped to the end buckets.

    Raises:
        ChoroplethError: If *color_scale* is empty.
    """
    _require_scale(color_scale)
    if value == 0 or max_value == min_value or math.isnan(value):
        return color_scale[0]

    normalized = (value - min_value) / (max_value - min_value)
    index = math.floor(normalized * len(color_scale))
    return color_scale[max(0, min(index, len(color_scale) - 1))]


def min_max(values: Iterable[float | None]) -> tuple[float, float]:
    """Return ``(min, max)`` ignoring ``None`` and NaN; ``(0, 0)`` if nothing is left."""
    valid = [v for v in values if v is not None and not math.isnan(v)]
    if not valid:
        return (0, 0)
    return (min(valid), max(valid))


def legend_items(
    min_value: float,
    max_value: float,
    color_scale: Sequence[str] = DEFAULT_COLOR_SCALE,
    formatter: Callable[[float], str] | None = None,
) -> list[LegendItem]:
    """Build one legend entry per colour with an ``"a - b"`` range label.

    Raises:
        ChoroplethError: If *color_scale* is empty.
    """
    _require_scale(color_scale)
    fmt = formatter or (lambda v: f"{v:.0f}")
    step = (max_value - min_value) / len(color_scale)
    last = len(color_scale) - 1

    items = []
    for index, color in enumerate(color_scale):
        if index == 0:
            label = "Low"
        elif index == last:
            label = "High"
        else:
            label = "Medium"
        start = min_value + step * index
        end = min_value + step * (index + 1)
        items.append(LegendItem(color=color, label=label, range=f"{fmt(start)} - {fmt(end)}"))
    return items


def fills_by_name(
    values_by_name: Mapping[str, float | None],
    color_scale: Sequence[str] = DEFAULT_COLOR_SCALE,
    *,
    no_data_color: str = NO_DATA_COLOR,
) -> dict[str, str]:
    """Map lower-cased names to fill colours for ``render_svg``.

    Names whose value is ``None`` get *no_data_color*.
    """
    low, high = min_max(values_by_name.values())
    fills = {}
    for name, value in values_by_name.items():
        if value is None:
            fills[name.lower()] = no_data_color
        else:
            fills[name.lower()] = color_for_value(value, low, high, color_scale)
    return fills
