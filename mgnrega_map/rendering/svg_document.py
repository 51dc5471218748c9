"""Standalone SVG documents from generated paths.

Builds the same markup the dashboard's map components draw in the
browser: one ``<path>`` per feature with a fill, a ``<title>`` tooltip
and ``data-*`` attributes for click handling, plus optional name labels.

Labels follow the dashboard's rule for permanent labels: a name is
drawn once, at the first feature carrying it, so districts split into
several features are not labelled repeatedly.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass

from lxml import etree

from mgnrega_map.core.constants import DEFAULT_NAME_KEYS
from mgnrega_map.models.feature import MapFeature
from mgnrega_map.models.path_result import PathResult
from mgnrega_map.models.projection import ProjectionParameters
from mgnrega_map.rendering.generate_paths import generate_paths
from mgnrega_map.rendering.geometry_ops import label_anchor
from mgnrega_map.rendering.projection import Projector
from mgnrega_map.rendering.svg_path import format_number

logger = logging.getLogger("mgnrega_map.rendering.svg_document")

SVG_NAMESPACE = "http://www.w3.org/2000/svg"


def _svg(tag: str) -> str:
    return f"{{{SVG_NAMESPACE}}}{tag}"


@dataclass(frozen=True, slots=True)
class SvgStyle:
    """Presentation attributes shared by every feature path."""

    default_fill: str = "#3498db"
    stroke: str = "#000000"
    stroke_width: float = 1.0
    fill_opacity: float = 0.7
    label_font_size: float = 10.0


def render_svg(
    paths: Iterable[PathResult],
    *,
    width: int,
    height: int,
    fills: Mapping[str, str] | None = None,
    anchors: Mapping[int, tuple[float, float] | None] | None = None,
    style: SvgStyle | None = None,
) -> bytes:
    """Serialise *paths* to a UTF-8 SVG document.

    Args:
        paths: Generated paths; empty ones are skipped.
        width: Canvas width in pixels.
        height: Canvas height in pixels.
        fills: Fill colour per feature name (case-insensitive).
        anchors: Label position per ``PathResult.id``; labels are drawn
            only when given.
        style: Presentation attributes.

    Returns:
        The document bytes, with XML declaration.
    """
    style = style or SvgStyle()
    fill_lookup = {name.lower(): color for name, color in (fills or {}).items()}
    results = list(paths)

    root = etree.Element(_svg("svg"), nsmap={None: SVG_NAMESPACE})
    root.set("width", str(width))
    root.set("height", str(height))
    root.set("viewBox", f"0 0 {width} {height}")

    group = etree.SubElement(root, _svg("g"))
    group.set("class", "features")
    group.set("stroke", style.stroke)
    group.set("stroke-width", format_number(style.stroke_width))
    group.set("fill-opacity", format_number(style.fill_opacity))

    drawn = 0
    for result in results:
        if result.is_empty:
            continue
        element = etree.SubElement(group, _svg("path"))
        element.set("d", result.path)
        element.set("fill", fill_lookup.get(result.name.lower(), style.default_fill))
        element.set("data-id", str(result.id))
        if result.name:
            element.set("data-name", result.name)
            title = etree.SubElement(element, _svg("title"))
            title.text = result.name
        drawn += 1

    labelled = 0
    if anchors:
        labels = etree.SubElement(root, _svg("g"))
        labels.set("class", "labels")
        labels.set("text-anchor", "middle")
        labels.set("font-size", format_number(style.label_font_size))
        seen: set[str] = set()
        for result in results:
            anchor = anchors.get(result.id)
            if anchor is None or not result.name or result.name in seen:
                continue
            seen.add(result.name)
            text = etree.SubElement(labels, _svg("text"))
            text.set("x", format_number(anchor[0]))
            text.set("y", format_number(anchor[1]))
            text.text = result.name
            labelled += 1

    logger.debug("SVG rendered | paths=%d | labels=%d | size=%dx%d", drawn, labelled, width, height)
    return etree.tostring(root, xml_declaration=True, encoding="UTF-8", pretty_print=True)


def render_map_svg(
    features: Iterable[MapFeature | Mapping[str, object]],
    params: ProjectionParameters,
    *,
    width: int,
    height: int,
    name_keys: Sequence[str] = DEFAULT_NAME_KEYS,
    fills: Mapping[str, str] | None = None,
    show_labels: bool = False,
    style: SvgStyle | None = None,
) -> bytes:
    """Generate paths for *features* and serialise them as one SVG document."""
    map_features = [
        f if isinstance(f, MapFeature) else MapFeature.from_geojson(f) for f in features
    ]
    paths = generate_paths(map_features, params, name_keys=name_keys)

    anchors: dict[int, tuple[float, float] | None] | None = None
    if show_labels:
        try:
            projector = Projector(params)
        except ValueError as exc:
            logger.warning("Labels skipped; projection centre invalid | error=%s", exc)
        else:
            anchors = {i: label_anchor(f, projector) for i, f in enumerate(map_features)}

    return render_svg(
        paths,
        width=width,
        height=height,
        fills=fills,
        anchors=anchors,
        style=style,
    )
