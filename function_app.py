"""Azure Functions entry point — MGNREGA map path generator.

Registers the HTTP functions that expose the path worker using the
Python v2 programming model.

All business logic lives in the mgnrega_map package. This file is purely
the wiring layer between Azure Functions bindings and application code.
"""

from __future__ import annotations

import json
import logging

import azure.functions as func

from mgnrega_map.core.config import MapConfig
from mgnrega_map.core.exceptions import MapError
from mgnrega_map.worker.map_worker import MapPathWorker

app = func.FunctionApp(http_auth_level=func.AuthLevel.ANONYMOUS)

logger = logging.getLogger("mgnrega_map.function_app")

_worker: MapPathWorker | None = None


def _get_worker() -> MapPathWorker:
    """Create the process-wide worker on first use (config read once)."""
    global _worker  # noqa: PLW0603
    if _worker is None or _worker.closed:
        _worker = MapPathWorker(MapConfig.from_env())
    return _worker


def _error_response(exc: MapError) -> func.HttpResponse:
    """Structured error body with the status the error class maps to."""
    return func.HttpResponse(
        json.dumps(exc.to_error_dict()),
        status_code=exc.http_status,
        mimetype="application/json",
    )


# ---------------------------------------------------------------------------
# HTTP: GENERATE_PATHS → PATHS_READY
# ---------------------------------------------------------------------------


async def serve_paths(req: func.HttpRequest, worker: MapPathWorker) -> func.HttpResponse:
    """Answer a ``GENERATE_PATHS`` message with a ``PATHS_READY`` message.

    Body: ``{"type": "GENERATE_PATHS", "data": {...}, "requestId": "..."}``.
    Invalid envelopes return 400 with a structured error body.
    """
    try:
        response = await worker.request(req.get_body())
    except MapError as exc:
        logger.warning("Rejected paths request | code=%s | error=%s", exc.code, exc.message)
        return _error_response(exc)

    logger.info(
        "Paths request served | paths=%d | request_id=%s",
        len(response["paths"]),
        response.get("requestId", ""),
    )
    return func.HttpResponse(json.dumps(response), mimetype="application/json")


@app.function_name("generate_paths")
@app.route(route="map/paths", methods=["POST"])
async def generate_paths_http(req: func.HttpRequest) -> func.HttpResponse:
    return await serve_paths(req, _get_worker())


# ---------------------------------------------------------------------------
# HTTP: GENERATE_PATHS → SVG document
# ---------------------------------------------------------------------------


async def serve_svg(req: func.HttpRequest, worker: MapPathWorker) -> func.HttpResponse:
    """Answer a ``GENERATE_PATHS`` message with a rendered SVG map.

    Extra ``data`` fields: ``fills`` (name → colour), ``showLabels``.
    """
    try:
        document = await worker.render(req.get_body())
    except MapError as exc:
        logger.warning("Rejected SVG request | code=%s | error=%s", exc.code, exc.message)
        return _error_response(exc)

    return func.HttpResponse(document, mimetype="image/svg+xml")


@app.function_name("render_map_svg")
@app.route(route="map/svg", methods=["POST"])
async def render_map_svg_http(req: func.HttpRequest) -> func.HttpResponse:
    return await serve_svg(req, _get_worker())
