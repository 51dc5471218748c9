"""Background path worker.

Runs path generation off the caller's thread behind a one-request,
one-response message contract:

    {"type": "GENERATE_PATHS", "data": {...}, "requestId": "r-1"}
        → {"type": "PATHS_READY", "paths": [...], "requestId": "r-1"}

Each batch is independent and stateless.  Features inside a batch are
processed strictly in order; separate batches may run concurrently on
the pool and complete in any order, so callers with several batches in
flight correlate responses through the echoed ``requestId``.

Errors:
- A malformed envelope raises ``ContractError`` from the returned
  future (or awaitable); it never produces a partial response.
- Submitting to a closed worker raises ``WorkerClosedError``.
"""

from __future__ import annotations

import asyncio
import logging
import threading
from collections.abc import Callable
from concurrent.futures import Future, ThreadPoolExecutor
from typing import Any, TypeVar

from mgnrega_map.core.config import MapConfig
from mgnrega_map.core.constants import MSG_PATHS_READY
from mgnrega_map.core.exceptions import ContractError, PermanentError
from mgnrega_map.core.ingress import deserialize_message, parse_generate_request
from mgnrega_map.models.contracts import PathsReadyResponse
from mgnrega_map.rendering.generate_paths import generate_paths
from mgnrega_map.rendering.svg_document import render_map_svg

logger = logging.getLogger("mgnrega_map.worker.map_worker")

T = TypeVar("T")


class WorkerClosedError(PermanentError):
    """Raised when a message is submitted after ``close()``."""

    default_stage = "worker"
    default_code = "WORKER_CLOSED"


# ---------------------------------------------------------------------------
# Message handlers (pure; run on pool threads)
# ---------------------------------------------------------------------------


def handle_message(message: object, *, config: MapConfig | None = None) -> PathsReadyResponse:
    """Answer one ``GENERATE_PATHS`` message with one ``PATHS_READY`` message.

    Raises:
        ContractError: If the message envelope is invalid.
    """
    config = config or MapConfig()
    request = parse_generate_request(deserialize_message(message), config)

    results = generate_paths(
        request.features,
        request.params,
        name_keys=request.name_keys or config.name_keys,
    )

    response: PathsReadyResponse = {
        "type": MSG_PATHS_READY,
        "paths": [r.to_dict() for r in results],  # type: ignore[misc]
    }
    if request.request_id is not None:
        response["requestId"] = request.request_id
    return response


def handle_render_svg(message: object, *, config: MapConfig | None = None) -> bytes:
    """Answer a ``GENERATE_PATHS`` message with a complete SVG document.

    Optional ``data`` fields: ``fills`` (name → colour) and
    ``showLabels``.

    Raises:
        ContractError: If the envelope or ``fills`` is invalid.
    """
    config = config or MapConfig()
    request = parse_generate_request(deserialize_message(message), config)

    fills = request.options.get("fills")
    if fills is not None and not (
        isinstance(fills, dict)
        and all(isinstance(k, str) and isinstance(v, str) for k, v in fills.items())
    ):
        msg = "fills must be an object mapping names to colour strings"
        raise ContractError(
            msg,
            stage="worker",
            code="INVALID_INPUT_TYPE",
            correlation_id=request.correlation_id,
        )

    return render_map_svg(
        request.features,
        request.params,
        width=config.canvas_width,
        height=config.canvas_height,
        name_keys=request.name_keys or config.name_keys,
        fills=fills,
        show_labels=bool(request.options.get("showLabels", False)),
    )


# ---------------------------------------------------------------------------
# Worker
# ---------------------------------------------------------------------------


class MapPathWorker:
    """Thread-pool worker that owns no state between batches.

    Usage::

        with MapPathWorker(MapConfig.from_env()) as worker:
            response = await worker.request(message)
    """

    def __init__(self, config: MapConfig | None = None) -> None:
        self.config = config or MapConfig()
        self._executor = ThreadPoolExecutor(
            max_workers=self.config.worker_threads,
            thread_name_prefix="map-path-worker",
        )
        self._lock = threading.Lock()
        self._closed = False
        logger.info("Map path worker started | threads=%d", self.config.worker_threads)

    @property
    def closed(self) -> bool:
        return self._closed

    def _submit(self, handler: Callable[..., T], message: object) -> Future[T]:
        with self._lock:
            if self._closed:
                msg = "Map path worker is closed"
                raise WorkerClosedError(msg)
            return self._executor.submit(handler, message, config=self.config)

    def submit(self, message: object) -> Future[PathsReadyResponse]:
        """Queue a ``GENERATE_PATHS`` message; the future yields ``PATHS_READY``."""
        return self._submit(handle_message, message)

    def submit_svg(self, message: object) -> Future[bytes]:
        """Queue a ``GENERATE_PATHS`` message; the future yields SVG bytes."""
        return self._submit(handle_render_svg, message)

    async def request(self, message: object) -> PathsReadyResponse:
        """Await the ``PATHS_READY`` response without blocking the event loop."""
        return await asyncio.wrap_future(self.submit(message))

    async def render(self, message: object) -> bytes:
        """Await an SVG document without blocking the event loop."""
        return await asyncio.wrap_future(self.submit_svg(message))

    def close(self, *, wait: bool = True) -> None:
        """Stop accepting messages; optionally wait for queued batches."""
        with self._lock:
            if self._closed:
                return
            self._closed = True
        self._executor.shutdown(wait=wait)
        logger.info("Map path worker closed")

    def __enter__(self) -> MapPathWorker:
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()
