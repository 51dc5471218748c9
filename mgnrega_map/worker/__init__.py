"""Background path worker and its message handlers."""

from mgnrega_map.worker.map_worker import (
    MapPathWorker,
    WorkerClosedError,
    handle_message,
    handle_render_svg,
)

__all__ = [
    "MapPathWorker",
    "WorkerClosedError",
    "handle_message",
    "handle_render_svg",
]
