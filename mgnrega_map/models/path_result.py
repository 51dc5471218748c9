"""Data model for one generated SVG path.

A PathResult is the per-feature output of the batch converter and the
element type of the ``PATHS_READY`` response.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class PathResult:
    """SVG path for the feature at position ``id`` of the input batch.

    Attributes:
        id: Zero-based index of the feature in the request.
        name: Display label derived from feature properties (may be ``""``).
        path: SVG path data (``"M x y L x y ... Z"``); ``""`` when the
            feature has no drawable geometry.
    """

    id: int
    name: str = ""
    path: str = ""

    def to_dict(self) -> dict[str, object]:
        """Serialise for the ``PATHS_READY`` response."""
        return {"id": self.id, "name": self.name, "path": self.path}

    @classmethod
    def from_dict(cls, data: dict[str, object]) -> PathResult:
        """Deserialise a response entry.

        Raises:
            TypeError: If ``id`` is missing or not an integer.
        """
        raw_id = data.get("id")
        if not isinstance(raw_id, int) or isinstance(raw_id, bool):
            msg = f"id must be an int, got {type(raw_id).__name__}"
            raise TypeError(msg)
        return cls(
            id=raw_id,
            name=str(data.get("name", "")),
            path=str(data.get("path", "")),
        )

    @property
    def subpath_count(self) -> int:
        """Number of closed subpaths (one per rendered ring)."""
        return self.path.count("M")

    @property
    def is_empty(self) -> bool:
        return not self.path
