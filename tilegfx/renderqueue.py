"""Draw calls and the depth-ordered queue they are rendered from."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any


@dataclass(eq=False)
class DrawCall:
    """One instance of an image waiting to be drawn."""

    image: Any
    instance_id: int

    def depth(self) -> int:
        """Return the current z depth of the instance this call draws."""
        return self.image.instances[self.instance_id].z


def sort_render_queue(queue: Iterable[DrawCall]) -> list[DrawCall]:
    """Return the draw calls ordered by ascending depth.

    Calls of equal depth come out in the reverse of their order in
    ``queue``.
    """
    return sorted(reversed(list(queue)), key=lambda call: call.depth())


def remove_image_calls(queue: list[DrawCall], image: Any) -> list[DrawCall]:
    """Remove every draw call of ``image`` from ``queue`` in place.

    Returns the removed calls in their original order.
    """
    removed = [call for call in queue if call.image is image]
    queue[:] = [call for call in queue if call.image is not image]
    return removed