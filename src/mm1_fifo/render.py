# src/mm1_fifo/render.py

"""
Text rendering of queue occupancy.

One line per queue: a mark per slot in array order (`*` occupied,
blank free), followed by the queue length, e.g. for a 5-slot queue
holding two elements:

     **    2
"""

from typing import Optional, Sequence

# Local package imports
from .base_queue import BaseQueue
from .constants import OCCUPIED_MARK, FREE_MARK


def render_occupancy(mask: Sequence[bool],
                     length: Optional[int] = None) -> str:
    """
    Renders an occupancy mask as a single line.

    Args:
        mask (Sequence[bool]): Per-slot occupancy in array order.
        length (Optional[int]): The queue length to print after the
            slots. Counted from the mask if not given.

    Returns:
        str: The rendered line.
    """
    if length is None:
        length = sum(1 for occupied in mask if occupied)
    slots = "".join(OCCUPIED_MARK if occupied else FREE_MARK
                    for occupied in mask)
    return f" {slots} {length}"


def render_queue(queue: BaseQueue) -> str:
    """Renders the current occupancy of `queue`."""
    return render_occupancy(queue.occupancy_mask(), len(queue))
