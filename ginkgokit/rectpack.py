"""Skyline rectangle packing into a fixed-size target, without rotation."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Iterable, Optional

MAX_COORD = 0x7FFFFFFF
"""Coordinate given to rectangles that could not be packed."""

_FAR = 1 << 30


class Heuristic(IntEnum):
    """How the packer chooses among candidate positions."""

    SKYLINE_BL_SORT_HEIGHT = 0
    SKYLINE_BF_SORT_HEIGHT = 1
    SKYLINE_DEFAULT = 0


@dataclass
class Rect:
    """A rectangle to pack; ``x``, ``y`` and ``was_packed`` are filled in by packing."""

    w: int
    h: int
    id: int = 0
    x: int = 0
    y: int = 0
    was_packed: bool = False

    def __post_init__(self) -> None:
        if self.w < 0 or self.h < 0:
            raise ValueError(f"rectangle size must not be negative, got {self.w}x{self.h}")


class _Node:
    __slots__ = ("x", "y", "next")

    def __init__(self, x: int = 0, y: int = 0, next: Optional["_Node"] = None) -> None:
        self.x = x
        self.y = y
        self.next = next


# Stands for the link held by the packer itself (the head of the skyline).
_HEAD = object()


class RectPacker:
    """Packs rectangles into a ``width`` x ``height`` area using a skyline.

    ``num_nodes`` bounds the number of skyline segments. By default widths are
    quantized so that this bound is never reached; :meth:`set_allow_out_of_mem`
    turns quantization off at the risk of running out of segments.
    Packing may be continued into the same area by calling :meth:`pack` again.
    """

    def __init__(self, width: int, height: int, num_nodes: int) -> None:
        if width <= 0 or height <= 0:
            raise ValueError(f"target size must be positive, got {width}x{height}")
        if num_nodes < 1:
            raise ValueError(f"num_nodes must be at least 1, got {num_nodes}")
        self.width = width
        self.height = height
        self.num_nodes = num_nodes
        self.heuristic = Heuristic.SKYLINE_DEFAULT

        nodes = [_Node() for _ in range(num_nodes)]
        for node, following in zip(nodes, nodes[1:]):
            node.next = following
        self._free_head: Optional[_Node] = nodes[0]

        # The sentinel sits at x == width so the skyline never needs its width stored.
        sentinel = _Node(width, _FAR, None)
        self._active_head: _Node = _Node(0, 0, sentinel)
        self.align = 1
        self.set_allow_out_of_mem(False)

    def set_allow_out_of_mem(self, allow: bool) -> None:
        """Choose between exact widths (may run out of nodes) and quantized widths."""
        if allow:
            self.align = 1
        else:
            self.align = (self.width + self.num_nodes - 1) // self.num_nodes

    def set_heuristic(self, heuristic: int) -> None:
        """Select bottom-left or best-fit placement."""
        try:
            self.heuristic = Heuristic(heuristic)
        except ValueError:
            raise ValueError(f"unknown packing heuristic {heuristic!r}") from None

    def pack(self, rects: Iterable[Rect]) -> bool:
        """Place each rectangle, filling in its position; return True if all fit.

        Rectangles that do not fit get ``was_packed`` False and both coordinates
        set to :data:`MAX_COORD`. Empty rectangles are placed at the origin.
        """
        items = list(rects)
        ordered = sorted(items, key=lambda r: (-r.h, -r.w))
        for rect in ordered:
            if rect.w == 0 or rect.h == 0:
                rect.x = rect.y = 0
                continue
            placed = self._pack_rectangle(rect.w, rect.h)
            if placed is None:
                rect.x = rect.y = MAX_COORD
            else:
                rect.x, rect.y = placed

        all_packed = True
        for rect in items:
            rect.was_packed = not (rect.x == MAX_COORD and rect.y == MAX_COORD)
            if not rect.was_packed:
                all_packed = False
        return all_packed

    def _link(self, prev: object) -> _Node:
        if prev is _HEAD:
            return self._active_head
        return prev.next  # type: ignore[attr-defined]

    def _set_link(self, prev: object, node: _Node) -> None:
        if prev is _HEAD:
            self._active_head = node
        else:
            prev.next = node  # type: ignore[attr-defined]

    @staticmethod
    def _find_min_y(first: _Node, x0: int, width: int) -> tuple[int, int]:
        node = first
        x1 = x0 + width
        min_y = 0
        waste = 0
        visited = 0
        while node.x < x1:
            if node.y > min_y:
                waste += visited * (node.y - min_y)
                min_y = node.y
                if node.x < x0:
                    visited += node.next.x - x0
                else:
                    visited += node.next.x - node.x
            else:
                under = node.next.x - node.x
                if under + visited > width:
                    under = width - visited
                waste += under * (min_y - node.y)
                visited += under
            node = node.next
        return min_y, waste

    def _find_best_pos(self, width: int, height: int) -> tuple[object, int, int]:
        width = width + self.align - 1
        width -= width % self.align

        if width > self.width or height > self.height:
            return None, 0, 0

        best: object = None
        best_y = _FAR
        best_waste = _FAR
        bottom_left = self.heuristic == Heuristic.SKYLINE_BL_SORT_HEIGHT

        node = self._active_head
        prev: object = _HEAD
        while node.x + width <= self.width:
            y, waste = self._find_min_y(node, node.x, width)
            if bottom_left:
                if y < best_y:
                    best_y = y
                    best = prev
            elif y + height <= self.height:
                if y < best_y or (y == best_y and waste < best_waste):
                    best_y = y
                    best_waste = waste
                    best = prev
            prev = node
            node = node.next

        best_x = 0 if best is None else self._link(best).x

        if self.heuristic == Heuristic.SKYLINE_BF_SORT_HEIGHT:
            # Also try aligning the right edge with each skyline step.
            tail: Optional[_Node] = self._active_head
            node = self._active_head
            prev = _HEAD
            while tail.x < width:
                tail = tail.next
            while tail is not None:
                xpos = tail.x - width
                while node.next.x <= xpos:
                    prev = node
                    node = node.next
                y, waste = self._find_min_y(node, xpos, width)
                if y + height <= self.height and y <= best_y:
                    if y < best_y or waste < best_waste or (waste == best_waste and xpos < best_x):
                        best_x = xpos
                        best_y = y
                        best_waste = waste
                        best = prev
                tail = tail.next

        return best, best_x, best_y

    def _pack_rectangle(self, width: int, height: int) -> Optional[tuple[int, int]]:
        best, x, y = self._find_best_pos(width, height)
        if best is None or y + height > self.height or self._free_head is None:
            return None

        node = self._free_head
        node.x = x
        node.y = y + height
        self._free_head = node.next

        cur = self._link(best)
        if cur.x < x:
            following = cur.next
            cur.next = node
            cur = following
        else:
            self._set_link(best, node)

        # Return the segments now covered by the new one to the free list.
        while cur.next is not None and cur.next.x <= x + width:
            following = cur.next
            cur.next = self._free_head
            self._free_head = cur
            cur = following

        node.next = cur
        if cur.x < x + width:
            cur.x = x + width
        return x, y