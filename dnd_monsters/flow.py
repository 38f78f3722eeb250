"""A flow layout: items placed left to right, wrapping onto new rows."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass


@dataclass(frozen=True)
class Size:
    """A width and a height."""

    width: int
    height: int

    def expanded_to(self, other: Size) -> Size:
        """Return the larger of each dimension."""
        return Size(max(self.width, other.width), max(self.height, other.height))


@dataclass(frozen=True)
class Rect:
    """An integer rectangle whose right and bottom edges are inclusive."""

    x: int
    y: int
    width: int
    height: int

    @property
    def right(self) -> int:
        return self.x + self.width - 1

    @property
    def bottom(self) -> int:
        return self.y + self.height - 1

    @property
    def size(self) -> Size:
        return Size(self.width, self.height)

    def adjusted(self, dx1: int, dy1: int, dx2: int, dy2: int) -> Rect:
        """Move the left/top edges by dx1/dy1 and the right/bottom edges by dx2/dy2."""
        return Rect(
            self.x + dx1,
            self.y + dy1,
            self.width + dx2 - dx1,
            self.height + dy2 - dy1,
        )


class FlowLayout:
    """Lays out item sizes in rows that wrap at the available width.

    A negative margin counts as none. A negative spacing falls back to
    ``parent_spacing``, or to -1 when there is no parent to ask.
    """

    def __init__(
        self,
        margin: int = -1,
        h_spacing: int = -1,
        v_spacing: int = -1,
        parent_spacing: int | None = None,
    ) -> None:
        self.margin = max(margin, 0)
        self._h_space = h_spacing
        self._v_space = v_spacing
        self._parent_spacing = parent_spacing
        self._items: list[Size] = []

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Size]:
        return iter(self._items)

    def __getitem__(self, index: int) -> Size:
        return self._items[index]

    def add_item(self, size: Size) -> None:
        """Append an item with the given preferred size."""
        self._items.append(size)

    def take_at(self, index: int) -> Size:
        """Remove and return the item at ``index``."""
        if not 0 <= index < len(self._items):
            raise IndexError(f"no item at index {index}")
        return self._items.pop(index)

    def _smart_spacing(self) -> int:
        return -1 if self._parent_spacing is None else self._parent_spacing

    def horizontal_spacing(self) -> int:
        return self._h_space if self._h_space >= 0 else self._smart_spacing()

    def vertical_spacing(self) -> int:
        return self._v_space if self._v_space >= 0 else self._smart_spacing()

    def height_for_width(self, width: int) -> int:
        """Return the height the items need when laid out in ``width``."""
        height, _ = self._do_layout(Rect(0, 0, width, 0))
        return height

    def minimum_size(self) -> Size:
        """Return the largest item size plus the margins."""
        size = Size(0, 0)
        for item in self._items:
            size = size.expanded_to(item)
        return Size(size.width + 2 * self.margin, size.height + 2 * self.margin)

    def arrange(self, rect: Rect) -> list[Rect]:
        """Return the geometry of every item when laid out inside ``rect``."""
        _, geometries = self._do_layout(rect)
        return geometries

    def _do_layout(self, rect: Rect) -> tuple[int, list[Rect]]:
        m = self.margin
        area = rect.adjusted(m, m, -m, -m)
        x, y = area.x, area.y
        line_height = 0
        space_x = self.horizontal_spacing()
        space_y = self.vertical_spacing()
        geometries = []

        for item in self._items:
            next_x = x + item.width + space_x
            if next_x - space_x > area.right and line_height > 0:
                x = area.x
                y += line_height + space_y
                next_x = x + item.width + space_x
                line_height = 0
            geometries.append(Rect(x, y, item.width, item.height))
            x = next_x
            line_height = max(line_height, item.height)

        return y + line_height - rect.y + m, geometries