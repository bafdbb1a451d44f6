"""
Cursor and scroll window over a sequence of visible tree lines.

Every navigation operation moves the cursor first and then scrolls only as
far as needed to keep the cursor inside the window. The number of visible
nodes is passed in on each call since the graph owns it.
"""

from dataclasses import dataclass


@dataclass
class ViewportCursor:
    """
    Cursor position and scroll offset over `total` visible nodes.

    Invariants after any operation with total > 0:
        0 <= cursor < total
        offset <= cursor < offset + height   (when height > 0)

    Params:
        height: Number of lines the window can show; 0 disables windowing
        cursor: Index of the highlighted node in the visible sequence
        offset: Index of the first line shown in the window
    """

    height: int = 0
    cursor: int = 0
    offset: int = 0

    def __post_init__(self):
        self.height = max(0, self.height)

    def set_height(self, height: int) -> None:
        self.height = max(0, height)

    def reset(self) -> None:
        """Move back to the first node, as after a rebuild."""
        self.cursor = 0
        self.offset = 0

    def move_down(self, total: int) -> None:
        if total <= 0:
            return
        if self.cursor < total - 1:
            self.cursor += 1
        self._scroll_to_cursor()

    def move_up(self, total: int) -> None:
        if total <= 0:
            return
        if self.cursor > 0:
            self.cursor -= 1
        self._scroll_to_cursor()

    def move_page_down(self, total: int) -> None:
        """Advance by one page; the cursor lands on the bottom line of the window."""
        if total <= 0 or self.height <= 0:
            self.move_down(total)
            return
        self.cursor = min(self.cursor + self.height, total - 1)
        if self.cursor >= self.offset + self.height:
            self.offset = self.cursor - self.height + 1

    def move_page_up(self, total: int) -> None:
        """Retreat by one page; the cursor lands on the top line of the window."""
        if total <= 0 or self.height <= 0:
            self.move_up(total)
            return
        self.cursor = max(self.cursor - self.height, 0)
        if self.cursor < self.offset:
            self.offset = self.cursor

    def clamp(self, total: int) -> None:
        """
        Normalize cursor and offset after the visible count or height changed.

        The cursor is clamped to the visible range, the offset to the last
        full window, and the offset then moves so the cursor stays visible.
        """
        if total <= 0:
            self.reset()
            return
        self.height = max(0, self.height)
        self.cursor = min(max(self.cursor, 0), total - 1)
        max_start = max(total - self.height, 0)
        self.offset = min(max(self.offset, 0), max_start)
        self._scroll_to_cursor()

    def _scroll_to_cursor(self) -> None:
        if self.height <= 0:
            return
        if self.cursor < self.offset:
            self.offset = self.cursor
        elif self.cursor >= self.offset + self.height:
            self.offset = self.cursor - self.height + 1
