"""
Command history with Up/Down recall.

The log only ever grows (or drops its oldest entries past max_size);
recalling entries moves a cursor and never edits the log.
"""

from typing import List, Optional


class CommandHistory:
    """Append-only list of submitted lines plus a recall cursor"""

    def __init__(self, max_size: int = 1000):
        """
        Args:
            max_size: Keep at most this many entries (0 keeps everything)
        """
        self.max_size = max_size
        self.entries: List[str] = []
        self.cursor: Optional[int] = None

    def add(self, command: str):
        """Record a submitted line and reset the cursor"""
        self.entries.append(command)
        if self.max_size and len(self.entries) > self.max_size:
            del self.entries[:len(self.entries) - self.max_size]
        self.cursor = None

    def previous(self) -> Optional[str]:
        """
        Step toward older entries (the Up key).

        From no selection this lands on the newest entry; at the oldest
        entry it stays put. Returns None when the history is empty.
        """
        if not self.entries:
            return None
        if self.cursor is None:
            self.cursor = len(self.entries) - 1
        else:
            self.cursor = max(0, self.cursor - 1)
        return self.entries[self.cursor]

    def next(self) -> Optional[str]:
        """
        Step toward newer entries (the Down key).

        Moving past the newest entry clears the selection and returns an
        empty string so the input is blanked. Returns None (leave input
        alone) when nothing is selected.
        """
        if not self.entries or self.cursor is None:
            return None
        if self.cursor + 1 >= len(self.entries):
            self.cursor = None
            return ''
        self.cursor += 1
        return self.entries[self.cursor]

    def reset_cursor(self):
        self.cursor = None

    def __len__(self) -> int:
        return len(self.entries)
