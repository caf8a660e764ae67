# Copyright (c) 2026 Gradpick
# SPDX-License-Identifier: MIT

"""
Recently used colors.

A bounded, most-recent-first list owned by one picker session. Only
adjacent duplicates are suppressed: recording A, B, A keeps all three.
Not thread-safe; a session is driven by a single caller.
"""

from __future__ import annotations

import logging
from collections import deque
from typing import Iterator, Union

from gradpick.errors import InvalidColorError
from gradpick.schema import ColorToken

logger = logging.getLogger(__name__)


class RecencyTracker:
    """
    Fixed-size history of committed colors.

    When full, the oldest entry is discarded.
    """

    def __init__(self, max_size: int = 20):
        """
        Args:
            max_size: Maximum number of colors to keep (default: 20)
        """
        if max_size < 1:
            raise ValueError(f"max_size must be >= 1, got {max_size}")
        self.max_size = max_size
        self._entries: deque[ColorToken] = deque(maxlen=max_size)

    def record(self, color: Union[str, ColorToken]) -> bool:
        """
        Put ``color`` at the front unless it repeats the current front.

        Invalid color text is ignored.

        Returns:
            True if the color was recorded
        """
        if isinstance(color, ColorToken):
            token = color
        else:
            try:
                token = ColorToken.parse(color)
            except InvalidColorError:
                logger.debug("Not recording invalid color %r", color)
                return False

        if self._entries and self._entries[0] == token:
            return False
        self._entries.appendleft(token)
        return True

    def history(self) -> tuple[str, ...]:
        """Snapshot of recorded colors, most recent first (lower-cased text)."""
        return tuple(t.text.lower() for t in self._entries)

    def clear(self) -> None:
        self._entries.clear()

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[str]:
        return iter(self.history())
