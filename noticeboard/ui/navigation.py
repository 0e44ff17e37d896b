"""
Notice Board — Screen Navigation
==================================

What:  Tracks which screen is showing.
How:   A route string (`/`, `/create`, `/note/<id>`) plus a generation
       counter that moves on every navigation. A view remembers the
       generation when it starts a request and drops the response if the
       counter has moved by the time it arrives.
"""

import logging
from typing import Optional, Tuple

logger = logging.getLogger(__name__)

BOARD = "/"
CREATE = "/create"
NOTE_PREFIX = "/note/"


def note_route(notice_id) -> str:
    return f"{NOTE_PREFIX}{notice_id}"


class Navigator:
    """Current route and its generation."""

    def __init__(self, start: str = BOARD):
        self.current = start
        self.generation = 0

    def go(self, route: str) -> None:
        logger.debug("Navigate %s -> %s", self.current, route)
        self.current = route
        self.generation += 1

    def resolve(self) -> Tuple[str, Optional[str]]:
        """
        Split the current route into (screen, param).

        Unknown routes resolve to the board.
        """
        if self.current == CREATE:
            return "create", None
        if self.current.startswith(NOTE_PREFIX) and len(self.current) > len(NOTE_PREFIX):
            return "detail", self.current[len(NOTE_PREFIX):]
        return "board", None
