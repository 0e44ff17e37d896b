"""
Notice Board — Screen State Machines
======================================

What:  BoardView, CreateView and DetailView: the state and actions behind
       each screen.
How:   Each view calls the API client, moves through its states, reports
       outcomes through the Toaster and changes screens through the
       Navigator. Views never prompt or print; BoardApp does that.

State Machines:
    BoardView:   loading → {populated | empty}
    CreateView:  editing → submitting → {navigated-away | editing}
    DetailView:  loading → {loaded | redirected}
                 loaded  → saving → {loaded | redirected}
                 loaded  → (delete) → {redirected | loaded}

Shared rules:
    - While a request is in flight the view is `busy` and ignores a second
      trigger of any action.
    - A response that arrives after the user navigated elsewhere is dropped
      without touching state or showing a toast.
"""

import logging
from enum import Enum
from typing import List, Optional

from noticeboard.client import ApiError
from noticeboard.schemas.notice import NoticeResponse
from noticeboard.ui.navigation import BOARD, CREATE, Navigator, note_route
from noticeboard.ui.toast import Toaster

logger = logging.getLogger(__name__)


class BoardState(str, Enum):
    LOADING = "loading"
    POPULATED = "populated"
    EMPTY = "empty"


class CreateState(str, Enum):
    EDITING = "editing"
    SUBMITTING = "submitting"
    NAVIGATED_AWAY = "navigated-away"


class DetailState(str, Enum):
    LOADING = "loading"
    LOADED = "loaded"
    SAVING = "saving"
    REDIRECTED = "redirected"


class View:
    """Base for the three screens: API client, navigator, toaster, busy flag."""

    def __init__(self, api, navigator: Navigator, toaster: Toaster):
        self.api = api
        self.navigator = navigator
        self.toaster = toaster
        self.busy = False

    def _ticket(self) -> int:
        return self.navigator.generation

    def _is_current(self, ticket: int) -> bool:
        if self.navigator.generation != ticket:
            logger.debug("%s: dropping response after navigation", type(self).__name__)
            return False
        return True


# ══════════════════════════════════════════════════════════════════════════
# Board
# ══════════════════════════════════════════════════════════════════════════

class BoardView(View):
    """All notices as summary cards, newest first."""

    def __init__(self, api, navigator: Navigator, toaster: Toaster):
        super().__init__(api, navigator, toaster)
        self.state = BoardState.LOADING
        self.notices: List[NoticeResponse] = []

    async def mount(self) -> None:
        """Fetch the list. A failure leaves an empty board and an error toast."""
        if self.busy:
            return
        self.busy = True
        self.state = BoardState.LOADING
        ticket = self._ticket()
        failure: Optional[ApiError] = None
        try:
            notices = await self.api.list_notices()
        except ApiError as e:
            notices, failure = [], e
        finally:
            self.busy = False

        if not self._is_current(ticket):
            return
        if failure is not None:
            logger.warning("Failed to fetch notices: %s", failure.error)
            self.toaster.error("Failed to fetch notices")
        self.notices = notices
        self._settle()

    async def delete(self, notice_id: str) -> bool:
        """
        Delete one notice. The card is removed only after the API confirms,
        so a failed call leaves the board exactly as it was.
        """
        if self.busy:
            return False
        self.busy = True
        ticket = self._ticket()
        try:
            await self.api.delete_notice(notice_id)
        except ApiError as e:
            if self._is_current(ticket):
                logger.warning("Failed to delete notice %s: %s", notice_id, e.error)
                self.toaster.error("Failed to delete notice")
            return False
        finally:
            self.busy = False

        if self._is_current(ticket):
            self.notices = [n for n in self.notices if str(n.id) != str(notice_id)]
            self._settle()
            self.toaster.success("Deleted successfully")
        return True

    def open_notice(self, notice_id: str) -> None:
        self.navigator.go(note_route(notice_id))

    def open_create(self) -> None:
        self.navigator.go(CREATE)

    def _settle(self) -> None:
        self.state = BoardState.POPULATED if self.notices else BoardState.EMPTY


# ══════════════════════════════════════════════════════════════════════════
# Create
# ══════════════════════════════════════════════════════════════════════════

class CreateView(View):
    """The new-notice form."""

    def __init__(self, api, navigator: Navigator, toaster: Toaster):
        super().__init__(api, navigator, toaster)
        self.state = CreateState.EDITING
        self.title = ""
        self.content = ""

    async def submit(self) -> bool:
        """
        Create the notice from the form fields.

        Blank fields never reach the API. On failure the form keeps what the
        user typed.
        """
        if self.busy:
            return False
        if not self.title.strip() or not self.content.strip():
            self.toaster.error("Please fill in all fields")
            return False

        self.busy = True
        self.state = CreateState.SUBMITTING
        ticket = self._ticket()
        try:
            created = await self.api.create_notice(self.title.strip(), self.content.strip())
        except ApiError as e:
            if self._is_current(ticket):
                logger.warning("Error creating notice: %s", e.error)
                self.state = CreateState.EDITING
                self.toaster.error("Error creating notice")
            return False
        finally:
            self.busy = False

        if self._is_current(ticket):
            logger.info("Created notice %s", created.id)
            self.toaster.success("Notice created successfully")
            self.title = ""
            self.content = ""
            self.state = CreateState.NAVIGATED_AWAY
            self.navigator.go(BOARD)
        return True

    def cancel(self) -> None:
        self.state = CreateState.NAVIGATED_AWAY
        self.navigator.go(BOARD)


# ══════════════════════════════════════════════════════════════════════════
# Detail / Edit
# ══════════════════════════════════════════════════════════════════════════

class DetailView(View):
    """
    One notice, editable in place.

    `title` and `content` are the form fields; `notice` is the last version
    the API returned.
    """

    def __init__(self, api, navigator: Navigator, toaster: Toaster, notice_id: str):
        super().__init__(api, navigator, toaster)
        self.notice_id = notice_id
        self.state = DetailState.LOADING
        self.notice: Optional[NoticeResponse] = None
        self.title = ""
        self.content = ""

    async def mount(self) -> None:
        """Fetch the notice; any failure sends the user back to the board."""
        if self.busy:
            return
        self.busy = True
        self.state = DetailState.LOADING
        ticket = self._ticket()
        try:
            notice = await self.api.get_notice(self.notice_id)
        except ApiError as e:
            if self._is_current(ticket):
                logger.warning("Failed to fetch notice %s: %s", self.notice_id, e.error)
                self.toaster.error("Failed to fetch notice")
                self._redirect()
            return
        finally:
            self.busy = False

        if self._is_current(ticket):
            self._load(notice)

    async def save(self) -> bool:
        """
        Send the edited fields. Success stays on the page with the refreshed
        notice; failure returns to the board.
        """
        if self.busy or self.state is not DetailState.LOADED:
            return False
        if not self.title.strip() or not self.content.strip():
            self.toaster.error("Title and content are required")
            return False

        self.busy = True
        self.state = DetailState.SAVING
        ticket = self._ticket()
        try:
            updated = await self.api.update_notice(
                self.notice_id, self.title.strip(), self.content.strip()
            )
        except ApiError as e:
            if self._is_current(ticket):
                logger.warning("Failed to update notice %s: %s", self.notice_id, e.error)
                self.toaster.error("Failed to update notice")
                self._redirect()
            return False
        finally:
            self.busy = False

        if self._is_current(ticket):
            self._load(updated)
            self.toaster.success("Notice updated successfully")
        return True

    async def delete(self) -> bool:
        if self.busy or self.state is not DetailState.LOADED:
            return False

        self.busy = True
        ticket = self._ticket()
        try:
            await self.api.delete_notice(self.notice_id)
        except ApiError as e:
            if self._is_current(ticket):
                logger.warning("Failed to delete notice %s: %s", self.notice_id, e.error)
                self.toaster.error("Failed to delete notice")
            return False
        finally:
            self.busy = False

        if self._is_current(ticket):
            self.toaster.success("Notice deleted successfully")
            self._redirect()
        return True

    def back(self) -> None:
        self._redirect()

    def _load(self, notice: NoticeResponse) -> None:
        self.notice = notice
        self.title = notice.title
        self.content = notice.content
        self.state = DetailState.LOADED

    def _redirect(self) -> None:
        self.state = DetailState.REDIRECTED
        self.navigator.go(BOARD)
