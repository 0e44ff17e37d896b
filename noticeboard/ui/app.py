"""
Notice Board — Terminal Board Application
===========================================

What:  The interactive client: prints screens with rich and asks for the
       next action with InquirerPy.
How:   A loop over Navigator routes. Each pass builds the view for the
       current route, mounts it, then prompts until the view navigates away.
Who:   `python -m noticeboard board --api-url ...`

Screens:
    /           board: open, create, delete, refresh, quit
    /create     form: title, content, submit
    /note/<id>  detail: edit and save, delete, back
"""

import logging
from typing import Optional

from InquirerPy import inquirer
from InquirerPy.base.control import Choice
from InquirerPy.separator import Separator
from rich.console import Console
from rich.live import Live
from rich.panel import Panel

from noticeboard.client import NoticeApiClient
from noticeboard.ui import render
from noticeboard.ui.navigation import BOARD, Navigator
from noticeboard.ui.toast import Toaster
from noticeboard.ui.views import BoardView, CreateState, CreateView, DetailState, DetailView

logger = logging.getLogger(__name__)


class BoardApp:
    def __init__(
        self,
        api,
        console: Optional[Console] = None,
        navigator: Optional[Navigator] = None,
        toaster: Optional[Toaster] = None,
    ):
        self.api = api
        self.console = console or Console()
        self.navigator = navigator or Navigator()
        self.toaster = toaster or Toaster(self.console)
        self._running = True

    async def run(self) -> None:
        while self._running:
            screen, param = self.navigator.resolve()
            if screen == "create":
                await self._create_screen()
            elif screen == "detail":
                await self._detail_screen(param)
            else:
                await self._board_screen()

    # ── Board ─────────────────────────────────────────────────────────────

    async def _board_screen(self) -> None:
        view = BoardView(self.api, self.navigator, self.toaster)
        await self._load_board(view)

        while self.navigator.current == BOARD and self._running:
            self.console.print(render.board(view))

            choices = [
                Choice(("open", str(n.id)), name=f"{i}. {n.title}")
                for i, n in enumerate(view.notices, start=1)
            ]
            if choices:
                choices.append(Separator())
            choices.append(Choice(("create", None), name="+ New Notice"))
            if view.notices:
                choices.append(Choice(("delete", None), name="Delete a notice"))
            choices.append(Choice(("refresh", None), name="Refresh"))
            choices.append(Choice(("quit", None), name="Quit"))

            action, notice_id = await inquirer.select(
                message="Notice board:",
                choices=choices,
                cycle=True,
            ).execute_async()

            if action == "open":
                view.open_notice(notice_id)
            elif action == "create":
                view.open_create()
            elif action == "delete":
                await self._delete_from_board(view)
            elif action == "refresh":
                await self._load_board(view)
            else:
                self._running = False

    async def _load_board(self, view: BoardView) -> None:
        self.console.print(render.header())
        with Live(render.skeleton_cards(), console=self.console, transient=True):
            await view.mount()

    async def _delete_from_board(self, view: BoardView) -> None:
        notice_id = await inquirer.select(
            message="Delete which notice?",
            choices=[Choice(str(n.id), name=n.title) for n in view.notices]
            + [Choice("", name="Cancel")],
        ).execute_async()
        if not notice_id:
            return
        confirmed = await inquirer.confirm(
            message="Are you sure you want to delete this note?",
            default=False,
        ).execute_async()
        if confirmed:
            await view.delete(notice_id)

    # ── Create ────────────────────────────────────────────────────────────

    async def _create_screen(self) -> None:
        view = CreateView(self.api, self.navigator, self.toaster)
        self.console.print(
            Panel(
                "Write a short, clear title and the full notice content below.",
                title="Create a new Notice",
                title_align="left",
                border_style="cyan",
            )
        )

        while view.state is CreateState.EDITING:
            view.title = await inquirer.text(
                message="Title:",
                default=view.title,
                long_instruction="Keep it short. The title appears on the board.",
            ).execute_async()
            view.content = await inquirer.text(
                message="Content:",
                default=view.content,
                multiline=True,
                long_instruction="Be descriptive so readers can understand. ESC then ENTER to finish.",
            ).execute_async()

            with self.console.status("Creating..."):
                if await view.submit():
                    return

            keep_editing = await inquirer.confirm(
                message="Keep editing?", default=True
            ).execute_async()
            if not keep_editing:
                view.cancel()

    # ── Detail ────────────────────────────────────────────────────────────

    async def _detail_screen(self, notice_id: str) -> None:
        view = DetailView(self.api, self.navigator, self.toaster, notice_id)
        with self.console.status("Loading notice..."):
            await view.mount()

        while view.state is DetailState.LOADED:
            self.console.print(render.detail(view))
            action = await inquirer.select(
                message="Notice:",
                choices=[
                    Choice("edit", name="Edit"),
                    Choice("delete", name="Delete Notice"),
                    Choice("back", name="Back to Notice Board"),
                ],
            ).execute_async()

            if action == "edit":
                view.title = await inquirer.text(
                    message="Title:", default=view.title
                ).execute_async()
                view.content = await inquirer.text(
                    message="Content:",
                    default=view.content,
                    multiline=True,
                    long_instruction="ESC then ENTER to finish.",
                ).execute_async()
                with self.console.status("Saving..."):
                    await view.save()
            elif action == "delete":
                confirmed = await inquirer.confirm(
                    message="Are you sure you want to delete this notice? This action cannot be undone.",
                    default=False,
                ).execute_async()
                if confirmed:
                    await view.delete()
            else:
                view.back()


async def run_board(api_url: str, console: Optional[Console] = None) -> None:
    """Open a client on `api_url` and run the board until the user quits."""
    logger.info("Connecting to %s", api_url)
    async with NoticeApiClient(api_url) as api:
        await BoardApp(api, console=console).run()
