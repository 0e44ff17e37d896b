"""
Notice Board — Terminal Application Tests
===========================================

What:  BoardApp driven end to end against the in-process API.
How:   The InquirerPy prompts are replaced by a scripted stand-in that hands
       back one prepared answer per prompt; rich output goes to a StringIO.

What we test:
    ✅ Creating a notice from the board
    ✅ Board delete: Cancel, declined confirmation, confirmed delete
    ✅ Blank form then "Keep editing?" → No returns to the board
    ✅ Detail screen: edit and save, back, declined and confirmed delete
"""

import io

import pytest
from rich.console import Console

from noticeboard.ui.app import BoardApp
from noticeboard.ui.navigation import BOARD
from noticeboard.ui.toast import Toast


class ScriptedPrompt:
    def __init__(self, answer):
        self.answer = answer

    async def execute_async(self):
        return self.answer


class ScriptedInquirer:
    """
    Stands in for `InquirerPy.inquirer`.

    Each prompt pops the next answer. A select answer must be one of the
    offered choice values. Running out of answers fails the test instead of
    blocking on a terminal.
    """

    def __init__(self, *answers):
        self.answers = list(answers)
        self.asked = []

    def _next(self, kind, kwargs):
        self.asked.append((kind, kwargs["message"]))
        if not self.answers:
            raise AssertionError(f"unexpected prompt: {kwargs['message']}")
        answer = self.answers.pop(0)
        if kind == "select":
            offered = [getattr(c, "value", None) for c in kwargs["choices"]]
            assert answer in offered, f"{answer!r} not offered by {kwargs['message']!r}"
        return ScriptedPrompt(answer)

    def select(self, **kwargs):
        return self._next("select", kwargs)

    def text(self, **kwargs):
        return self._next("text", kwargs)

    def confirm(self, **kwargs):
        return self._next("confirm", kwargs)


QUIT = ("quit", None)
CREATE = ("create", None)
DELETE = ("delete", None)


def open_(notice_id):
    return ("open", notice_id)


@pytest.fixture
def console():
    return Console(file=io.StringIO(), width=100)


@pytest.fixture
def script(monkeypatch):
    def install(*answers):
        prompts = ScriptedInquirer(*answers)
        monkeypatch.setattr("noticeboard.ui.app.inquirer", prompts)
        return prompts

    return install


class TestBoardScreen:

    @pytest.mark.asyncio
    async def test_quit_on_empty_board(self, api_client, console, script):
        prompts = script(QUIT)
        app = BoardApp(api_client, console=console)

        await app.run()

        assert prompts.answers == []
        assert "No notices yet" in console.file.getvalue()

    @pytest.mark.asyncio
    async def test_create_from_board(self, api_client, console, script):
        prompts = script(CREATE, "Meeting", "10am standup", QUIT)
        app = BoardApp(api_client, console=console)

        await app.run()

        notices = await api_client.list_notices()
        assert [(n.title, n.content) for n in notices] == [("Meeting", "10am standup")]
        assert app.toaster.last == Toast("success", "Notice created successfully")
        assert prompts.asked[-1] == ("select", "Notice board:")

    @pytest.mark.asyncio
    async def test_delete_cancel_decline_then_confirm(self, api_client, console, script):
        notice_id = str((await api_client.create_notice("Meeting", "10am standup")).id)
        prompts = script(
            DELETE, "",
            DELETE, notice_id, False,
            DELETE, notice_id, True,
            QUIT,
        )
        app = BoardApp(api_client, console=console)

        await app.run()

        kinds = [kind for kind, _ in prompts.asked]
        assert kinds == [
            "select", "select",
            "select", "select", "confirm",
            "select", "select", "confirm",
            "select",
        ]
        assert await api_client.list_notices() == []
        assert app.toaster.history == [Toast("success", "Deleted successfully")]

    @pytest.mark.asyncio
    async def test_cancel_leaves_notice(self, api_client, console, script):
        script(DELETE, "", QUIT)
        created = await api_client.create_notice("Meeting", "10am standup")

        await BoardApp(api_client, console=console).run()

        assert [n.id for n in await api_client.list_notices()] == [created.id]


class TestCreateScreen:

    @pytest.mark.asyncio
    async def test_stop_editing_returns_to_board(self, api_client, console, script):
        prompts = script(CREATE, "", "   ", False, QUIT)
        app = BoardApp(api_client, console=console)

        await app.run()

        assert await api_client.list_notices() == []
        assert app.toaster.history == [Toast("error", "Please fill in all fields")]
        assert ("confirm", "Keep editing?") in prompts.asked
        assert app.navigator.current == BOARD

    @pytest.mark.asyncio
    async def test_keep_editing_then_submit(self, api_client, console, script):
        script(CREATE, "Meeting", "", True, "Meeting", "10am standup", QUIT)
        app = BoardApp(api_client, console=console)

        await app.run()

        assert [n.content for n in await api_client.list_notices()] == ["10am standup"]
        assert app.toaster.last == Toast("success", "Notice created successfully")


class TestDetailScreen:

    @pytest.mark.asyncio
    async def test_edit_save_then_back(self, api_client, console, script):
        created = await api_client.create_notice("Meeting", "10am standup")
        notice_id = str(created.id)
        prompts = script(
            open_(notice_id),
            "edit", "Meeting", "10am standup (moved to 11)",
            "back",
            QUIT,
        )
        app = BoardApp(api_client, console=console)

        await app.run()

        stored = await api_client.get_notice(notice_id)
        assert stored.content == "10am standup (moved to 11)"
        assert stored.updated_at > created.updated_at
        assert app.toaster.last == Toast("success", "Notice updated successfully")
        assert prompts.asked[-1] == ("select", "Notice board:")

    @pytest.mark.asyncio
    async def test_decline_then_confirm_delete(self, api_client, console, script):
        notice_id = str((await api_client.create_notice("Meeting", "10am standup")).id)
        script(open_(notice_id), "delete", False, "delete", True, QUIT)
        app = BoardApp(api_client, console=console)

        await app.run()

        assert await api_client.list_notices() == []
        assert app.toaster.history == [Toast("success", "Notice deleted successfully")]
        assert app.navigator.current == BOARD

    @pytest.mark.asyncio
    async def test_missing_notice_redirects(self, api_client, console, script):
        script(QUIT)
        app = BoardApp(api_client, console=console)
        app.navigator.go("/note/does-not-exist")

        await app.run()

        assert app.toaster.history == [Toast("error", "Failed to fetch notice")]
        assert app.navigator.current == BOARD
