"""
Notice Board — rich Renderables
=================================

What:  Turns view state into rich renderables: the header bar, summary
       cards, the loading skeleton, the empty state and the detail page.
How:   Pure functions of their inputs; BoardApp prints what they return.
"""

from datetime import datetime
from typing import List

from rich.columns import Columns
from rich.console import Group, RenderableType
from rich.panel import Panel
from rich.text import Text

from noticeboard.schemas.notice import NoticeResponse
from noticeboard.ui.views import BoardState, BoardView, DetailView

CARD_WIDTH = 38
PREVIEW_CHARS = 120
PREVIEW_LINES = 3
SKELETON_CARDS = 6


def format_date(value: datetime) -> str:
    """e.g. "Jan 5, 2025"."""
    return f"{value:%b} {value.day}, {value.year}"


def preview(content: str, max_chars: int = PREVIEW_CHARS, max_lines: int = PREVIEW_LINES) -> str:
    """First few lines of the content, ellipsised when cut."""
    lines = content.splitlines()
    text = "\n".join(lines[:max_lines])
    cut = len(lines) > max_lines
    if len(text) > max_chars:
        text = text[:max_chars].rstrip()
        cut = True
    return text + "…" if cut else text


def header() -> RenderableType:
    title = Text("Notice Board", style="bold cyan")
    return Panel(title, subtitle="[dim]+ New Notice[/dim]", border_style="cyan")


def notice_card(notice: NoticeResponse, number: int = 0) -> Panel:
    body = Text(preview(notice.content), style="default")
    footer = Text(format_date(notice.created_at), style="dim italic")
    label = f"{number}. {notice.title}" if number else notice.title
    return Panel(
        Group(body, Text(""), footer),
        title=Text(label, style="bold"),
        title_align="left",
        border_style="magenta",
        width=CARD_WIDTH,
    )


def skeleton_cards(count: int = SKELETON_CARDS) -> Columns:
    """Grey placeholder cards shown while the list is loading."""
    placeholder = Text("░" * 24 + "\n" + "░" * 30 + "\n" + "░" * 26, style="grey30")
    return Columns(
        [Panel(placeholder, border_style="grey30", width=CARD_WIDTH) for _ in range(count)]
    )


def empty_state() -> Panel:
    return Panel(
        Text.assemble(
            ("No notices yet\n", "bold"),
            ("There aren't any notices to show right now. Create one to get started.", "dim"),
        ),
        border_style="cyan",
        padding=(1, 2),
    )


def board(view: BoardView) -> RenderableType:
    if view.state is BoardState.LOADING:
        return skeleton_cards()
    if view.state is BoardState.EMPTY:
        return empty_state()
    cards: List[Panel] = [notice_card(n, i) for i, n in enumerate(view.notices, start=1)]
    return Columns(cards)


def detail(view: DetailView) -> RenderableType:
    notice = view.notice
    if notice is None:
        return Text("Loading notice...", style="dim")
    meta = Text(
        f"Created {format_date(notice.created_at)} · Updated {format_date(notice.updated_at)}",
        style="dim italic",
    )
    return Panel(
        Group(Text(notice.content), Text(""), meta),
        title=Text(notice.title, style="bold"),
        title_align="left",
        border_style="magenta",
        padding=(1, 2),
    )
