"""Terminal rendering and the interactive loop."""

from __future__ import annotations

import argparse
import curses
from dataclasses import dataclass, replace
from enum import Enum, auto
from typing import Sequence

from sctui.state import (
    SEARCH_FILTERS,
    SUBTAB_TITLES,
    TAB_TITLES,
    AppState,
    Key,
    Tab,
    TableView,
    center_text_in_width,
)

APP_TITLE = "sctui"
FEED_TEXT = "Content of Feed Tab"
NOW_PLAYING_TEXT = "Now Playing Area"
SEARCH_TITLE = "search"
FILTER_TITLE = "filter"

HEADER_HEIGHT = 3
FOOTER_HEIGHT = 7
BAR_HEIGHT = 3
COLUMN_SPACING = 1
TAB_DIVIDER = "│"


class _Style(Enum):
    PLAIN = auto()
    TITLE = auto()
    TAB = auto()
    TAB_SELECTED = auto()
    HEADER = auto()
    ROW_SELECTED = auto()


@dataclass(frozen=True)
class _Span:
    row: int
    col: int
    text: str
    style: _Style = _Style.PLAIN


@dataclass(frozen=True)
class _Rect:
    x: int
    y: int
    w: int
    h: int

    @property
    def inner(self) -> _Rect:
        return _Rect(self.x + 1, self.y + 1, max(self.w - 2, 0), max(self.h - 2, 0))

    @property
    def right(self) -> int:
        return self.x + self.w


def _split(total: int, first: int, last: int) -> tuple[int, int, int]:
    """Share ``total`` rows into a fixed top, a flexible middle and a fixed bottom."""
    top = min(first, total)
    bottom = min(last, total - top)
    return top, total - top - bottom, bottom


def _put(spans: list[_Span], row: int, col: int, text: str, style: _Style, limit: int) -> int:
    """Append ``text`` clipped at column ``limit``; return the column after it."""
    room = max(limit - col, 0)
    clipped = text[:room]
    if clipped:
        spans.append(_Span(row, col, clipped, style))
    return col + len(clipped)


def _box(
    spans: list[_Span],
    rect: _Rect,
    title: str | None = None,
    title_style: _Style = _Style.PLAIN,
) -> _Rect:
    """Draw a rounded border around ``rect`` and return its inner area."""
    if rect.w < 2 or rect.h < 2:
        return _Rect(rect.x, rect.y, 0, 0)
    horizontal = "─" * (rect.w - 2)
    spans.append(_Span(rect.y, rect.x, f"╭{horizontal}╮"))
    for row in range(rect.y + 1, rect.y + rect.h - 1):
        spans.append(_Span(row, rect.x, "│"))
        spans.append(_Span(row, rect.right - 1, "│"))
    spans.append(_Span(rect.y + rect.h - 1, rect.x, f"╰{horizontal}╯"))
    if title:
        text = title[: rect.w - 2]
        spans.append(_Span(rect.y, rect.x + (rect.w - len(text)) // 2, text, title_style))
    return rect.inner


def _tabs(
    spans: list[_Span],
    rect: _Rect,
    titles: Sequence[str],
    selected: int,
    title: str | None = None,
    title_style: _Style = _Style.PLAIN,
) -> None:
    inner = _box(spans, rect, title, title_style)
    if inner.h < 1:
        return
    col = inner.x
    for index, name in enumerate(titles):
        if index:
            col = _put(spans, inner.y, col, TAB_DIVIDER, _Style.TAB, inner.right)
        col = _put(spans, inner.y, col, " ", _Style.TAB, inner.right)
        style = _Style.TAB_SELECTED if index == selected else _Style.TAB
        col = _put(spans, inner.y, col, name, style, inner.right)
        col = _put(spans, inner.y, col, " ", _Style.TAB, inner.right)


def _paragraph(
    spans: list[_Span],
    rect: _Rect,
    text: str,
    centered: bool,
    title: str | None = None,
) -> None:
    inner = _box(spans, rect, title)
    if inner.h < 1 or inner.w < 1:
        return
    shown = text[: inner.w]
    offset = (inner.w - len(shown)) // 2 if centered else 0
    _put(spans, inner.y, inner.x + offset, shown, _Style.PLAIN, inner.right)


def _column_positions(widths: Sequence[int], available: int) -> list[tuple[int, int]]:
    usable = max(available - COLUMN_SPACING * max(len(widths) - 1, 0), 0)
    positions = []
    offset = 0
    for percent in widths:
        size = usable * percent // 100
        positions.append((offset, size))
        offset += size + COLUMN_SPACING
    return positions


def _table(spans: list[_Span], rect: _Rect, table: TableView) -> None:
    inner = _box(spans, rect)
    if inner.h < 1 or inner.w < 1:
        return
    columns = _column_positions(table.widths, inner.w)
    bottom = inner.y + inner.h

    def draw_row(row: int, cells: Sequence[str], style: _Style) -> None:
        for cell, (offset, size) in zip(cells, columns):
            _put(spans, row, inner.x + offset, cell[:size], style, inner.right)

    draw_row(inner.y, table.headers, _Style.HEADER)
    for index, cells in enumerate(table.rows):
        row = inner.y + 1 + index
        if row >= bottom:
            break
        if index == table.selected:
            spans.append(_Span(row, inner.x, " " * inner.w, _Style.ROW_SELECTED))
            draw_row(row, cells, _Style.ROW_SELECTED)
        else:
            draw_row(row, cells, _Style.PLAIN)


def _filter_labels(width: int) -> list[str]:
    tab_width = width // len(SEARCH_FILTERS)
    labels = []
    for name in SEARCH_FILTERS:
        try:
            labels.append(center_text_in_width(name, tab_width))
        except ValueError:
            labels.append(name)
    return labels


def _layout(state: AppState, width: int, height: int) -> list[_Span]:
    view = replace(state, width=width)
    spans: list[_Span] = []
    head_h, body_h, foot_h = _split(height, HEADER_HEIGHT, FOOTER_HEIGHT)

    _tabs(
        spans,
        _Rect(0, 0, width, head_h),
        TAB_TITLES,
        view.selected_tab,
        title=APP_TITLE,
        title_style=_Style.TITLE,
    )

    body_y = head_h
    table = view.current_table()
    if view.selected_tab is Tab.LIBRARY:
        sub_h, table_h, _ = _split(body_h, BAR_HEIGHT, 0)
        _tabs(spans, _Rect(0, body_y, width, sub_h), SUBTAB_TITLES, view.selected_subtab)
        _table(spans, _Rect(0, body_y + sub_h, width, table_h), table)
    elif view.selected_tab is Tab.SEARCH:
        bar_h, table_h, filter_h = _split(body_h, BAR_HEIGHT, BAR_HEIGHT)
        _paragraph(spans, _Rect(0, body_y, width, bar_h), view.query, True, SEARCH_TITLE)
        _table(spans, _Rect(0, body_y + bar_h, width, table_h), table)
        _tabs(
            spans,
            _Rect(0, body_y + bar_h + table_h, width, filter_h),
            _filter_labels(width),
            view.selected_searchfilter,
            title=FILTER_TITLE,
        )
    else:
        _paragraph(spans, _Rect(0, body_y, width, body_h), FEED_TEXT, False)

    _paragraph(spans, _Rect(0, body_y + body_h, width, foot_h), NOW_PLAYING_TEXT, True)
    return spans


def render_lines(state: AppState, width: int, height: int) -> list[str]:
    """Render ``state`` as plain text: ``height`` lines of exactly ``width`` characters."""
    canvas = [[" "] * width for _ in range(height)]
    for span in _layout(state, width, height):
        if not 0 <= span.row < height:
            continue
        for offset, char in enumerate(span.text):
            col = span.col + offset
            if 0 <= col < width:
                canvas[span.row][col] = char
    return ["".join(line) for line in canvas]


_BASE_ATTRS = {
    _Style.PLAIN: curses.A_NORMAL,
    _Style.TITLE: curses.A_BOLD,
    _Style.TAB: curses.A_NORMAL,
    _Style.TAB_SELECTED: curses.A_BOLD,
    _Style.HEADER: curses.A_BOLD,
    _Style.ROW_SELECTED: curses.A_NORMAL,
}

_PAIR_SELECTED_TAB = 1
_PAIR_HEADER = 2
_PAIR_SELECTED_ROW = 3

_COLOR_PAIRS = {
    _Style.TAB_SELECTED: _PAIR_SELECTED_TAB,
    _Style.HEADER: _PAIR_HEADER,
    _Style.ROW_SELECTED: _PAIR_SELECTED_ROW,
}


def _attr(style: _Style) -> int:
    attr = _BASE_ATTRS[style]
    pair = _COLOR_PAIRS.get(style)
    if pair is not None:
        try:
            attr |= curses.color_pair(pair)
        except curses.error:
            pass
    return attr


def _init_colors() -> None:
    if not curses.has_colors():
        return
    curses.start_color()
    try:
        curses.use_default_colors()
        background = -1
    except curses.error:
        background = curses.COLOR_BLACK
    curses.init_pair(_PAIR_SELECTED_TAB, curses.COLOR_CYAN, background)
    curses.init_pair(_PAIR_HEADER, curses.COLOR_MAGENTA, background)
    curses.init_pair(_PAIR_SELECTED_ROW, curses.COLOR_WHITE, curses.COLOR_BLUE)


def render(screen, state: AppState) -> None:
    """Draw ``state`` onto a curses window sized by the window itself."""
    height, width = screen.getmaxyx()
    screen.erase()
    for span in _layout(state, width, height):
        if not 0 <= span.row < height or not 0 <= span.col < width:
            continue
        text = span.text[: width - span.col]
        try:
            screen.addstr(span.row, span.col, text, _attr(span.style))
        except curses.error:
            # Writing the bottom-right cell moves the cursor off-screen.
            pass
    screen.refresh()


_NAMED_KEYS = {
    "\x1b": Key.ESC,
    "\t": Key.TAB,
    "\x7f": Key.BACKSPACE,
    "\b": Key.BACKSPACE,
    curses.KEY_LEFT: Key.LEFT,
    curses.KEY_RIGHT: Key.RIGHT,
    curses.KEY_UP: Key.UP,
    curses.KEY_DOWN: Key.DOWN,
    curses.KEY_BACKSPACE: Key.BACKSPACE,
}


def _translate_key(raw: int | str) -> Key | str | None:
    """Map a curses key to a :class:`Key`, a typed character, or None if ignored."""
    named = _NAMED_KEYS.get(raw)
    if named is not None:
        return named
    if isinstance(raw, str) and raw.isprintable():
        return raw
    return None


def _loop(screen) -> None:
    try:
        curses.curs_set(0)
    except curses.error:
        pass
    _init_colors()
    screen.keypad(True)
    state = AppState()
    while state.running:
        _, state.width = screen.getmaxyx()
        render(screen, state)
        key = _translate_key(screen.get_wch())
        if key is not None:
            state.handle_key(key)


def run() -> None:
    """Take over the terminal and run the interface until Esc is pressed."""
    try:
        curses.set_escdelay(25)
    except (AttributeError, curses.error):
        pass
    curses.wrapper(_loop)


def main(argv: Sequence[str] | None = None) -> int:
    """Command-line entry point."""
    parser = argparse.ArgumentParser(
        prog="sctui", description="a soundcloud client for the terminal"
    )
    parser.parse_args(argv)
    run()
    return 0