import curses

import pytest

from sctui.state import AppState, Key, Tab
from sctui.tui import _translate_key, main, render, render_lines


class FakeScreen:
    def __init__(self, height, width):
        self.height = height
        self.width = width
        self.calls = []
        self.refreshed = False
        self.erased = False

    def getmaxyx(self):
        return self.height, self.width

    def erase(self):
        self.erased = True

    def addstr(self, row, col, text, attr=0):
        if row == self.height - 1 and col + len(text) >= self.width:
            raise curses.error("bottom-right cell")
        self.calls.append((row, col, text, attr))

    def refresh(self):
        self.refreshed = True


def _text(lines):
    return "\n".join(lines)


@pytest.mark.parametrize("tab", list(Tab))
@pytest.mark.parametrize("width,height", [(80, 24), (120, 40), (20, 5), (10, 2)])
def test_render_lines_has_exact_dimensions(tab, width, height):
    lines = render_lines(AppState(selected_tab=tab), width, height)
    assert len(lines) == height
    assert all(len(line) == width for line in lines)


def test_render_lines_frames_and_titles():
    lines = render_lines(AppState(), 80, 24)
    assert lines[0].startswith("╭")
    assert lines[0].endswith("╮")
    assert "sctui" in lines[0]
    assert lines[-1].startswith("╰")
    assert "Library" in lines[1] and "Search" in lines[1] and "Feed" in lines[1]
    assert "Now Playing Area" in _text(lines[-7:])


def test_library_tab_shows_subtabs_and_rows():
    lines = render_lines(AppState(), 80, 24)
    assert "Likes" in lines[4] and "History" in lines[4]
    assert "Title" in lines[7]
    assert "Short song name" in lines[8]
    assert "Medium length song name" in lines[9]


def test_narrow_terminal_truncates_cells():
    lines = render_lines(AppState(), 40, 24)
    text = _text(lines)
    assert "Really really really long song name" not in text
    assert "..." in text


def test_feed_tab_shows_placeholder():
    lines = render_lines(AppState(selected_tab=Tab.FEED), 80, 24)
    text = _text(lines)
    assert "Content of Feed Tab" in text
    assert "Likes" not in text


def test_search_tab_shows_query_and_filters():
    state = AppState()
    state.handle_key(Key.TAB)
    for char in "abc":
        state.handle_key(char)
    lines = render_lines(state, 80, 24)
    text = _text(lines)
    assert "search" in lines[3]
    assert "abc" in lines[4]
    assert "filter" in text
    assert "Tracks" in text and "People" in text


def test_render_lines_does_not_change_state():
    state = AppState(width=80)
    render_lines(state, 33, 24)
    assert state.width == 80


def test_selected_row_follows_state():
    state = AppState()
    state.handle_key(Key.DOWN)
    lines = render_lines(state, 80, 24)
    assert state.selected_row == 1
    assert "Medium length song name" in lines[9]


def test_render_draws_within_screen_and_tolerates_corner():
    screen = FakeScreen(24, 80)
    render(screen, AppState())
    assert screen.erased and screen.refreshed
    assert all(0 <= row < 24 and col + len(text) <= 80 for row, col, text, _ in screen.calls)
    drawn = "".join(text for _, _, text, _ in screen.calls)
    assert "sctui" in drawn
    assert "Now Playing Area" in drawn


def test_render_matches_plain_lines():
    state = AppState(selected_tab=Tab.FEED)
    screen = FakeScreen(20, 60)
    render(screen, state)
    lines = render_lines(state, 60, 20)
    for row, col, text, _ in screen.calls:
        assert lines[row][col : col + len(text)] == text


@pytest.mark.parametrize(
    "raw,expected",
    [
        ("\x1b", Key.ESC),
        ("\t", Key.TAB),
        (curses.KEY_LEFT, Key.LEFT),
        (curses.KEY_RIGHT, Key.RIGHT),
        (curses.KEY_UP, Key.UP),
        (curses.KEY_DOWN, Key.DOWN),
        (curses.KEY_BACKSPACE, Key.BACKSPACE),
        ("\x7f", Key.BACKSPACE),
        ("q", "q"),
        ("\n", None),
    ],
)
def test_translate_key(raw, expected):
    assert _translate_key(raw) == expected


def test_main_help_exits_cleanly(capsys):
    with pytest.raises(SystemExit) as excinfo:
        main(["--help"])
    assert excinfo.value.code == 0
    assert "sctui" in capsys.readouterr().out