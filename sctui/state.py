"""Application state, key handling and table contents for the terminal UI."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, IntEnum

TAB_TITLES = ("Library", "Search", "Feed")
SUBTAB_TITLES = ("Likes", "Playlists", "Albums", "Stations", "Following", "History")
SEARCH_FILTERS = ("Tracks", "Albums", "Playlists", "People")

NUM_TABS = len(TAB_TITLES)
NUM_SUBTABS = len(SUBTAB_TITLES)
NUM_SEARCHFILTERS = len(SEARCH_FILTERS)

LAST_COLUMN_PERCENT = 10
ELLIPSIS = "..."

_TRACK_HEADERS = ("Title", "Artist(s)", "Album", "Duration")
_ALBUM_HEADERS = ("Title", "Artist(s)", "Year", "Duration")
_PLAYLIST_HEADERS = ("Name", "No. Songs", "Duration")
_NAME_HEADERS = ("Name",)

_TRACKS = (
    ("Short song name", "Short artist name", "Short album name", "0:57"),
    ("Medium length song name", "Medium length artist name", "Medium length album name", "12:54"),
    (
        "Really really really long song name",
        "Really really really long artist name",
        "Really really really long album name",
        "12:59:30",
    ),
)
_PLAYLISTS = (
    ("Playlist 1", "15", "30:00"),
    ("Playlist 2", "1", "2:30"),
)
_ALBUMS = (
    ("Album One", "Artist X", "1997", "45:02"),
    ("Album Two", "Artist Y", "2009", "16:03"),
)
_STATIONS = (("Station Jazz",), ("Station Rock",))
_FOLLOWING = (("Following Artist A",), ("Following Artist B",))
_HISTORY = (
    ("History Song A", "Artist X", "Album X", "3:10"),
    ("History Song B", "Artist Y", "Album Y", "2:54"),
)

_LIBRARY_CONTENT = {
    0: (_TRACK_HEADERS, _TRACKS),
    1: (_PLAYLIST_HEADERS, _PLAYLISTS),
    2: (_ALBUM_HEADERS, _ALBUMS),
    3: (_NAME_HEADERS, _STATIONS),
    4: (_NAME_HEADERS, _FOLLOWING),
    5: (_TRACK_HEADERS, _HISTORY),
}

_SEARCH_CONTENT = {
    0: (_TRACK_HEADERS, _TRACKS),
    1: (_ALBUM_HEADERS, _ALBUMS),
    2: (_PLAYLIST_HEADERS, _PLAYLISTS),
    3: (_NAME_HEADERS, _FOLLOWING),
}

_LIBRARY_ROW_COUNTS = {0: 3, 1: 2, 2: 2, 3: 2, 4: 2, 5: 2}


class Key(Enum):
    """Non-character keys the interface reacts to."""

    ESC = "esc"
    TAB = "tab"
    LEFT = "left"
    RIGHT = "right"
    UP = "up"
    DOWN = "down"
    BACKSPACE = "backspace"


class Tab(IntEnum):
    """Top-level tabs, in display order."""

    LIBRARY = 0
    SEARCH = 1
    FEED = 2

    @property
    def title(self) -> str:
        return TAB_TITLES[self.value]


@dataclass(frozen=True)
class TableView:
    """Headers, column width percentages and (already truncated) rows of a table."""

    headers: tuple[str, ...]
    widths: list[int]
    rows: list[tuple[str, ...]]
    selected: int | None = None


def get_table_rows_count(selected_subtab: int) -> int:
    """Number of rows shown for a library subtab; 0 for an unknown subtab."""
    return _LIBRARY_ROW_COUNTS.get(selected_subtab, 0)


def calculate_column_widths(num_columns: int) -> list[int]:
    """Column widths as percentages.

    With more than two columns the last is fixed at 10% and the rest share 90%;
    otherwise the columns split 100% evenly.
    """
    if num_columns <= 0:
        return []
    if num_columns > 2:
        other = 90 // (num_columns - 1)
        return [other] * (num_columns - 1) + [LAST_COLUMN_PERCENT]
    return [100 // num_columns] * num_columns


def calculate_min_widths(column_widths: list[int], total_width: int) -> list[int]:
    """Convert percentage widths into character counts for a given total width."""
    return [total_width * percent // 100 for percent in column_widths]


def truncate_with_ellipsis(s: str, min_width: int) -> str:
    """Shorten ``s`` to ``min_width`` characters ending in '...' when it is too long."""
    if len(s) > min_width and min_width > 3:
        return s[: min_width - 3] + ELLIPSIS
    return s


def center_text_in_width(text: str, width: int) -> str:
    """Pad ``text`` symmetrically so it sits centred in a cell of ``width``.

    Raises ``ValueError`` when the width leaves less than two spare columns.
    """
    total_padding = width - len(text)
    if total_padding < 2:
        raise ValueError(f"width {width} too small to centre {text!r}")
    padding = " " * (total_padding // 2 - 1)
    return f"{padding}{text}{padding}"


def _build_table(
    content: dict[int, tuple[tuple[str, ...], tuple[tuple[str, ...], ...]]],
    index: int,
    total_width: int,
) -> TableView:
    headers, data = content.get(index, ((), ()))
    widths = calculate_column_widths(len(headers))
    limits = calculate_min_widths(widths, total_width)
    rows = [
        tuple(truncate_with_ellipsis(cell, limit) for cell, limit in zip(row, limits))
        for row in data
    ]
    return TableView(headers=headers, widths=widths, rows=rows)


def library_table(subtab: int, total_width: int) -> TableView:
    """Table shown in the library tab for ``subtab`` at a terminal of ``total_width``."""
    return _build_table(_LIBRARY_CONTENT, subtab, total_width)


def search_table(searchfilter: int, total_width: int) -> TableView:
    """Table shown in the search tab for ``searchfilter`` at ``total_width``."""
    return _build_table(_SEARCH_CONTENT, searchfilter, total_width)


@dataclass
class AppState:
    """Navigation state of the interface."""

    selected_tab: Tab = Tab.LIBRARY
    selected_subtab: int = 0
    selected_row: int = 0
    query: str = ""
    selected_searchfilter: int = 0
    width: int = 80
    running: bool = field(default=True)

    def handle_key(self, key: Key | str) -> bool:
        """Apply a key press; returns False once the interface should quit.

        ``key`` is a :class:`Key` or a single character string.
        """
        if isinstance(key, str):
            if self.selected_tab is Tab.SEARCH:
                self.query += key
            return self.running

        if key is Key.ESC:
            self.running = False
        elif key is Key.TAB:
            self.selected_tab = Tab((self.selected_tab + 1) % NUM_TABS)
            self.selected_row = 0
        elif key is Key.RIGHT:
            self._shift_selection(1)
        elif key is Key.LEFT:
            self._shift_selection(-1)
        elif key is Key.DOWN:
            if self.selected_row + 1 < get_table_rows_count(self.selected_subtab):
                self.selected_row += 1
        elif key is Key.UP:
            if self.selected_row > 0:
                self.selected_row -= 1
        elif key is Key.BACKSPACE:
            if self.selected_tab is Tab.SEARCH:
                self.query = self.query[:-1]
        return self.running

    def _shift_selection(self, step: int) -> None:
        if self.selected_tab is Tab.LIBRARY:
            self.selected_subtab = (self.selected_subtab + step) % NUM_SUBTABS
            self.selected_row = 0
        elif self.selected_tab is Tab.SEARCH:
            self.selected_searchfilter = (self.selected_searchfilter + step) % NUM_SEARCHFILTERS
            self.selected_row = 0

    def current_table(self) -> TableView | None:
        """Table for the active tab with the selected row marked; None on the feed tab."""
        if self.selected_tab is Tab.LIBRARY:
            table = library_table(self.selected_subtab, self.width)
        elif self.selected_tab is Tab.SEARCH:
            table = search_table(self.selected_searchfilter, self.width)
        else:
            return None
        return TableView(
            headers=table.headers,
            widths=table.widths,
            rows=table.rows,
            selected=self.selected_row,
        )