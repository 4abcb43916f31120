# sctui

A terminal interface for browsing SoundCloud, at an early stage.

`sctui` draws a full-screen, keyboard-driven interface with curses. It has
three tabs:

- **Library**: sections for Likes, Playlists, Albums, Stations, Following and
  History, each shown as a table.
- **Search**: a search bar, a results table and a row of filters
  (Tracks, Albums, Playlists, People).
- **Feed**: a placeholder panel.

A "Now Playing" panel runs along the bottom of the screen.

## Installation

```
pip install .
```

Python 3.10 or later is required, along with a Python whose standard library
includes `curses` (Linux, macOS and other POSIX systems).

## Usage

```
sctui
```

### Keys

| Key         | Action                                                       |
|-------------|--------------------------------------------------------------|
| `Tab`       | Switch to the next tab (Library → Search → Feed → Library)   |
| `→` / `←`   | Next / previous library section, or search filter            |
| `↓` / `↑`   | Move the row selection down / up                             |
| printable character | On the Search tab, append it to the search query     |
| `Backspace` | On the Search tab, delete the last character of the query    |
| `Esc`       | Quit                                                         |

Moving left or right wraps around at either end, and switching tab, section or
filter puts the selection back on the first row. Cell text that is longer
than its column is shortened and ends in `...`.

## Library use

`sctui.state` holds the interface logic without any terminal code:

- `AppState` keeps the selected tab, section, filter, row and query;
  `AppState.handle_key(key)` applies a `Key` or a typed character and returns
  `False` once `Esc` has been pressed, and `AppState.current_table()` returns
  the `TableView` for the active tab (or `None` on the Feed tab).
- `library_table(subtab, total_width)` and `search_table(searchfilter, total_width)`
  build the tables, with `calculate_column_widths`, `calculate_min_widths` and
  `truncate_with_ellipsis` doing the column sizing and shortening.

`sctui.tui.render_lines(state, width, height)` renders a state to plain text
lines, which is handy for testing layouts without a terminal.

`sctui.api.get_me(access_token)` fetches the profile of the account the token
belongs to and returns the raw response text; it raises `requests.HTTPError`
when the server answers with an error status.

```python
from sctui.api import get_me

profile_json = get_me("token")
```

## What it does not do

- There is no sign-in: the package neither obtains nor stores access tokens,
  and the interface never contacts SoundCloud. `get_me` needs a token you
  already have.
- The Library and Search tables show fixed sample rows, not your account's
  data, and typing a query does not run a search.
- The Feed tab and the Now Playing panel are placeholders; nothing is played.

## Running the tests

```
pip install ".[test]"
pytest
```