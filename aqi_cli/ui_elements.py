#file: aqi_cli/ui_elements.py

import curses
import locale
from contextlib import contextmanager
from typing import Dict, Iterator, List, Tuple

from aqi_cli.errors import TerminalError
from aqi_cli.models import Station
from aqi_cli.utils import bar_color, gauge_percent, gauge_title, location_rows, pollutant_rows

# (x0, y0, x1, y1), right and bottom edges exclusive
Rect = Tuple[int, int, int, int]

GAUGE_RECT: Rect = (0, 0, 50, 5)
POLLUTANT_RECT: Rect = (50, 0, 100, 5)
LOCATION_RECT: Rect = (0, 5, 50, 11)

QUIT_EVENTS = ("q", "<C-c>")
CTRL_C = 3

COLOR_PAIRS = {
    "green" : (1, curses.COLOR_GREEN),
    "yellow" : (2, curses.COLOR_YELLOW),
    "red" : (3, curses.COLOR_RED),
    "white" : (4, curses.COLOR_WHITE),
}


def _init_palette() -> Dict[str, int] :
    """Register one color pair per bar color and return their attributes."""
    if not curses.has_colors() :
        return {name : 0 for name in COLOR_PAIRS}
    curses.start_color()
    palette = {}
    for name, (pair, color) in COLOR_PAIRS.items() :
        curses.init_pair(pair, color, curses.COLOR_BLACK)
        palette[name] = curses.color_pair(pair)
    return palette


@contextmanager
def terminal_session() -> Iterator[Tuple["curses.window", Dict[str, int]]] :
    """Take over the terminal for one view and hand it back on every exit path."""
    try :
        locale.setlocale(locale.LC_ALL, "")
    except locale.Error as e :
        raise TerminalError(f"unsupported terminal locale: {e}") from e
    try :
        screen = curses.initscr()
    except curses.error as e :
        raise TerminalError(f"failed to initialize the terminal: {e}") from e

    try :
        try :
            curses.noecho()
            curses.raw()
            screen.keypad(True)
            palette = _init_palette()
        except curses.error as e :
            raise TerminalError(f"failed to initialize the terminal: {e}") from e
        try :
            curses.curs_set(0)
        except curses.error :
            pass  # not every terminal can hide the cursor
        yield screen, palette
    finally :
        screen.keypad(False)
        curses.noraw()
        curses.echo()
        curses.endwin()


def put(screen, y: int, x: int, text: str, attr: int = 0) -> None :
    """Write text clipped to the screen; out of range writes are dropped."""
    height, width = screen.getmaxyx()
    if y < 0 or y >= height or x < 0 or x >= width :
        return
    # curses refuses to write the bottom-right cell
    limit = width - x - (1 if y == height - 1 else 0)
    if limit <= 0 or not text :
        return
    screen.addnstr(y, x, text, limit, attr)


def draw_box(screen, rect: Rect, title: str = "") -> None :
    x0, y0, x1, y1 = rect
    inner = x1 - x0 - 2
    put(screen, y0, x0, "┌" + "─" * inner + "┐")
    for y in range(y0 + 1, y1 - 1) :
        put(screen, y, x0, "│")
        put(screen, y, x1 - 1, "│")
    put(screen, y1 - 1, x0, "└" + "─" * inner + "┘")
    if title :
        put(screen, y0, x0 + 1, title[:inner])


def draw_gauge(screen, rect: Rect, percent: int, title: str, attr: int = 0) -> None :
    """Framed bar filled to percent of its inner width, with the percent as label."""
    draw_box(screen, rect, title)
    x0, y0, x1, y1 = rect
    inner = x1 - x0 - 2
    filled = inner * max(0, min(percent, 100)) // 100
    rows = list(range(y0 + 1, y1 - 1))
    for y in rows :
        put(screen, y, x0 + 1, " " * filled, attr | curses.A_REVERSE)
    if rows :
        label = f"{percent}%"
        put(screen, rows[len(rows) // 2], x0 + 1 + max(0, (inner - len(label)) // 2), label, curses.A_BOLD)


def draw_list(screen, rect: Rect, rows: List[str], title: str = "") -> None :
    draw_box(screen, rect, title)
    x0, y0, x1, y1 = rect
    inner = x1 - x0 - 2
    for offset, row in enumerate(rows) :
        y = y0 + 1 + offset
        if y >= y1 - 1 :
            break
        put(screen, y, x0 + 1, row[:inner])


def render_station(screen, station: Station, palette: Dict[str, int]) -> None :
    """Paint the gauge and both lists for one station."""
    screen.erase()
    color = palette.get(bar_color(station.aqi_info.category), 0)
    draw_gauge(screen, GAUGE_RECT, gauge_percent(station.aqi), gauge_title(station.aqi), color)
    draw_list(screen, POLLUTANT_RECT, pollutant_rows(station.aqi_info))
    draw_list(screen, LOCATION_RECT, location_rows(station))
    screen.refresh()


def event_id(key: int) -> str :
    if key == CTRL_C :
        return "<C-c>"
    if key == curses.KEY_RESIZE :
        return "<Resize>"
    if 0 <= key < 256 :
        return chr(key)
    return f"<Key {key}>"


def wait_for_quit(screen) -> None :
    """Block on key events until the quit or interrupt key arrives."""
    while True :
        key = screen.getch()
        if key == -1 :
            continue
        if event_id(key) in QUIT_EVENTS :
            return


def display_station(station: Station) -> None :
    with terminal_session() as (screen, palette) :
        render_station(screen, station, palette)
        wait_for_quit(screen)
