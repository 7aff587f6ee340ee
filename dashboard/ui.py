"""Frame composition for the weather dashboard."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Sequence, Tuple

from rich import box
from rich.console import Console, ConsoleOptions, RenderResult
from rich.layout import Layout
from rich.panel import Panel
from rich.text import Text

from dashboard.navigation import NavigationState
from weather.snapshot import WeatherSnapshot

TAB_DIVIDER = "•"
TAB_STRIP_STYLE = "white on blue"
TAB_FIRST_LETTER_STYLE = "yellow"
TAB_REST_STYLE = "white"
TAB_SELECTED_STYLE = "red on white"
TAB_STRIP_HEIGHT = 3

REPORT_TITLES = ("-Y-O-U-R-", "-W-E-A-T-H-E-R-", "-R-E-P-O-R-T-")


class View(enum.Enum):
    WEATHER = "weather"
    INNER_1 = "inner 1"
    INNER_2 = "inner 2"
    INNER_3 = "inner 3"


# Tab index -> view shown in the content region
VIEW_ORDER: Tuple[View, ...] = (View.WEATHER, View.INNER_1, View.INNER_2, View.INNER_3)


@dataclass(frozen=True)
class Pane:
    """Content region description.

    ``titles`` holds either one title or left, centre and right fragments.
    """

    titles: Tuple[str, ...]
    body: str
    rounded: bool = False


def view_for_index(index: int) -> View:
    if not 0 <= index < len(VIEW_ORDER):
        raise AssertionError(f"tab index {index} has no view")
    return VIEW_ORDER[index]


def pane_for(view: View, weather_text: str) -> Pane:
    """Describe the content pane for ``view``. Only the weather view reads ``weather_text``."""
    if view is View.WEATHER:
        return Pane(titles=REPORT_TITLES, body=weather_text, rounded=True)
    if view is View.INNER_1:
        return Pane(titles=("inner 1",), body="hello")
    if view is View.INNER_2:
        return Pane(titles=("inner 2",), body="hello once", rounded=True)
    if view is View.INNER_3:
        return Pane(titles=("inner 3",), body="hello again")
    raise AssertionError(f"unhandled view {view!r}")


class ReportPanel:
    """Panel whose top border carries left, centre and right aligned titles."""

    def __init__(
        self,
        body: str,
        titles: Tuple[str, str, str],
        panel_box: box.Box = box.ROUNDED,
    ) -> None:
        self.body = body
        self.titles = titles
        self.box = panel_box

    def title_bar(self, width: int) -> Text:
        """Lay the three fragments out across ``width`` cells, filled with border."""
        left, center, right = self.titles
        fill = self.box.top
        text = Text(left, no_wrap=True, end="")
        center_start = max(len(left), (width - len(center)) // 2)
        text.append(fill * (center_start - len(text)))
        text.append(center)
        right_start = max(len(text), width - len(right))
        text.append(fill * (right_start - len(text)))
        text.append(right)
        return text

    def __rich_console__(self, console: Console, options: ConsoleOptions) -> RenderResult:
        width = options.max_width
        # Panel adds two corners, two border cells and one space either side
        title = self.title_bar(max(0, width - 6))
        yield Panel(
            Text(self.body),
            title=title,
            title_align="left",
            box=self.box,
            width=width,
            height=options.height,
        )


def render_tab_strip(labels: Sequence[str], selected: int) -> Text:
    """Build the tab titles with first letters highlighted and the selected tab marked."""
    text = Text(no_wrap=True, end="")
    for index, label in enumerate(labels):
        if index:
            text.append(TAB_DIVIDER)
        text.append(" ")
        start = len(text)
        text.append(label[:1], style=TAB_FIRST_LETTER_STYLE)
        text.append(label[1:], style=TAB_REST_STYLE)
        if index == selected:
            text.stylize(TAB_SELECTED_STYLE, start, len(text))
        text.append(" ")
    return text


def render_pane(pane: Pane):
    if len(pane.titles) == 3:
        return ReportPanel(pane.body, pane.titles)  # type: ignore[arg-type]
    return Panel(
        Text(pane.body),
        title=pane.titles[0] if pane.titles else None,
        title_align="left",
        box=box.ROUNDED if pane.rounded else box.SQUARE,
    )


def create_ui_layout() -> Layout:
    """Create the main UI layout."""
    layout = Layout()

    layout.split_column(
        Layout(name="tabs", size=TAB_STRIP_HEIGHT),
        Layout(name="content"),
    )

    return layout


def render_ui(navigation: NavigationState, snapshot: WeatherSnapshot) -> Layout:
    """Compose one frame from the navigation state and the weather snapshot."""
    layout = create_ui_layout()

    tabs = Panel(
        render_tab_strip(navigation.labels, navigation.selected),
        title="Tabs",
        title_align="left",
        box=box.SQUARE,
        style=TAB_STRIP_STYLE,
    )
    layout["tabs"].update(tabs)

    view = view_for_index(navigation.selected)
    layout["content"].update(render_pane(pane_for(view, snapshot.text)))

    return layout
