"""Search view: search bar, status line and the list of matching products."""

from textual.app import ComposeResult
from textual.widgets import Footer, Header, Label, ListView

from foodview.controller import ControllerState
from foodview.providers import Product
from foodview.rendering import BodyKind, body_kind, search_status_text
from foodview.views.widgets import ProductRow, SearchBar, StateScreen


class SearchScreen(StateScreen):
    """Main screen listing search results."""

    BINDINGS = [
        ("escape", "focus_results", "Results"),
        ("ctrl+f", "focus_search", "Search"),
    ]

    DEFAULT_CSS = """
    SearchScreen {
        padding: 0 1;
    }

    SearchScreen .status {
        margin: 1 0;
        text-style: bold;
    }

    SearchScreen .status.error {
        color: $error;
    }

    SearchScreen ListView {
        height: 1fr;
        border: solid $primary;
    }
    """

    def __init__(self, state: ControllerState, **kwargs) -> None:
        super().__init__(state, **kwargs)
        self._shown_results: tuple[Product, ...] | None = None

    def compose(self) -> ComposeResult:
        yield Header()
        yield SearchBar(self._state.search_term)
        yield Label("", id="search-status", classes="status")
        yield ListView(id="results")
        yield Footer()

    def render_state(self) -> None:
        kind = body_kind(self._state)
        status = self.query_one("#search-status", Label)
        status.update(search_status_text(self._state))
        status.set_class(kind is BodyKind.ERROR, "error")

        results = self.query_one("#results", ListView)
        results.display = kind is BodyKind.RESULTS
        if self._shown_results is not self._state.results:
            self._shown_results = self._state.results
            results.clear()
            results.extend(ProductRow(p) for p in self._state.results)

    def on_list_view_selected(self, event: ListView.Selected) -> None:
        if isinstance(event.item, ProductRow):
            self.app.select_product(event.item.product)

    def action_focus_results(self) -> None:
        self.query_one("#results", ListView).focus()

    def action_focus_search(self) -> None:
        self.query_one("#search-input").focus()
