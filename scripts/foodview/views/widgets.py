"""Reusable widgets shared by the search and product screens."""

from textual.app import ComposeResult
from textual.screen import Screen
from textual.widgets import Button, Input, Label, ListItem, Static

from foodview.controller import ControllerState
from foodview.providers import Product
from foodview.rendering import product_label


class SearchBar(Static):
    """Search box and button. Submitting asks the app to start a search."""

    DEFAULT_CSS = """
    SearchBar {
        layout: horizontal;
        height: auto;
        border: solid $primary;
        padding: 0 1;
    }

    SearchBar .search-label {
        padding: 1 1 0 0;
        text-style: bold;
    }

    SearchBar Input {
        width: 1fr;
    }
    """

    def __init__(self, term: str = "", **kwargs) -> None:
        super().__init__(**kwargs)
        self._term = term

    def compose(self) -> ComposeResult:
        yield Label("Search:", classes="search-label")
        yield Input(value=self._term, placeholder="Product name", id="search-input")
        yield Button("Search", id="search-button", variant="primary")

    def _submit(self) -> None:
        term = self.query_one("#search-input", Input).value
        self.app.submit_search(term)

    def on_input_submitted(self, event: Input.Submitted) -> None:
        event.stop()
        self._submit()

    def on_button_pressed(self, event: Button.Pressed) -> None:
        event.stop()
        self._submit()


class ProductRow(ListItem):
    """One search hit in the results list."""

    DEFAULT_CSS = """
    ProductRow {
        height: auto;
        padding: 0 1;
    }

    ProductRow .product-code {
        color: $text-muted;
    }
    """

    def __init__(self, product: Product, **kwargs) -> None:
        super().__init__(**kwargs)
        self.product = product

    def compose(self) -> ComposeResult:
        yield Label(product_label(self.product))
        if self.product.code:
            yield Label(f"  {self.product.code}", classes="product-code")


class StateScreen(Screen):
    """Screen that re-renders itself from controller snapshots."""

    def __init__(self, state: ControllerState, **kwargs) -> None:
        # Textual's screen metaclass rules out ABCMeta, so check here instead.
        if type(self).render_state is StateScreen.render_state:
            raise TypeError(f"{type(self).__name__} must implement render_state")
        super().__init__(**kwargs)
        self._state = state

    def on_mount(self) -> None:
        self.render_state()

    def show_state(self, state: ControllerState) -> None:
        """Take a new snapshot; rendering waits until the screen is mounted."""
        self._state = state
        if self.is_mounted:
            self.render_state()

    def render_state(self) -> None:
        """Redraw from ``self._state``. Subclasses must override."""
        raise NotImplementedError
