"""Product detail view for drilling into a single product."""

from textual.app import ComposeResult
from textual.containers import ScrollableContainer
from textual.widgets import Button, Footer, Header, Label, Static

from foodview.rendering import (
    LOADING_TEXT,
    BodyKind,
    body_kind,
    detail_lines,
    detail_title,
    error_text,
)
from foodview.views.widgets import SearchBar, StateScreen


class ProductDetailScreen(StateScreen):
    """Screen showing one product's name, ingredients and brand."""

    BINDINGS = [
        ("escape", "back", "Back"),
    ]

    DEFAULT_CSS = """
    ProductDetailScreen {
        padding: 0 1;
    }

    ProductDetailScreen .product-title {
        text-style: bold;
        margin: 1 0;
    }

    ProductDetailScreen .status {
        margin: 1 0;
    }

    ProductDetailScreen .error-message {
        color: $error;
        padding: 1;
        border: solid $error;
    }

    ProductDetailScreen .product-body {
        height: auto;
        border: solid $primary;
        padding: 1;
        margin-bottom: 1;
    }
    """

    def compose(self) -> ComposeResult:
        yield Header()
        yield SearchBar(self._state.search_term)

        with ScrollableContainer():
            yield Label("", id="detail-status", classes="status")
            yield Label("", id="product-title", classes="product-title")
            yield Static("", id="product-body", classes="product-body")
            yield Button("Back", id="back-button")

        yield Footer()

    def render_state(self) -> None:
        kind = body_kind(self._state)
        status = self.query_one("#detail-status", Label)
        title = self.query_one("#product-title", Label)
        body = self.query_one("#product-body", Static)

        status.display = kind in (BodyKind.LOADING, BodyKind.ERROR)
        status.set_class(kind is BodyKind.ERROR, "error-message")
        if kind is BodyKind.LOADING:
            status.update(LOADING_TEXT)
        elif kind is BodyKind.ERROR:
            status.update(error_text(self._state.error))

        detail = self._state.selected
        show_detail = kind is BodyKind.DETAILS and detail is not None
        title.display = show_detail
        body.display = show_detail
        if show_detail:
            title.update(detail_title(detail))
            body.update("\n".join(detail_lines(detail)))

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "back-button":
            self.action_back()

    def action_back(self) -> None:
        """Go back to the search results."""
        self.app.go_back()
