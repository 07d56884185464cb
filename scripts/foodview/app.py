"""
FoodFacts TUI Application.

Main entry point for the terminal user interface.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path

# Ensure scripts directory is in path
SCRIPT_DIR = Path(__file__).resolve().parent.parent
if str(SCRIPT_DIR) not in sys.path:
    sys.path.insert(0, str(SCRIPT_DIR))

from textual.app import App  # noqa: E402
from textual.binding import Binding  # noqa: E402

from foodview.config import Settings, settings as default_settings  # noqa: E402
from foodview.controller import FetchDisplayController, ViewState  # noqa: E402
from foodview.logging_setup import setup_logging  # noqa: E402
from foodview.off_provider import OpenFoodFactsProvider  # noqa: E402
from foodview.providers import Product  # noqa: E402
from foodview.views.product_detail import ProductDetailScreen  # noqa: E402
from foodview.views.search import SearchScreen  # noqa: E402
from foodview.views.widgets import StateScreen  # noqa: E402

logger = logging.getLogger(__name__)

# Seconds between message polls
DEFAULT_POLL_INTERVAL = 0.1


class FoodFactsApp(App):
    """Main FoodFacts TUI application."""

    TITLE = "FoodFacts"
    SUB_TITLE = "Open Food Facts Viewer"

    CSS = """
    Screen {
        background: $surface;
    }
    """

    BINDINGS = [
        Binding("ctrl+q", "quit", "Quit", show=True),
    ]

    def __init__(
        self,
        controller: FetchDisplayController,
        poll_interval: float = DEFAULT_POLL_INTERVAL,
        **kwargs,
    ) -> None:
        super().__init__(**kwargs)
        self._controller = controller
        self._poll_interval = poll_interval

    def on_mount(self) -> None:
        """Called when app is mounted."""
        self.push_screen(SearchScreen(self._controller.state))
        self.set_interval(self._poll_interval, self._poll_messages)

    def _poll_messages(self) -> None:
        """Apply worker messages and redraw if anything changed."""
        if self._controller.poll_messages():
            self._sync_view()

    def _sync_view(self) -> None:
        """Match the screen stack to the controller's view, then redraw."""
        state = self._controller.state
        on_detail = isinstance(self.screen, ProductDetailScreen)

        if state.view is ViewState.PRODUCT_DETAILS and not on_detail:
            self.push_screen(ProductDetailScreen(state))
        elif state.view is ViewState.SEARCH_RESULTS and on_detail:
            self.pop_screen()

        if isinstance(self.screen, StateScreen):
            self.screen.show_state(state)

    def submit_search(self, term: str) -> None:
        """Start a search for the given term."""
        self._controller.on_search_submitted(term)
        self._sync_view()

    def select_product(self, product: Product) -> None:
        """Show detail screen for a specific product."""
        self._controller.on_product_selected(product)
        self._sync_view()

    def go_back(self) -> None:
        """Return to the search results."""
        self._controller.on_back_requested()
        self._sync_view()


def run(settings: Settings | None = None) -> None:
    """Run the TUI application."""
    settings = settings or default_settings
    provider = OpenFoodFactsProvider(settings)
    controller = FetchDisplayController(
        provider, fence_stale=settings.fence_stale_messages
    )
    app = FoodFactsApp(controller, poll_interval=settings.poll_interval)
    logger.info("Starting TUI against %s", settings.base_url)
    try:
        app.run()
    finally:
        controller.shutdown()
        provider.close()


if __name__ == "__main__":
    setup_logging(default_settings, tui=True)
    run()
