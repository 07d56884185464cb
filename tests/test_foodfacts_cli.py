"""Tests for foodfacts.py - the command line entry point."""

import json
import sys
from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest

sys.path.insert(0, str(Path(__file__).parent.parent / "scripts"))
from foodfacts import main, print_product, print_search
from foodview.providers import Product, ProductDetail, TransportError


@pytest.fixture
def provider() -> MagicMock:
    provider = MagicMock()
    provider.search.return_value = [
        Product(code="1", name="Dark Chocolate"),
        Product(code=None, name="Loose Cocoa"),
    ]
    provider.get_product.return_value = ProductDetail(
        code="1", name="Dark Chocolate", ingredients_text="cocoa", brand=None
    )
    return provider


class TestPrintSearch:
    """Tests for print_search."""

    def test_text_output(self, provider: MagicMock, capsys: pytest.CaptureFixture) -> None:
        assert print_search(provider, "chocolate") == 0

        out = capsys.readouterr().out
        assert "Search Results for 'chocolate' (2)" in out
        assert "Dark Chocolate" in out
        assert "Loose Cocoa" in out

    def test_json_output(self, provider: MagicMock, capsys: pytest.CaptureFixture) -> None:
        assert print_search(provider, "chocolate", as_json=True) == 0

        data = json.loads(capsys.readouterr().out)
        assert data == [
            {"code": "1", "name": "Dark Chocolate"},
            {"code": None, "name": "Loose Cocoa"},
        ]

    def test_no_results(self, provider: MagicMock, capsys: pytest.CaptureFixture) -> None:
        provider.search.return_value = []

        assert print_search(provider, "zzz") == 0
        assert "No products found for 'zzz'" in capsys.readouterr().out

    def test_failure_returns_one(
        self, provider: MagicMock, capsys: pytest.CaptureFixture
    ) -> None:
        provider.search.side_effect = TransportError("refused")

        assert print_search(provider, "x") == 1
        assert "Search failed: refused" in capsys.readouterr().err


class TestPrintProduct:
    """Tests for print_product."""

    def test_text_output(self, provider: MagicMock, capsys: pytest.CaptureFixture) -> None:
        assert print_product(provider, "1") == 0

        out = capsys.readouterr().out
        assert out.splitlines()[0] == "Dark Chocolate"
        assert "Ingredients: cocoa" in out
        assert "Brand: N/A" in out

    def test_json_output(self, provider: MagicMock, capsys: pytest.CaptureFixture) -> None:
        assert print_product(provider, "1", as_json=True) == 0

        data = json.loads(capsys.readouterr().out)
        assert data["code"] == "1"
        assert data["ingredients_text"] == "cocoa"
        assert data["brand"] is None

    def test_failure_returns_one(
        self, provider: MagicMock, capsys: pytest.CaptureFixture
    ) -> None:
        provider.get_product.side_effect = TransportError("timeout")

        assert print_product(provider, "1") == 1
        assert "Lookup failed: timeout" in capsys.readouterr().err


class TestMain:
    """Tests for argument handling in main."""

    def test_search_mode(self, provider: MagicMock, capsys: pytest.CaptureFixture) -> None:
        with patch("foodfacts.OpenFoodFactsProvider", return_value=provider), patch(
            "foodfacts.setup_logging"
        ):
            assert main(["--search", "chocolate", "--json"]) == 0

        provider.search.assert_called_once_with("chocolate")
        provider.close.assert_called_once()
        assert json.loads(capsys.readouterr().out)[0]["name"] == "Dark Chocolate"

    def test_product_mode(self, provider: MagicMock) -> None:
        with patch("foodfacts.OpenFoodFactsProvider", return_value=provider), patch(
            "foodfacts.setup_logging"
        ):
            assert main(["--product", "1"]) == 0

        provider.get_product.assert_called_once_with("1")

    def test_log_level_override(self, provider: MagicMock) -> None:
        with patch("foodfacts.OpenFoodFactsProvider", return_value=provider), patch(
            "foodfacts.setup_logging"
        ) as setup:
            main(["--search", "x", "--log-level", "DEBUG"])

        assert setup.call_args.args[0].log_level == "DEBUG"

    def test_search_and_product_are_exclusive(self) -> None:
        with pytest.raises(SystemExit) as exc:
            main(["--search", "x", "--product", "1"])
        assert exc.value.code == 2

    def test_json_alone_is_rejected(self) -> None:
        with patch("foodfacts.setup_logging"):
            with pytest.raises(SystemExit) as exc:
                main(["--json"])
        assert exc.value.code == 2

    def test_no_arguments_launches_tui(self) -> None:
        with patch("foodfacts.setup_logging") as setup, patch(
            "foodview.app.run"
        ) as run:
            assert main([]) == 0

        assert setup.call_args.kwargs == {"tui": True}
        run.assert_called_once()
