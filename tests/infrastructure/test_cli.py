"""End-to-end tests for the click CLI against a temporary data directory."""

import json

import pytest
from click.testing import CliRunner

from storefront.infrastructure.cli.main import cli


@pytest.fixture
def run(tmp_path):
    runner = CliRunner()

    def invoke(*args):
        return runner.invoke(cli, ["--data-dir", str(tmp_path), *args])

    return invoke


class TestProductCommands:

    def test_first_run_seeds_catalog(self, run, tmp_path):
        result = run("product", "list")
        assert result.exit_code == 0, result.output
        assert "Aura Buds" in result.output
        assert (tmp_path / "products.json").exists()

    def test_add_then_list(self, run):
        result = run("product", "add", "--name", "Lamp", "--price", "45")
        assert result.exit_code == 0, result.output
        assert "'Lamp' added at $45.00" in result.output

        listing = run("product", "list")
        assert "Lamp" in listing.output
        assert "Home" in listing.output

    def test_update_and_delete(self, run, tmp_path):
        run("product", "list")
        result = run("product", "update", "--id", "p6", "--price", "35")
        assert result.exit_code == 0, result.output

        raw = json.loads((tmp_path / "products.json").read_text(encoding="utf-8"))
        assert next(p for p in raw if p["id"] == "p6")["price"] == "35"

        result = run("product", "delete", "--id", "p6")
        assert "deleted" in result.output
        raw = json.loads((tmp_path / "products.json").read_text(encoding="utf-8"))
        assert all(p["id"] != "p6" for p in raw)

    def test_update_unknown_is_noop(self, run):
        result = run("product", "update", "--id", "nope", "--price", "1")
        assert result.exit_code == 0
        assert "nothing changed" in result.output

    def test_show_unknown_fails(self, run):
        result = run("product", "show", "--id", "nope")
        assert result.exit_code == 1
        assert "not found" in result.output


class TestCheckoutCommand:

    def test_places_order(self, run):
        result = run(
            "checkout", "--product", "p6", "--product", "p4",
            "--first-name", "Alice", "--email", "alice@example.com",
        )
        assert result.exit_code == 0, result.output
        assert "Order Placed Successfully!" in result.output
        assert "Total charged: $78.00" in result.output

        listing = run("order", "list")
        assert "Alice" in listing.output

    def test_missing_email_fails_without_order(self, run):
        result = run("checkout", "--product", "p6", "--first-name", "Alice")
        assert result.exit_code == 1
        assert "name and email" in result.output
        assert "No orders yet." in run("order", "list").output

    def test_order_show(self, run, tmp_path):
        run(
            "checkout", "--product", "p6",
            "--first-name", "Alice", "--email", "alice@example.com",
        )
        [raw] = json.loads((tmp_path / "orders.json").read_text(encoding="utf-8"))

        result = run("order", "show", "--id", raw["id"])

        assert result.exit_code == 0, result.output
        assert "Aura Lumen" in result.output
        assert "status=completed" in result.output


class TestArticleCommands:

    def test_list_and_show(self, run):
        assert "The Art of Silence" in run("article", "list").output
        result = run("article", "show", "--id", "1")
        assert result.exit_code == 0
        assert "The Art of Silence" in result.output
