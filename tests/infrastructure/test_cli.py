"""End-to-end tests for the click CLI against a temporary data directory."""

import json

import pytest
from click.testing import CliRunner

from prodorders.infrastructure.cli.main import cli


@pytest.fixture
def run(tmp_path):
    runner = CliRunner()

    def _run(*args: str):
        return runner.invoke(cli, ["--data-dir", str(tmp_path), *args])

    return _run


def _create(run, number: str = "ORD-2026-1") -> None:
    result = run("order", "create", "--number", number, "--customer", "10", "--team", "5")
    assert result.exit_code == 0, result.output


class TestOrderCommands:

    def test_create_and_show(self, run):
        _create(run)

        result = run("order", "show", "--id", "1", "--json")

        assert result.exit_code == 0, result.output
        wire = json.loads(result.output)
        assert wire["id"] == 1
        assert wire["orderNumber"] == "ORD-2026-1"
        assert wire["customerId"] == 10
        assert wire["teamId"] == 5
        assert wire["statusId"] == 1

    def test_list(self, run):
        _create(run, "ORD-1")
        _create(run, "ORD-2")

        result = run("order", "list", "--json")

        assert [o["orderNumber"] for o in json.loads(result.output)] == ["ORD-1", "ORD-2"]

    def test_full_lifecycle(self, run):
        _create(run)
        for command, status in [
            ("confirm", "SCHEDULED"),
            ("start", "IN_PROGRESS"),
            ("finish", "FOR_DELIVERY"),
            ("deliver", "COMPLETED"),
        ]:
            result = run("order", command, "--id", "1")
            assert result.exit_code == 0, result.output
            assert status in result.output

    def test_invalid_transition_reports_codes(self, run):
        _create(run)

        result = run("order", "start", "--id", "1")

        assert result.exit_code == 1
        assert "Expected=2" in result.output
        assert "Actual=1" in result.output

    def test_missing_order(self, run):
        result = run("order", "confirm", "--id", "99")
        assert result.exit_code == 1
        assert "not found" in result.output

    def test_malformed_store_reported_as_error(self, run, tmp_path):
        _create(run)
        raw = json.loads((tmp_path / "orders.json").read_text())
        raw[0]["statusId"] = 9
        (tmp_path / "orders.json").write_text(json.dumps(raw))

        result = run("order", "list")

        assert result.exit_code == 1
        assert "Malformed order record" in result.output
        assert result.exception is None or isinstance(result.exception, SystemExit)


class TestItemCommands:

    def test_set_then_summary(self, run):
        _create(run)

        result = run("items", "set", "--id", "1", "--items", "Window:1000x1200:2,Door:900x2100:1")
        assert result.exit_code == 0, result.output
        assert "Items added successfully" in result.output

        summary = json.loads(run("order", "summary", "--id", "1", "--json").output)
        assert summary["orderId"] == 1
        assert [i["profileMeters"] for i in summary["items"]] == [8.8, 6.0]
        assert summary["requirements"] == {
            "totalProfileMeters": 14.8,
            "totalGlassSquareMeters": 4.29,
            "totalHardwareUnits": 3,
        }

    def test_summary_table(self, run):
        _create(run)
        run("items", "set", "--id", "1", "--items", "Window:1000x1200:2")

        result = run("order", "summary", "--id", "1")

        assert result.exit_code == 0, result.output
        assert "8.800" in result.output
        assert "2.400" in result.output

    def test_clear(self, run):
        _create(run)
        run("items", "set", "--id", "1", "--items", "Window:1000x1200:2")

        result = run("items", "clear", "--id", "1")

        assert result.exit_code == 0, result.output
        assert json.loads(run("items", "show", "--id", "1", "--json").output) == []

    def test_bad_item_format(self, run):
        _create(run)
        result = run("items", "set", "--id", "1", "--items", "Window:1000:2")
        assert result.exit_code != 0
        assert "Expected 'Type:WIDTHxHEIGHT:Qty'" in result.output

    def test_non_positive_dimension_rejected(self, run):
        _create(run)
        result = run("items", "set", "--id", "1", "--items", "Window:0x1200:2")
        assert result.exit_code == 1
        assert "must be positive" in result.output

    def test_summary_of_missing_order(self, run):
        result = run("order", "summary", "--id", "99")
        assert result.exit_code == 1
        assert "Order #99 not found" in result.output
