"""Smoke tests for the salary engine CLI."""

import json

import pytest
from decimal import Decimal

from salary_engine.calculators import SalaryEngine
from salary_engine.cli import SalaryCli, format_amount


@pytest.fixture
def cli(engine: SalaryEngine) -> SalaryCli:
    return SalaryCli(engine=engine)


class TestCliCommands:
    def test_no_command_prints_help(self, cli: SalaryCli, capsys):
        assert cli.run([]) == 1
        assert "usage" in capsys.readouterr().out.lower()

    def test_calculate_text(self, cli: SalaryCli, capsys):
        code = cli.run(["--log-level", "WARNING", "calculate", "--jurisdiction", "Bulgaria", "--gross", "1000"])
        out = capsys.readouterr().out

        assert code == 0
        assert "Bulgaria / Employee" in out
        assert "775.98" in out
        assert "1,191.80" in out

    def test_calculate_json(self, cli: SalaryCli, capsys):
        code = cli.run(
            ["calculate", "--jurisdiction", "Greece", "--gross", "1000", "--payments", "12", "--json"]
        )
        data = json.loads(capsys.readouterr().out)

        assert code == 0
        assert data["payments_per_year"] == 12
        assert data["jurisdiction"] == "Greece"

    def test_invert_json(self, cli: SalaryCli, capsys):
        code = cli.run(
            ["invert", "--jurisdiction", "Estonia", "--mode", "net", "--value", "1500", "--json"]
        )
        data = json.loads(capsys.readouterr().out)

        assert code == 0
        assert data["within_tolerance"] is True
        assert abs(Decimal(data["result"]["net"]) - Decimal("1500")) < Decimal("0.01")

    def test_compare_table(self, cli: SalaryCli, capsys):
        code = cli.run(["compare", "--mode", "total_cost", "--value", "3000"])
        out = capsys.readouterr().out

        assert code == 0
        for country in ("Bulgaria", "Estonia", "Greece"):
            assert country in out
        assert "3,000.00" in out

    def test_compare_flat_rate_expenses(self, cli: SalaryCli, capsys):
        code = cli.run(
            [
                "compare",
                "--value",
                "1000",
                "--profile",
                "Self-Employed",
                "--expenses",
                "500",
                "--json",
            ]
        )
        rows = json.loads(capsys.readouterr().out)

        assert code == 0
        assert [Decimal(row["result"]["net"]) for row in rows] == [
            Decimal("425"),
            Decimal("375"),
            Decimal("370"),
        ]

    def test_list_json(self, cli: SalaryCli, capsys):
        assert cli.run(["list", "--json"]) == 0
        data = json.loads(capsys.readouterr().out)

        assert [j["jurisdiction"] for j in data["jurisdictions"]] == ["Bulgaria", "Estonia", "Greece"]
        assert data["profiles"] == ["Employee", "Self-Employed", "Small Business"]

    def test_domain_error_exit_code(self, cli: SalaryCli, capsys):
        code = cli.run(
            ["calculate", "--jurisdiction", "Greece", "--gross", "1000", "--payments", "0"]
        )
        assert code == 2
        assert "payments_per_year" in capsys.readouterr().err

    def test_invalid_amount_rejected_by_parser(self, cli: SalaryCli):
        with pytest.raises(SystemExit):
            cli.run(["calculate", "--jurisdiction", "Greece", "--gross", "lots"])


def test_format_amount():
    assert format_amount(Decimal("1234.567")) == "1,234.57"
