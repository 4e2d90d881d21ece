"""Salary engine command line interface.

Provides tools for:
- Forward calculation from gross
- Resolving gross from a net or total-cost target
- Side-by-side comparison across jurisdictions
- Listing supported jurisdictions and profiles
- Serving the HTTP API

Usage:
    salary-engine calculate --jurisdiction Greece --gross 2000 --payments 14
    salary-engine invert --jurisdiction Estonia --mode net --value 1500
    salary-engine compare --mode total_cost --value 3000
    salary-engine list
    salary-engine serve
"""

from __future__ import annotations

import argparse
import json
import sys
from decimal import Decimal, InvalidOperation
from typing import Callable

from salary_engine.calculators import (
    EmploymentProfile,
    Jurisdiction,
    SalaryEngine,
    SalaryEngineError,
    TargetMode,
    TaxBreakdown,
    jurisdiction_info,
    list_jurisdictions,
    list_profiles,
)
from salary_engine.config import configure_logging, get_settings


def parse_amount(s: str) -> Decimal:
    """Parse a money amount."""
    try:
        return Decimal(s)
    except InvalidOperation:
        raise argparse.ArgumentTypeError(f"invalid amount: {s!r}") from None


def format_amount(amount: Decimal) -> str:
    """Format an amount for display with two decimals."""
    return f"{amount:,.2f}"


class SalaryCli:
    """Salary engine command line interface."""

    def __init__(self, engine: SalaryEngine | None = None) -> None:
        self.engine = engine
        self.parser = self._build_parser()

    def _build_parser(self) -> argparse.ArgumentParser:
        """Build argument parser."""
        parser = argparse.ArgumentParser(
            prog="salary-engine",
            description="Net salary, employer cost and gross inversion",
        )
        parser.add_argument(
            "--log-level",
            type=str,
            help="Logging level (default: $LOG_LEVEL or INFO)",
        )
        subparsers = parser.add_subparsers(dest="command", help="Commands")

        jurisdictions = [j.value for j in Jurisdiction]
        profiles = [p.value for p in EmploymentProfile]
        modes = [m.value for m in TargetMode]

        # calculate command
        calc = subparsers.add_parser(
            "calculate",
            help="Compute net pay and total cost for a gross salary",
        )
        calc.add_argument("--jurisdiction", choices=jurisdictions, required=True)
        calc.add_argument("--profile", choices=profiles, default=EmploymentProfile.EMPLOYEE.value)
        calc.add_argument("--gross", type=parse_amount, required=True, help="Monthly gross")
        calc.add_argument("--expenses", type=parse_amount, default=Decimal("0"))
        calc.add_argument(
            "--payments",
            type=int,
            help="Salary payments per year (default: jurisdiction convention)",
        )
        calc.add_argument("--json", action="store_true", help="Print JSON output")

        # invert command
        inv = subparsers.add_parser(
            "invert",
            help="Resolve gross salary from a net or total-cost target",
        )
        inv.add_argument("--jurisdiction", choices=jurisdictions, required=True)
        inv.add_argument("--profile", choices=profiles, default=EmploymentProfile.EMPLOYEE.value)
        inv.add_argument("--mode", choices=modes, required=True)
        inv.add_argument("--value", type=parse_amount, required=True)
        inv.add_argument("--expenses", type=parse_amount, default=Decimal("0"))
        inv.add_argument("--payments", type=int)
        inv.add_argument("--json", action="store_true", help="Print JSON output")

        # compare command
        cmp_ = subparsers.add_parser(
            "compare",
            help="Resolve the same target in every jurisdiction",
        )
        cmp_.add_argument("--mode", choices=modes, default=TargetMode.GROSS.value)
        cmp_.add_argument("--value", type=parse_amount, required=True)
        cmp_.add_argument("--profile", choices=profiles, default=EmploymentProfile.EMPLOYEE.value)
        cmp_.add_argument("--expenses", type=parse_amount, default=Decimal("0"))
        cmp_.add_argument(
            "--payments",
            type=int,
            help="Payments per year for jurisdictions with a variable count",
        )
        cmp_.add_argument("--json", action="store_true", help="Print JSON output")

        # list command
        lst = subparsers.add_parser(
            "list",
            help="List jurisdictions and profiles",
        )
        lst.add_argument("--json", action="store_true", help="Print JSON output")

        # serve command
        subparsers.add_parser(
            "serve",
            help="Run the HTTP API with uvicorn",
        )

        return parser

    def run(self, args: list[str] | None = None) -> int:
        """Run the CLI with given arguments."""
        parsed = self.parser.parse_args(args)

        if not parsed.command:
            self.parser.print_help()
            return 1

        configure_logging(parsed.log_level)
        if self.engine is None:
            self.engine = SalaryEngine(get_settings())

        # Dispatch to command handler
        handlers: dict[str, Callable[..., int]] = {
            "calculate": self._cmd_calculate,
            "invert": self._cmd_invert,
            "compare": self._cmd_compare,
            "list": self._cmd_list,
            "serve": self._cmd_serve,
        }

        handler = handlers.get(parsed.command)
        if handler is None:
            print(f"Unknown command: {parsed.command}", file=sys.stderr)
            return 1

        try:
            return handler(parsed)
        except SalaryEngineError as exc:
            print(f"Error: {exc}", file=sys.stderr)
            return 2

    def _print_breakdown(self, result: TaxBreakdown) -> None:
        width = max(len(name) for name in result.breakdown)
        for name, amount in result.breakdown.items():
            print(f"  {name:<{width}}  {format_amount(amount):>15}")

    def _cmd_calculate(self, args: argparse.Namespace) -> int:
        """Run a forward calculation."""
        result = self.engine.calculate(
            args.jurisdiction,
            args.profile,
            args.gross,
            args.expenses,
            args.payments,
        )
        if args.json:
            print(json.dumps(result.to_dict(), indent=2))
            return 0

        print(f"{result.jurisdiction.value} / {result.profile.value}")
        print(f"  Payments per year: {result.payments_per_year}")
        print("=" * 40)
        self._print_breakdown(result)
        return 0

    def _cmd_invert(self, args: argparse.Namespace) -> int:
        """Resolve gross from a target."""
        resolution = self.engine.resolve(
            args.jurisdiction,
            args.mode,
            args.value,
            payments_per_year=args.payments,
            profile=args.profile,
            expenses=args.expenses,
        )
        if args.json:
            print(json.dumps(resolution.to_dict(), indent=2))
            return 0

        print(f"{args.jurisdiction}: {args.mode} {format_amount(resolution.target)}")
        print(f"  Gross:      {format_amount(resolution.gross)}")
        print(f"  Iterations: {resolution.iterations}")
        if not resolution.within_tolerance:
            print(f"  WARNING: approximate (residual {resolution.residual})")
        print("=" * 40)
        self._print_breakdown(resolution.result)
        return 0

    def _cmd_compare(self, args: argparse.Namespace) -> int:
        """Compare one target across jurisdictions."""
        rows = self.engine.compare(
            args.mode,
            args.value,
            payments_per_year=args.payments,
            profile=args.profile,
            expenses=args.expenses,
        )
        if args.json:
            print(json.dumps([row.to_dict() for row in rows], indent=2))
            return 0

        print(f"{'Country':<12}{'Gross':>15}{'Net':>15}{'Total Cost':>15}")
        print("-" * 57)
        for row in rows:
            print(
                f"{row.jurisdiction.value:<12}"
                f"{format_amount(row.gross):>15}"
                f"{format_amount(row.net):>15}"
                f"{format_amount(row.total_cost):>15}"
            )
        return 0

    def _cmd_list(self, args: argparse.Namespace) -> int:
        """List jurisdictions and profiles."""
        jurisdictions = [
            {
                "jurisdiction": j.value,
                "default_payments_per_year": jurisdiction_info(j).default_payments_per_year,
            }
            for j in list_jurisdictions()
        ]
        profiles = [p.value for p in list_profiles()]

        if args.json:
            print(json.dumps({"jurisdictions": jurisdictions, "profiles": profiles}, indent=2))
            return 0

        print("Jurisdictions:")
        for item in jurisdictions:
            print(f"  {item['jurisdiction']} ({item['default_payments_per_year']} payments/year)")
        print("Profiles:")
        for profile in profiles:
            print(f"  {profile}")
        return 0

    def _cmd_serve(self, args: argparse.Namespace) -> int:
        """Run the HTTP API."""
        from salary_engine.__main__ import main as serve

        serve()
        return 0


def main() -> int:
    """CLI entry point."""
    cli = SalaryCli()
    return cli.run()


if __name__ == "__main__":
    sys.exit(main())
