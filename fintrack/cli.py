"""CLI for running the calculators from a shell.

Usage:
    python -m fintrack.cli loan 1000000 12 50000 --start 2024-01-01
    python -m fintrack.cli projection 1000000 12 50000 --start 2024-01-01
    python -m fintrack.cli payment 1000000 12 24
    python -m fintrack.cli schedule 1000000 12 50000 --start 2024-01-01 --months 6
    python -m fintrack.cli savings 1000000 100000 50000 2027-06-30 --rate 6
"""

import argparse
import logging
import sys
from datetime import date
from decimal import Decimal

from fintrack.config import settings
from fintrack.engine.loans import (
    calculate_amortization_schedule,
    calculate_loan_details,
    calculate_loan_projection,
    calculate_minimum_payment,
)
from fintrack.engine.savings import calculate_savings_projection
from fintrack.engine.validation import InvalidInputError
from fintrack.models.loan import LoanDetails
from fintrack.models.savings import SavingsGoalDetails


def _money(value) -> str:
    return f"{value:,.2f}"


def print_loan(result) -> None:
    print(f"\n{'=' * 60}")
    print("  Loan Status")
    print(f"{'=' * 60}")
    print(f"  Remaining Balance:  {_money(result.remaining_balance)}")
    print(f"  Interest Paid:      {_money(result.total_interest_paid)}")
    print(f"  Months Remaining:   {result.months_remaining}")
    print(f"  Payoff Date:        {result.payoff_date or 'never'}")
    print()
    for row in result.monthly_breakdown[-12:]:
        print(
            f"  {row.month:>4}  {row.date}  paid {_money(row.payment):>14}"
            f"  interest {_money(row.interest):>12}  balance {_money(row.remaining_balance):>14}"
        )
    print()


def print_projection(result) -> None:
    print(f"\n{'=' * 60}")
    print("  Loan Projection")
    print(f"{'=' * 60}")
    print(f"  Total Interest:     {_money(result.total_interest)}")
    print(f"  Total Payments:     {_money(result.total_payments)}")
    print(f"  Months to Payoff:   {result.months_to_payoff}")
    print(f"  Payoff Date:        {result.payoff_date or 'never'}")
    print()


def print_schedule(rows) -> None:
    print(f"\n{'=' * 60}")
    print("  Amortization Schedule")
    print(f"{'=' * 60}")
    for row in rows:
        print(
            f"  {row.month:>4}  {row.date}  paid {_money(row.payment):>14}"
            f"  principal {_money(row.principal):>12}  balance {_money(row.balance):>14}"
        )
    if not rows:
        print("  Payment does not cover interest; no schedule.")
    print()


def print_savings(result) -> None:
    print(f"\n{'=' * 60}")
    print("  Savings Projection")
    print(f"{'=' * 60}")
    print(f"  Months to Goal:     {result.months_to_goal}")
    print(f"  Completion Date:    {result.projected_completion_date or 'never'}")
    print(f"  Contributions:      {_money(result.total_contributions)}")
    print(f"  Interest Earned:    {_money(result.interest_earned)}")
    print(f"  Achievable:         {'Yes' if result.is_achievable else 'No'}")
    print(f"  Required Monthly:   {_money(result.required_monthly_contribution)}")
    print()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Personal finance calculators")
    default_level = "DEBUG" if settings.debug else settings.log_level
    parser.add_argument("--log-level", default=default_level, help="Logging level")
    sub = parser.add_subparsers(dest="command", required=True)

    loan = sub.add_parser("loan", help="Loan balance and payoff as of a date")
    loan.add_argument("principal", type=Decimal)
    loan.add_argument("rate", type=Decimal, help="Annual rate in percent")
    loan.add_argument("payment", type=Decimal, help="Monthly payment")
    loan.add_argument("--start", type=date.fromisoformat, required=True, help="Start date (YYYY-MM-DD)")
    loan.add_argument("--as-of", type=date.fromisoformat, default=None, help="As-of date (default: today)")

    projection = sub.add_parser("projection", help="Total cost and payoff date of a loan")
    projection.add_argument("principal", type=Decimal)
    projection.add_argument("rate", type=Decimal, help="Annual rate in percent")
    projection.add_argument("payment", type=Decimal, help="Monthly payment")
    projection.add_argument("--start", type=date.fromisoformat, required=True, help="Start date (YYYY-MM-DD)")

    payment = sub.add_parser("payment", help="Minimum monthly payment for a term")
    payment.add_argument("principal", type=Decimal)
    payment.add_argument("rate", type=Decimal, help="Annual rate in percent")
    payment.add_argument("term", type=int, help="Term in months")

    schedule = sub.add_parser("schedule", help="Next months of an amortization schedule")
    schedule.add_argument("principal", type=Decimal)
    schedule.add_argument("rate", type=Decimal, help="Annual rate in percent")
    schedule.add_argument("payment", type=Decimal, help="Monthly payment")
    schedule.add_argument("--start", type=date.fromisoformat, required=True, help="Start date (YYYY-MM-DD)")
    schedule.add_argument("--months", type=int, default=12, help="Rows to show (default: 12)")

    savings = sub.add_parser("savings", help="Savings goal projection")
    savings.add_argument("target", type=Decimal)
    savings.add_argument("current", type=Decimal)
    savings.add_argument("contribution", type=Decimal, help="Monthly contribution")
    savings.add_argument("target_date", type=date.fromisoformat, help="Deadline (YYYY-MM-DD)")
    savings.add_argument("--rate", type=Decimal, default=None, help="Annual interest rate in percent")

    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(level=args.log_level.upper(), format="%(levelname)s %(name)s: %(message)s")

    try:
        if args.command == "loan":
            loan = LoanDetails(
                principal=args.principal,
                annual_rate=args.rate,
                monthly_payment=args.payment,
                start_date=args.start,
            )
            print_loan(calculate_loan_details(loan, args.as_of))
        elif args.command == "projection":
            print_projection(calculate_loan_projection(args.principal, args.payment, args.rate, args.start))
        elif args.command == "payment":
            pmt = calculate_minimum_payment(args.principal, args.rate, args.term)
            print(f"\n  Minimum Payment:    {_money(pmt)}/mo\n")
        elif args.command == "schedule":
            print_schedule(calculate_amortization_schedule(
                args.principal, args.payment, args.rate, args.start, args.months,
            ))
        elif args.command == "savings":
            goal = SavingsGoalDetails(
                target_amount=args.target,
                current_amount=args.current,
                monthly_contribution=args.contribution,
                target_date=args.target_date,
                interest_rate=args.rate,
            )
            print_savings(calculate_savings_projection(goal))
    except InvalidInputError as e:
        print(f"error: {e}", file=sys.stderr)
        return 2
    return 0


if __name__ == "__main__":
    sys.exit(main())
