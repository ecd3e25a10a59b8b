from __future__ import annotations

from dataclasses import dataclass
from typing import Final, Tuple

import pandas as pd


MONTHS_IN_YEAR: Final[int] = 12


def fixed_monthly_payment(principal: float, annual_rate: float, years: int) -> float:
    """Compute the fixed monthly payment for a fully amortizing loan.

    Parameters
    ----------
    principal : float
        Initial loan amount.
    annual_rate : float
        Nominal annual interest rate as a decimal (e.g., 0.06 for 6%).
    years : int
        Amortization period in years. Must be positive: a zero period
        raises ZeroDivisionError.

    Returns
    -------
    float
        The constant monthly payment.
    """
    n_months = years * MONTHS_IN_YEAR
    monthly_rate = annual_rate / MONTHS_IN_YEAR
    if monthly_rate == 0:
        return principal / n_months
    factor = (1 + monthly_rate) ** n_months
    return principal * monthly_rate * factor / (factor - 1)


def amortize_year(balance: float, monthly_rate: float, payment: float) -> Tuple[float, float]:
    """Apply twelve monthly payments to ``balance``.

    Returns (principal repaid over the year, ending balance). Payments are only
    applied while the balance is positive; the last principal portion is not
    capped, so the balance can end slightly below zero at payoff.
    """
    principal_paid = 0.0
    for _ in range(MONTHS_IN_YEAR):
        interest = balance * monthly_rate
        principal_component = payment - interest
        if balance > 0:
            principal_paid += principal_component
            balance -= principal_component
    return principal_paid, balance


def amort_schedule(principal: float, annual_rate: float, years: int) -> pd.DataFrame:
    """Generate a monthly amortization schedule.

    Columns: month (1..N), payment, interest, principal, balance

    Uses the same monthly step as ``amortize_year``: once the balance reaches
    zero (or below) no further principal is recorded.
    """
    n_months = years * MONTHS_IN_YEAR
    if n_months <= 0:
        return pd.DataFrame(
            columns=["month", "payment", "interest", "principal", "balance"],
            data=[],
        )

    payment = fixed_monthly_payment(principal, annual_rate, years)
    monthly_rate = annual_rate / MONTHS_IN_YEAR

    rows = []
    balance = float(principal)
    for m in range(1, n_months + 1):
        interest = balance * monthly_rate
        principal_component = payment - interest if balance > 0 else 0.0
        balance -= principal_component
        rows.append(
            {
                "month": m,
                "payment": float(payment),
                "interest": float(interest),
                "principal": float(principal_component),
                "balance": float(balance),
            }
        )

    return pd.DataFrame(rows)


def aggregate_yearly(schedule: pd.DataFrame) -> pd.DataFrame:
    """Aggregate a monthly amortization schedule by year.

    Returns a DataFrame with columns: year, payment, interest, principal, end_balance
    """
    if schedule.empty:
        return pd.DataFrame(
            columns=["year", "payment", "interest", "principal", "end_balance"],
            data=[],
        )

    schedule = schedule.copy()
    schedule["year"] = (schedule["month"] - 1) // MONTHS_IN_YEAR + 1
    agg = (
        schedule.groupby("year", as_index=False)[["payment", "interest", "principal"]]
        .sum()
        .sort_values("year")
    )
    # Capture ending balance per year
    end_balances = (
        schedule.groupby("year", as_index=False)["balance"].last().rename(columns={"balance": "end_balance"})
    )
    return agg.merge(end_balances, on="year", how="left")


@dataclass(frozen=True)
class AmortizationSummary:
    payment_monthly: float
    schedule_monthly: pd.DataFrame
    schedule_yearly: pd.DataFrame


def summarize(principal: float, annual_rate: float, years: int) -> AmortizationSummary:
    """Convenience wrapper returning payment and schedules."""
    schedule = amort_schedule(principal, annual_rate, years)
    yearly = aggregate_yearly(schedule)
    payment = fixed_monthly_payment(principal, annual_rate, years)
    return AmortizationSummary(payment_monthly=payment, schedule_monthly=schedule, schedule_yearly=yearly)
