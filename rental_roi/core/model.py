from __future__ import annotations

import logging
from dataclasses import asdict, dataclass, fields
from typing import Dict, List, Sequence

import pandas as pd

from .amortization import MONTHS_IN_YEAR, amortize_year, fixed_monthly_payment
from .inputs import FIXED_EXPENSE_FIELDS, MONTHLY_EXPENSE_FIELDS, REVENUE_TIERS, PropertyInputs

logger = logging.getLogger(__name__)

DEFAULT_YEARS = 5


@dataclass(frozen=True)
class AnnualResult:
    year: int
    revenue: float
    expenses: float
    noi: float
    mortgage_payment: float
    cashflow: float

    # Partner metrics
    partner_cashflow: float
    partner_principal_paydown: float
    partner_appreciation: float
    partner_total_roi: float  # %

    # Manager metrics
    total_manager_benefit: float


RESULT_COLUMNS: List[str] = [f.name for f in fields(AnnualResult)]


class RentalModel:
    def __init__(self, inputs: PropertyInputs):
        self.inputs = inputs

        self.monthly_rate = self.inputs.mortgage_interest_rate / 100.0 / MONTHS_IN_YEAR

    # ------------------------- Mortgage ------------------------- #
    @property
    def monthly_payment(self) -> float:
        return fixed_monthly_payment(
            principal=self.inputs.mortgage_amount,
            annual_rate=self.inputs.mortgage_interest_rate / 100.0,
            years=self.inputs.amortization_years,
        )

    @property
    def annual_payment(self) -> float:
        return self.monthly_payment * MONTHS_IN_YEAR

    # ------------------------- Year-1 base values ------------------------- #
    def potential_gross_income(self) -> float:
        return sum(
            getattr(self.inputs, tier.price_field) * getattr(self.inputs, tier.count_field)
            for tier in REVENUE_TIERS
        )

    def collectible_income(self) -> float:
        gross = self.potential_gross_income()
        return gross - gross * (self.inputs.bad_debt_percent / 100.0)

    def total_bookings(self) -> float:
        return sum(getattr(self.inputs, tier.count_field) for tier in REVENUE_TIERS)

    def fixed_expenses(self) -> float:
        total = 0.0
        for name in FIXED_EXPENSE_FIELDS:
            value = getattr(self.inputs, name)
            if name in MONTHLY_EXPENSE_FIELDS:
                value = value * MONTHS_IN_YEAR
            total += value
        return total

    def annual_cleaning(self) -> float:
        return self.inputs.cleaning_cost_per_stay * self.total_bookings()

    def revenue_based_fees(self, income: float) -> float:
        rate = (
            self.inputs.management_rate
            + self.inputs.maintenance_rate
            + self.inputs.miscellaneous_rate
        )
        return income * (rate / 100.0)

    def estimated_annual_expenses(self) -> float:
        """Year-1 expense estimate displayed next to the input form.

        Unlike the projection, the percentage fees apply to gross potential income
        (before bad debt).
        """
        return (
            self.fixed_expenses()
            + self.annual_cleaning()
            + self.revenue_based_fees(self.potential_gross_income())
        )

    # ------------------------- Projection ------------------------- #
    def project(self, years: int = DEFAULT_YEARS) -> List[AnnualResult]:
        inputs = self.inputs
        partner_ratio = inputs.partner_share / 100.0
        manager_ratio = inputs.manager_share / 100.0
        # Zero or missing capital: report the raw dollar return instead
        capital = inputs.partner_capital or 1

        income = self.collectible_income()
        fixed = self.fixed_expenses()
        cleaning = self.annual_cleaning()
        property_value = inputs.purchase_price
        balance = inputs.mortgage_amount
        payment = self.monthly_payment
        annual_payment = payment * MONTHS_IN_YEAR

        logger.debug(
            "Projecting %d years: income=%.2f fixed=%.2f cleaning=%.2f payment=%.2f/month",
            years, income, fixed, cleaning, payment,
        )

        results: List[AnnualResult] = []
        for y in range(1, years + 1):
            expenses = fixed + cleaning + self.revenue_based_fees(income)
            noi = income - expenses

            principal_paydown, balance = amortize_year(balance, self.monthly_rate, payment)
            cashflow = noi - annual_payment

            partner_cashflow = cashflow * partner_ratio
            partner_appreciation = property_value * (inputs.appreciation / 100.0) * partner_ratio
            partner_paydown = principal_paydown * partner_ratio
            partner_return = partner_cashflow + partner_appreciation + partner_paydown

            results.append(
                AnnualResult(
                    year=y,
                    revenue=income,
                    expenses=expenses,
                    noi=noi,
                    mortgage_payment=annual_payment,
                    cashflow=cashflow,
                    partner_cashflow=partner_cashflow,
                    partner_principal_paydown=partner_paydown,
                    partner_appreciation=partner_appreciation,
                    partner_total_roi=partner_return / capital * 100.0,
                    # Manager is fee-only: no share of appreciation or paydown
                    total_manager_benefit=cashflow * manager_ratio,
                )
            )

            # Growth for next year; mortgage terms are fixed at origination
            income *= 1 + inputs.income_growth / 100.0
            fixed *= 1 + inputs.expense_growth / 100.0
            cleaning *= 1 + inputs.expense_growth / 100.0
            property_value *= 1 + inputs.appreciation / 100.0

        return results

    def run(self, years: int = DEFAULT_YEARS) -> Dict[str, object]:
        results = self.project(years)
        return {
            "results": results,
            "yearly": projection_frame(results),
            "monthly_payment": self.monthly_payment,
        }


def project(inputs: PropertyInputs, years: int = DEFAULT_YEARS) -> List[AnnualResult]:
    """Project ``years`` annual results for ``inputs``, year 1 first."""
    return RentalModel(inputs).project(years)


def projection_frame(results: Sequence[AnnualResult]) -> pd.DataFrame:
    """One row per projected year, columns named after the AnnualResult fields."""
    return pd.DataFrame([asdict(r) for r in results], columns=RESULT_COLUMNS)


def estimated_annual_expenses(inputs: PropertyInputs) -> float:
    return RentalModel(inputs).estimated_annual_expenses()
