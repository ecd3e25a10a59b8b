import math

import pytest

from rental_roi.core.inputs import PropertyInputs, update_field
from rental_roi.core.model import (
    RESULT_COLUMNS,
    RentalModel,
    estimated_annual_expenses,
    project,
    projection_frame,
)


def test_default_scenario_returns_five_ordered_years():
    results = project(PropertyInputs())
    assert len(results) == 5
    assert [r.year for r in results] == [1, 2, 3, 4, 5]


def test_horizon_length():
    assert [r.year for r in project(PropertyInputs(), 12)] == list(range(1, 13))
    assert project(PropertyInputs(), 0) == []


def test_projection_is_deterministic():
    inputs = PropertyInputs(date="2025-01-01")
    assert project(inputs, 7) == project(inputs, 7)


def test_revenue_aggregation():
    model = RentalModel(PropertyInputs())
    assert model.potential_gross_income() == 72_500
    assert model.total_bookings() == 50
    assert project(PropertyInputs())[0].revenue == 72_500


def test_bad_debt_reduces_collectible_revenue():
    inputs = PropertyInputs(bad_debt_percent=10)
    assert project(inputs)[0].revenue == pytest.approx(65_250)


def test_condo_fees_are_annualized():
    base = RentalModel(PropertyInputs()).fixed_expenses()
    with_condo = RentalModel(PropertyInputs(condo_fees=100)).fixed_expenses()
    assert base == 10_800
    assert with_condo - base == 1_200


def test_year_one_expenses_and_noi():
    first = project(PropertyInputs())[0]
    # fixed 10 800 + cleaning 7 500 + 14% of 72 500
    assert first.expenses == pytest.approx(28_450)
    assert first.noi == pytest.approx(44_050)


def test_growth_compounding():
    results = project(PropertyInputs())
    assert results[1].revenue == pytest.approx(74_675)
    for prev, cur in zip(results, results[1:]):
        assert cur.revenue == pytest.approx(prev.revenue * 1.03)
        assert cur.mortgage_payment == prev.mortgage_payment


def test_expenses_grow_with_their_own_drivers():
    inputs = PropertyInputs(income_growth=0, expense_growth=10)
    y1, y2 = project(inputs, 2)
    variable = y1.revenue * 0.14
    assert y2.expenses == pytest.approx((y1.expenses - variable) * 1.10 + variable)


def test_zero_interest_mortgage():
    inputs = PropertyInputs(mortgage_interest_rate=0, mortgage_amount=300_000, amortization_years=25)
    model = RentalModel(inputs)
    assert model.monthly_payment == 300_000 / 300
    first = project(inputs)[0]
    assert first.mortgage_payment == pytest.approx(12_000)
    assert first.partner_principal_paydown == pytest.approx(12_000 * 0.5)


def test_partner_and_manager_shares_are_complementary():
    inputs = PropertyInputs(partner_share=70, manager_share=30)
    for r in project(inputs):
        assert r.cashflow != 0
        assert r.partner_cashflow / 70 == pytest.approx(r.cashflow / 100)
        assert (r.cashflow - r.partner_cashflow) / 30 == pytest.approx(r.cashflow / 100)
        assert r.total_manager_benefit == pytest.approx(r.cashflow - r.partner_cashflow)


def test_partner_appreciation_uses_grown_property_value():
    results = project(PropertyInputs())
    assert results[0].partner_appreciation == pytest.approx(650_000 * 0.05 * 0.5)
    assert results[1].partner_appreciation == pytest.approx(650_000 * 1.05 * 0.05 * 0.5)


def test_partner_roi():
    for r in project(PropertyInputs()):
        total = r.partner_cashflow + r.partner_appreciation + r.partner_principal_paydown
        assert r.partner_total_roi == pytest.approx(total / 150_000 * 100)


def test_zero_partner_capital_uses_divisor_one():
    r = project(PropertyInputs(partner_capital=0))[0]
    total = r.partner_cashflow + r.partner_appreciation + r.partner_principal_paydown
    assert r.partner_total_roi == pytest.approx(total * 100)


def test_principal_paydown_increases_each_year():
    results = project(PropertyInputs())
    paydowns = [r.partner_principal_paydown for r in results]
    assert all(b > a for a, b in zip(paydowns, paydowns[1:]))


def test_end_to_end_relationships():
    results = project(PropertyInputs(), 5)
    for r in results:
        assert r.noi == pytest.approx(r.revenue - r.expenses)
        assert r.cashflow == pytest.approx(r.noi - r.mortgage_payment)
        assert math.isclose(r.mortgage_payment, 3221.51 * 12, rel_tol=1e-4)


def test_negative_growth_compounds_down():
    results = project(PropertyInputs(income_growth=-10), 3)
    assert results[2].revenue == pytest.approx(72_500 * 0.9 * 0.9)


def test_payoff_within_horizon_does_not_raise():
    inputs = PropertyInputs(amortization_years=1, mortgage_amount=12_000, mortgage_interest_rate=0)
    results = project(inputs, 3)
    assert results[0].partner_principal_paydown == pytest.approx(6_000)
    assert results[1].partner_principal_paydown == 0
    # Payment keeps being charged: the mortgage terms are fixed
    assert results[2].mortgage_payment == pytest.approx(12_000)


def test_projection_frame():
    df = projection_frame(project(PropertyInputs(), 4))
    assert list(df.columns) == RESULT_COLUMNS
    assert df["year"].tolist() == [1, 2, 3, 4]
    assert projection_frame([]).empty


def test_run_returns_results_and_frame():
    res = RentalModel(PropertyInputs()).run(3)
    assert len(res["results"]) == 3
    assert len(res["yearly"]) == 3
    assert res["monthly_payment"] == pytest.approx(3221.51, rel=1e-4)


def test_estimated_annual_expenses_uses_gross_income():
    inputs = update_field(PropertyInputs(), "bad_debt_percent", 50)
    assert estimated_annual_expenses(inputs) == pytest.approx(28_450)
    assert project(inputs)[0].expenses < 28_450


def test_revenue_fees_follow_grown_income():
    inputs = PropertyInputs(income_growth=10, expense_growth=0)
    y1, y2, y3 = project(inputs, 3)
    assert y2.revenue == pytest.approx(y1.revenue * 1.10)
    assert y2.expenses - y1.expenses == pytest.approx((y2.revenue - y1.revenue) * 0.14)
    assert y3.expenses - y2.expenses == pytest.approx((y3.revenue - y2.revenue) * 0.14)


def test_model_expense_estimate_matches_module_helper():
    model = RentalModel(PropertyInputs(bad_debt_percent=20))
    assert model.revenue_based_fees(72_500) == pytest.approx(10_150)
    assert model.estimated_annual_expenses() == pytest.approx(28_450)
    assert estimated_annual_expenses(model.inputs) == model.estimated_annual_expenses()
