from rental_roi.core import plots
from rental_roi.core.amortization import summarize
from rental_roi.core.inputs import PropertyInputs
from rental_roi.core.model import project, projection_frame
from rental_roi.core.utils import cad, percent, table_formats


def test_charts_have_one_trace_per_series():
    yearly = projection_frame(project(PropertyInputs()))
    assert len(plots.cashflow_bars(yearly).data) == 2
    fig = plots.partner_return_composition(yearly)
    assert [t.name for t in fig.data] == ["Cashflow", "Remboursement Capital", "Appréciation"]
    assert fig.layout.barmode == "relative"


def test_mortgage_balance_curve():
    yearly = summarize(500_000, 0.06, 25).schedule_yearly
    fig = plots.mortgage_balance_curve(yearly)
    assert len(fig.data[0].x) == 25


def test_formatting():
    assert cad(650_000) == "650 000 $"
    assert percent(12.5) == "12.5 %"


def test_table_formats_keep_one_decimal_for_percent_columns():
    formats = table_formats(["Revenus", "ROI Partenaire (%)"], percent_columns=["ROI Partenaire (%)"])
    assert formats == {"Revenus": "{:,.0f}", "ROI Partenaire (%)": "{:.1f}"}
    assert formats["ROI Partenaire (%)"].format(12.3456) == "12.3"
