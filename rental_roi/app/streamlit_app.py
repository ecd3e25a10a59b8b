from __future__ import annotations

import logging
import os
import sys
from typing import Dict, List

import pandas as pd
import streamlit as st

# Ensure package import works on Streamlit Cloud when CWD != repo root
_THIS_DIR = os.path.dirname(__file__)
_REPO_ROOT = os.path.abspath(os.path.join(_THIS_DIR, "..", ".."))
if _REPO_ROOT not in sys.path:
    sys.path.insert(0, _REPO_ROOT)

from rental_roi.core import plots
from rental_roi.core.amortization import summarize as amort_summarize
from rental_roi.core.inputs import (
    FIXED_EXPENSE_FIELDS,
    REVENUE_TIERS,
    PropertyInputs,
    inputs_from_mapping,
    update_field,
    with_partner_share,
)
from rental_roi.core.model import AnnualResult, RentalModel, estimated_annual_expenses
from rental_roi.core.utils import cad, percent, table_formats
from rental_roi.core.validation import input_warnings
from config import CURRENCY_SYMBOL, LOG_LEVEL, PROJECTION_YEARS, PROPERTY_DEFAULTS


logging.basicConfig(level=LOG_LEVEL, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
logger = logging.getLogger(__name__)

st.set_page_config(page_title="Calculateur de rentabilité locative", layout="wide")

PERCENT_EXPENSE_FIELDS: Dict[str, str] = {
    "management_rate": "Frais d'admin / gestion (%)",
    "maintenance_rate": "Entretien (%)",
    "miscellaneous_rate": "Divers (%)",
}

TABLE_LABELS: Dict[str, str] = {
    "year": "Année",
    "revenue": "Revenus",
    "expenses": "Dépenses",
    "noi": "RNE",
    "mortgage_payment": "Service de la Dette",
    "cashflow": "Cashflow",
    "partner_total_roi": "ROI Partenaire (%)",
}


def money(value: float) -> str:
    return cad(value, CURRENCY_SYMBOL)


def default_inputs() -> PropertyInputs:
    return inputs_from_mapping(PROPERTY_DEFAULTS)


def _number(inputs: PropertyInputs, name: str, label: str, step: float = 100.0, container=None) -> PropertyInputs:
    target = container if container is not None else st.sidebar
    value = target.number_input(label, value=float(getattr(inputs, name)), step=step, key=name)
    return update_field(inputs, name, value)


def sidebar_inputs(inputs: PropertyInputs) -> PropertyInputs:
    st.sidebar.header("Infos propriété")
    for name, label in [("address", "Adresse"), ("city", "Ville"), ("mls_number", "# MLS"), ("cadastre", "Cadastre")]:
        inputs = update_field(inputs, name, st.sidebar.text_input(label, value=getattr(inputs, name), key=name))
    inputs = update_field(inputs, "date", st.sidebar.text_input("Date", value=inputs.date, key="date"))

    st.sidebar.subheader("Achat & financement")
    inputs = _number(inputs, "purchase_price", "Prix d'achat", step=5_000.0)
    inputs = _number(inputs, "mortgage_amount", "Prêt hypothécaire", step=5_000.0)
    inputs = _number(inputs, "mortgage_interest_rate", "Taux hypothécaire (% annuel)", step=0.1)
    amortization = st.sidebar.number_input(
        "Amortissement (années)", min_value=1, value=int(inputs.amortization_years), step=1, key="amortization_years"
    )
    inputs = update_field(inputs, "amortization_years", int(amortization))

    st.sidebar.subheader("Revenus (location court terme)")
    for tier in REVENUE_TIERS:
        c1, c2 = st.sidebar.columns([2, 1])
        inputs = _number(inputs, tier.price_field, f"{tier.label} ($)", step=50.0, container=c1)
        inputs = _number(inputs, tier.count_field, "Nb.", step=1.0, container=c2)
    inputs = _number(inputs, "bad_debt_percent", "Mauvaise créance (%)", step=0.5)

    st.sidebar.subheader("Dépenses (exploitation)")
    for name, label in FIXED_EXPENSE_FIELDS.items():
        inputs = _number(inputs, name, label)
    inputs = _number(inputs, "cleaning_cost_per_stay", "Frais de ménage par location ($)", step=10.0)
    for name, label in PERCENT_EXPENSE_FIELDS.items():
        inputs = _number(inputs, name, label, step=0.1)

    st.sidebar.subheader("Structure")
    inputs = _number(inputs, "partner_capital", "Capital du partenaire", step=5_000.0)
    share = st.sidebar.slider("Part du partenaire (%)", min_value=0, max_value=100, value=int(inputs.partner_share), step=5)
    inputs = with_partner_share(inputs, share)
    st.sidebar.caption(f"Part du gestionnaire : {inputs.manager_share:g}%")

    st.sidebar.subheader("Croissance (% annuel)")
    inputs = _number(inputs, "income_growth", "Croissance des revenus", step=0.5)
    inputs = _number(inputs, "expense_growth", "Croissance des dépenses", step=0.5)
    inputs = _number(inputs, "appreciation", "Appréciation", step=0.5)
    return inputs


def render_input_summary(model: RentalModel, monthly_payment: float):
    c1, c2, c3 = st.columns(3)
    with c1:
        st.metric("Revenu brut total", money(model.potential_gross_income()))
    with c2:
        st.metric("Dépenses totales (est.)", money(estimated_annual_expenses(model.inputs)))
    with c3:
        st.metric("Paiement hypothécaire (mensuel)", money(monthly_payment))


def render_summary(results: List[AnnualResult]):
    st.subheader("Résumé (année 1)")
    first = results[0]
    c1, c2, c3, c4 = st.columns(4)
    with c1:
        st.metric("RNE", money(first.noi), help="Revenu net d'exploitation")
    with c2:
        st.metric("Cashflow", money(first.cashflow), help="Profit net annuel")
    with c3:
        st.metric("ROI partenaire", percent(first.partner_total_roi), help="Retour sur investissement total")
    with c4:
        st.metric("Bénéfice gestionnaire", money(first.total_manager_benefit))
    if first.cashflow < 0:
        st.warning("Cashflow négatif en année 1.")


def render_graphs(yearly: pd.DataFrame):
    c1, c2 = st.columns(2)
    with c1:
        st.plotly_chart(plots.cashflow_bars(yearly), use_container_width=True)
    with c2:
        st.plotly_chart(plots.partner_return_composition(yearly), use_container_width=True)


def style_with_commas(df: pd.DataFrame):
    num_cols = df.select_dtypes(include=["number"]).columns
    if len(num_cols) == 0:
        return df
    return df.style.format(table_formats(num_cols, percent_columns=["ROI Partenaire (%)"]))


def render_tables(yearly: pd.DataFrame, model: RentalModel, years: int):
    st.markdown("Projection (annuel)")
    table = yearly[list(TABLE_LABELS)].rename(columns=TABLE_LABELS)
    st.dataframe(style_with_commas(table), use_container_width=True)
    st.download_button(
        "Exporter CSV Projection",
        data=yearly.to_csv(index=False).encode("utf-8"),
        file_name="projection_annuelle.csv",
        mime="text/csv",
    )

    st.markdown("Amortissement hypothécaire (annuel)")
    amort = amort_summarize(
        principal=model.inputs.mortgage_amount,
        annual_rate=model.inputs.mortgage_interest_rate / 100.0,
        years=model.inputs.amortization_years,
    )
    amort_yearly = amort.schedule_yearly[amort.schedule_yearly["year"] <= years]
    st.dataframe(style_with_commas(amort_yearly), use_container_width=True)
    st.plotly_chart(plots.mortgage_balance_curve(amort_yearly), use_container_width=True)
    st.download_button(
        "Exporter CSV Amortissement",
        data=amort.schedule_yearly.to_csv(index=False).encode("utf-8"),
        file_name="amortissement_annuel.csv",
        mime="text/csv",
    )


def main():
    st.title("Calculateur de rentabilité locative")
    st.caption("Analyse du cashflow, des retours du partenaire et de l'équité à long terme.")
    inputs = sidebar_inputs(default_inputs())
    years = int(st.number_input("Horizon (années)", min_value=1, value=int(PROJECTION_YEARS), step=1))

    for message in input_warnings(inputs):
        st.warning(message)

    model = RentalModel(inputs)
    res = model.run(years)
    logger.info("Projection recomputed for %s over %d years", inputs.address or "<sans adresse>", years)

    render_input_summary(model, res["monthly_payment"])  # type: ignore[arg-type]
    render_summary(res["results"])  # type: ignore[arg-type]

    tabs = st.tabs(["Analyse visuelle", "Données détaillées"])
    with tabs[0]:
        render_graphs(res["yearly"])  # type: ignore[arg-type]
    with tabs[1]:
        render_tables(res["yearly"], model, years)  # type: ignore[arg-type]


if __name__ == "__main__":
    main()
