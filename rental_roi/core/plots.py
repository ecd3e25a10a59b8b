from __future__ import annotations

import pandas as pd
import plotly.graph_objects as go


def cashflow_bars(yearly_df: pd.DataFrame, title: str = "Projection du Cashflow") -> go.Figure:
    fig = go.Figure()
    fig.add_bar(x=yearly_df["year"], y=yearly_df["cashflow"], name="Cashflow Total", marker_color="#10b981")
    fig.add_bar(x=yearly_df["year"], y=yearly_df["partner_cashflow"], name="Part du Partenaire", marker_color="#3b82f6")
    fig.update_layout(title=title, xaxis_title="Année", yaxis_title="$", barmode="group")
    return fig


def partner_return_composition(yearly_df: pd.DataFrame, title: str = "Composition des Retours Partenaire") -> go.Figure:
    """Stacked bars of the partner return sources per year.

    Uses barmode="relative" so a negative cashflow stacks below zero.
    """
    fig = go.Figure()
    fig.add_bar(x=yearly_df["year"], y=yearly_df["partner_cashflow"], name="Cashflow", marker_color="#10b981")
    fig.add_bar(
        x=yearly_df["year"],
        y=yearly_df["partner_principal_paydown"],
        name="Remboursement Capital",
        marker_color="#6366f1",
    )
    fig.add_bar(x=yearly_df["year"], y=yearly_df["partner_appreciation"], name="Appréciation", marker_color="#8b5cf6")
    fig.update_layout(title=title, xaxis_title="Année", yaxis_title="$", barmode="relative")
    return fig


def mortgage_balance_curve(amort_yearly: pd.DataFrame, title: str = "Solde hypothécaire") -> go.Figure:
    fig = go.Figure(go.Scatter(x=amort_yearly["year"], y=amort_yearly["end_balance"], mode="lines+markers"))
    fig.update_layout(title=title, xaxis_title="Année", yaxis_title="$")
    return fig
