from __future__ import annotations

from typing import List

from .inputs import FIXED_EXPENSE_FIELDS, REVENUE_TIERS, PropertyInputs


def input_warnings(inputs: PropertyInputs) -> List[str]:
    """Sanity checks for user-entered inputs.

    Returns a list of warning messages (empty when nothing looks off). Never
    raises: the projection runs on whatever it is given.
    """
    warnings: List[str] = []

    if inputs.amortization_years <= 0:
        warnings.append("La durée d'amortissement doit être positive (paiement hypothécaire indéfini).")

    money_fields = ["purchase_price", "mortgage_amount", "cleaning_cost_per_stay", "partner_capital"]
    money_fields += list(FIXED_EXPENSE_FIELDS)
    for tier in REVENUE_TIERS:
        money_fields += [tier.price_field, tier.count_field]
    negatives = [name for name in money_fields if getattr(inputs, name) < 0]
    if negatives:
        warnings.append(f"Valeurs négatives: {', '.join(negatives)}")

    if abs(inputs.partner_share + inputs.manager_share - 100) > 1e-9:
        warnings.append(
            f"Les parts partenaire ({inputs.partner_share:g}%) et gestionnaire "
            f"({inputs.manager_share:g}%) ne totalisent pas 100%."
        )

    if inputs.mortgage_amount > inputs.purchase_price:
        warnings.append("Le prêt hypothécaire dépasse le prix d'achat.")

    if not inputs.partner_capital:
        warnings.append("Capital partenaire nul: le ROI est exprimé en dollars (diviseur 1).")

    return warnings
