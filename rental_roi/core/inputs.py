from __future__ import annotations

import datetime
from dataclasses import dataclass, field, fields, replace
from typing import Any, Dict, Final, Mapping, NamedTuple, Tuple


def _today() -> str:
    return datetime.date.today().isoformat()


@dataclass(frozen=True)
class PropertyInputs:
    # Identification (not used in computation)
    date: str = field(default_factory=_today)
    mls_number: str = ""
    address: str = ""
    city: str = ""
    cadastre: str = ""

    # Purchase & financing
    purchase_price: float = 650_000.0
    mortgage_amount: float = 500_000.0
    mortgage_interest_rate: float = 6.0  # annual nominal %
    amortization_years: int = 25

    # Revenue tiers: price per booking and number of bookings
    rev_low_weekend_price: float = 1_000.0
    rev_low_weekend_count: float = 15
    rev_low_week_price: float = 1_500.0
    rev_low_week_count: float = 5
    rev_high_weekend_price: float = 1_500.0
    rev_high_weekend_count: float = 20
    rev_high_week_price: float = 2_000.0
    rev_high_week_count: float = 10

    bad_debt_percent: float = 0.0

    # Fixed expenses (annual unless specified)
    tax_municipal: float = 4_000.0
    tax_school: float = 500.0
    tax_water: float = 0.0
    insurance: float = 2_500.0
    electricity: float = 0.0
    heating: float = 0.0
    wood: float = 0.0
    water_heating: float = 0.0
    cable_internet: float = 1_200.0
    snow_removal: float = 800.0
    lawn_care: float = 0.0
    citq: float = 300.0
    waste: float = 0.0
    pool_spa: float = 1_000.0
    exterminator: float = 0.0
    appliance_repair: float = 500.0
    condo_fees: float = 0.0  # monthly
    association_fees: float = 0.0
    accounting: float = 0.0
    advertising: float = 0.0

    # Variable expenses
    cleaning_cost_per_stay: float = 150.0
    management_rate: float = 8.0  # % of revenue
    maintenance_rate: float = 5.0  # % of revenue
    miscellaneous_rate: float = 1.0  # % of revenue

    # Partnership
    partner_capital: float = 150_000.0
    partner_share: float = 50.0
    manager_share: float = 50.0

    # Growth (% per year)
    income_growth: float = 3.0
    expense_growth: float = 3.0
    appreciation: float = 5.0


class RevenueTier(NamedTuple):
    label: str
    price_field: str
    count_field: str


REVENUE_TIERS: Final[Tuple[RevenueTier, ...]] = (
    RevenueTier("Fin de semaine basse saison", "rev_low_weekend_price", "rev_low_weekend_count"),
    RevenueTier("Semaine basse saison", "rev_low_week_price", "rev_low_week_count"),
    RevenueTier("Fin de semaine haute saison", "rev_high_weekend_price", "rev_high_weekend_count"),
    RevenueTier("Semaine haute saison", "rev_high_week_price", "rev_high_week_count"),
)

# Field name -> display label. condo_fees is entered per month.
FIXED_EXPENSE_FIELDS: Final[Dict[str, str]] = {
    "tax_municipal": "Taxes municipales",
    "tax_school": "Taxes scolaires",
    "tax_water": "Taxes eau",
    "insurance": "Assurances",
    "electricity": "Électricité",
    "heating": "Huile ou gaz naturel",
    "wood": "Bois",
    "water_heating": "Location appareils / eau chaude",
    "cable_internet": "Câble / internet / téléphone",
    "snow_removal": "Déneigement",
    "lawn_care": "Pelouse, paysagement",
    "citq": "CITQ",
    "waste": "Déchets",
    "pool_spa": "Piscine ou SPA",
    "exterminator": "Exterminateur",
    "appliance_repair": "Réparation électroménagers",
    "condo_fees": "Frais de condo (par mois)",
    "association_fees": "Frais d'association",
    "accounting": "Comptabilité",
    "advertising": "Publicité",
}

MONTHLY_EXPENSE_FIELDS: Final[Tuple[str, ...]] = ("condo_fees",)


def field_names() -> Tuple[str, ...]:
    return tuple(f.name for f in fields(PropertyInputs))


def update_field(inputs: PropertyInputs, name: str, value: Any) -> PropertyInputs:
    """Return a copy of ``inputs`` with a single field replaced.

    Raises KeyError when ``name`` is not a PropertyInputs field.
    """
    if name not in field_names():
        raise KeyError(f"Unknown input field: {name!r}")
    return replace(inputs, **{name: value})


def with_partner_share(inputs: PropertyInputs, share: float) -> PropertyInputs:
    """Set the partner share and keep the manager share complementary (sum = 100)."""
    return replace(inputs, partner_share=share, manager_share=100 - share)


def inputs_from_mapping(mapping: Mapping[str, Any]) -> PropertyInputs:
    """Build inputs from a plain mapping (e.g. the ``property`` section of config.yaml).

    Missing keys fall back to the dataclass defaults; unknown keys raise KeyError.
    """
    known = set(field_names())
    unknown = sorted(set(mapping) - known)
    if unknown:
        raise KeyError(f"Unknown input fields: {', '.join(unknown)}")
    data = dict(mapping)
    if isinstance(data.get("date"), datetime.date):
        # YAML parses bare ISO dates into date objects
        data["date"] = data["date"].isoformat()
    return PropertyInputs(**data)
