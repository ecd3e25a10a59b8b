from .amortization import amort_schedule, aggregate_yearly, amortize_year, fixed_monthly_payment, summarize
from .inputs import (
    FIXED_EXPENSE_FIELDS,
    REVENUE_TIERS,
    PropertyInputs,
    inputs_from_mapping,
    update_field,
    with_partner_share,
)
from .model import AnnualResult, RentalModel, estimated_annual_expenses, project, projection_frame
from .utils import cad, percent
from .validation import input_warnings

__all__ = [
	"amort_schedule",
	"aggregate_yearly",
	"amortize_year",
	"fixed_monthly_payment",
	"summarize",
	"FIXED_EXPENSE_FIELDS",
	"REVENUE_TIERS",
	"PropertyInputs",
	"inputs_from_mapping",
	"update_field",
	"with_partner_share",
	"AnnualResult",
	"RentalModel",
	"estimated_annual_expenses",
	"project",
	"projection_frame",
	"cad",
	"percent",
	"input_warnings",
]
