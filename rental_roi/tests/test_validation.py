from rental_roi.core.inputs import PropertyInputs
from rental_roi.core.validation import input_warnings


def test_default_inputs_have_no_warnings():
    assert input_warnings(PropertyInputs()) == []


def test_warnings_for_degenerate_inputs():
    inputs = PropertyInputs(
        amortization_years=0,
        insurance=-1,
        partner_share=60,
        manager_share=50,
        mortgage_amount=900_000,
        partner_capital=0,
    )
    warnings = input_warnings(inputs)
    assert len(warnings) == 5
    assert any("insurance" in w for w in warnings)
