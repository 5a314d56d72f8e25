"""EMI and amortization schedule for car loans (reducing balance)"""

import math
from typing import Iterable, List

from gadizone_pricing.config import settings
from gadizone_pricing.domain.models import AmortizationRow, EmiSummary, LoanTerms
from gadizone_pricing.utils.rounding import round_half_up

YEARLY_CHECKPOINTS = (12, 24, 36, 48, 60, 72, 84)


def monthly_rate(loan: LoanTerms) -> float:
    return loan.annual_rate_percent / 12 / 100


def compute_emi(loan: LoanTerms) -> int:
    """
    Equated monthly installment on a reducing-balance loan.

    emi = P * r * (1 + r)^n / ((1 + r)^n - 1), r = annual% / 12 / 100

    Inputs are not validated: tenure_months <= 0 is a caller error
    (see LoanTerms.validate). The result is rounded half-up once, at the end.

    Example:
        800000 at 8% for 84 months -> 12469
    """
    rate = monthly_rate(loan)

    if rate == 0:
        return round_half_up(loan.principal / loan.tenure_months)

    # (1 + r)^n - 1 via expm1, so tiny rates do not collapse to 0
    exponent = loan.tenure_months * math.log1p(rate)
    return round_half_up(loan.principal * rate * math.exp(exponent) / math.expm1(exponent))


def build_amortization_schedule(
    loan: LoanTerms,
    monthly_emi: int,
    checkpoints: Iterable[int],
) -> List[AmortizationRow]:
    """
    Simulate the loan month by month and report cumulative totals at checkpoints.

    Requirements:
    - monthly_emi must come from compute_emi(loan) for the same terms
    - Checkpoints beyond the tenure are skipped, not an error
    - The row at the full tenure closes the loan: balance 0, principal paid
      equals the loan principal, and interest absorbs the EMI rounding drift

    Returns:
        One AmortizationRow per matched checkpoint, in month order
    """
    rate = monthly_rate(loan)
    wanted = set(checkpoints)

    balance = float(loan.principal)
    principal_paid = 0.0
    interest_paid = 0.0

    rows = []
    for month in range(1, loan.tenure_months + 1):
        interest = balance * rate
        principal_portion = monthly_emi - interest
        balance -= principal_portion
        principal_paid += principal_portion
        interest_paid += interest

        if month not in wanted:
            continue

        if month == loan.tenure_months:
            # Final checkpoint absorbs simulation and rounding drift
            total_paid = monthly_emi * loan.tenure_months
            rows.append(
                AmortizationRow(
                    months_elapsed=month,
                    cumulative_principal_paid=loan.principal,
                    cumulative_interest_paid=max(0, total_paid - loan.principal) if rate else 0,
                    remaining_balance=0,
                )
            )
        else:
            rows.append(
                AmortizationRow(
                    months_elapsed=month,
                    cumulative_principal_paid=round_half_up(principal_paid),
                    cumulative_interest_paid=round_half_up(interest_paid),
                    remaining_balance=round_half_up(max(0.0, loan.principal - principal_paid)),
                )
            )

    return rows


def default_checkpoints(tenure_months: int) -> List[int]:
    """Yearly marks up to the tenure, closed by the tenure itself"""
    marks = [m for m in YEARLY_CHECKPOINTS if m <= tenure_months]
    if tenure_months >= 1 and tenure_months not in marks:
        marks.append(tenure_months)
    return marks


def summarize_emi(loan: LoanTerms) -> EmiSummary:
    """
    EMI plus total repayment and total interest over the tenure.

    Totals are the rounded EMI times the tenure, what the buyer actually
    pays, so total_interest equals the closing schedule row's interest.
    Multiplying the unrounded EMI instead can differ by up to tenure / 2 rupees.
    """
    emi = compute_emi(loan)

    if monthly_rate(loan) == 0:
        return EmiSummary(emi=emi, principal=loan.principal, total_amount=loan.principal, total_interest=0)

    total_amount = emi * loan.tenure_months
    return EmiSummary(
        emi=emi,
        principal=loan.principal,
        total_amount=total_amount,
        total_interest=max(0, total_amount - loan.principal),
    )


def loan_terms_for_price(
    price: int,
    down_payment: int | None = None,
    annual_rate_percent: float | None = None,
    tenure_months: int | None = None,
) -> LoanTerms:
    """
    Build loan terms for a car price, filling gaps with calculator defaults.

    Defaults: 20% down payment, 8% p.a., 84 months (see config).
    """
    if down_payment is None:
        down_payment = round_half_up(price * settings.emi_down_payment_fraction)
    if annual_rate_percent is None:
        annual_rate_percent = settings.emi_annual_rate_percent
    if tenure_months is None:
        tenure_months = settings.emi_tenure_months

    return LoanTerms(
        principal=max(0, price - down_payment),
        annual_rate_percent=annual_rate_percent,
        tenure_months=tenure_months,
    )


def display_emi(price: int) -> int:
    """Headline 'EMI starts at' figure for a price using calculator defaults"""
    return compute_emi(loan_terms_for_price(price))
