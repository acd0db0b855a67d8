"""
Valuation Engine

Computes monthly cashflow, DSCR and cash-on-cash return for a single
property snapshot (year one) from purchase and financing parameters.
"""

from dataclasses import dataclass

# Reported DSCR when there is no debt service (all-cash purchase).
# Threshold checks such as "dscr < 1.10" rely on this exact value.
DSCR_NO_DEBT = 99.0


@dataclass(frozen=True)
class InputParameters:
    """Property and financing inputs for one calculation."""

    purchase_price: float
    cold_rent_monthly: float  # Nominal rent before vacancy
    non_alloc_costs_monthly: float  # Costs not passed on to the tenant
    equity: float
    interest_rate_pct: float
    initial_repayment_pct: float  # Annual amortization rate
    vacancy_pct: float
    closing_costs_pct: float
    capex: float  # One-time
    reserves_monthly: float  # Maintenance reserve


@dataclass(frozen=True)
class ValuationResult:
    """Financial metrics derived from InputParameters."""

    total_cost: float
    loan: float
    effective_rent: float
    debt_service: float
    net_cashflow: float
    annual_net_cashflow: float
    cash_on_cash: float
    dscr: float


def annuity_monthly(loan: float, interest_pct: float, repayment_pct: float) -> float:
    """
    Calculate the flat monthly annuity payment.

    Interest and initial repayment are both applied to the original loan
    amount; principal reduction over time is not modelled.

    Args:
        loan: Loan amount
        interest_pct: Annual interest rate in percent (e.g., 3.8)
        repayment_pct: Annual initial repayment rate in percent (e.g., 2.0)

    Returns:
        Monthly debt service
    """
    annual_rate = (interest_pct + repayment_pct) / 100
    return loan * annual_rate / 12


def evaluate(params: InputParameters) -> ValuationResult:
    """
    Evaluate an investment.

    Never raises for finite inputs. Degenerate inputs propagate
    mathematically; the only guards are the zero-equity and zero-debt
    sentinels.

    Args:
        params: Property and financing inputs

    Returns:
        ValuationResult with monthly and annual metrics
    """
    total_cost = params.purchase_price * (1 + params.closing_costs_pct / 100) + params.capex
    loan = max(0.0, total_cost - params.equity)

    effective_rent = params.cold_rent_monthly * (1 - params.vacancy_pct / 100)

    debt_service = annuity_monthly(
        loan, params.interest_rate_pct, params.initial_repayment_pct
    )

    # Operating income before financing
    noi = effective_rent - params.non_alloc_costs_monthly - params.reserves_monthly

    net_cashflow = noi - debt_service
    annual_net_cashflow = net_cashflow * 12

    cash_on_cash = annual_net_cashflow / params.equity if params.equity > 0 else 0.0
    dscr = noi / debt_service if debt_service > 0 else DSCR_NO_DEBT

    return ValuationResult(
        total_cost=total_cost,
        loan=loan,
        effective_rent=effective_rent,
        debt_service=debt_service,
        net_cashflow=net_cashflow,
        annual_net_cashflow=annual_net_cashflow,
        cash_on_cash=cash_on_cash,
        dscr=dscr,
    )
