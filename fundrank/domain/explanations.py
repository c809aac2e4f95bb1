"""
Explanation generator
Builds the short "why it's here" sentences shown next to ranked funds.
Pure: reads only its arguments.
"""

from fundrank.schemas.fund import Fund
from fundrank.schemas.results import ScoreBreakdown

# --- Business-owned tuning parameters ---
# Confirm with the product owner before changing either cutoff.
STANDOUT_SUB_SCORE = 80
BALANCED_PROFILE_CUTOFF = 140

MAX_REASONS = 2


def _join_reasons(reasons: list[str]) -> str:
    return ". ".join(reasons[:MAX_REASONS]) + "."


def _format_number(value: float) -> str:
    """1.5 -> '1.5', 2.0 -> '2'"""
    return f"{value:g}"


def _category_contains(fund: Fund, keyword: str) -> bool:
    return bool(fund.category) and keyword in fund.category.lower()


def generate_why_included(fund: Fund, breakdown: ScoreBreakdown) -> str:
    """
    Generic justification for a ranked fund.

    Walks an ordered checklist of standout traits and keeps the first two.
    When nothing stands out, falls back to the shape of the fee and
    liquidity scores.

    Args:
        fund: fund snapshot
        breakdown: the fund's sub-scores

    Returns:
        str: one or two sentences, each ending with a period
    """
    reasons = []

    if breakdown.fee_score >= STANDOUT_SUB_SCORE:
        reasons.append("Competitive fee structure")
    if breakdown.liquidity_score >= STANDOUT_SUB_SCORE:
        reasons.append("Flexible liquidity terms")
    if breakdown.governance_score >= STANDOUT_SUB_SCORE:
        reasons.append("Strong governance disclosure")
    if fund.is_verified:
        reasons.append("Verified fund")
    if fund.cmvm_id:
        reasons.append("CMVM regulated")
    if _category_contains(fund, "debt"):
        reasons.append("Income-focused strategy")
    if _category_contains(fund, "venture"):
        reasons.append("Growth-oriented exposure")

    if not reasons:
        if breakdown.fee_score + breakdown.liquidity_score > BALANCED_PROFILE_CUTOFF:
            reasons.append("Balanced fee and liquidity profile")
        else:
            reasons.append("Strong overall profile")

    return _join_reasons(reasons)


# === Cluster-specific explanations ===

def explain_fees(fund: Fund) -> str:
    mgmt = _format_number(fund.management_fee) if fund.management_fee is not None else "N/A"
    text = f"Management fee: {mgmt}%."
    if fund.performance_fee:
        text += f" Performance fee: {_format_number(fund.performance_fee)}%."
    else:
        text += " No performance fee."
    return text


def explain_liquidity(fund: Fund) -> str:
    frequency = fund.redemption_frequency
    if fund.term:
        return f"{_format_number(fund.term)}-year term. {frequency or 'End of term'} redemption."
    return f"{frequency or 'Flexible'} redemption terms."


def explain_capital_preservation(fund: Fund) -> str:
    text = f"{fund.category or 'Income'} strategy."
    if fund.risk_band:
        text += f" {fund.risk_band} risk profile."
    return text


def explain_growth(fund: Fund) -> str:
    return f"{fund.category} strategy. Targets long-term capital appreciation."


def explain_transparency(fund: Fund) -> str:
    signals = []
    if fund.cmvm_id:
        signals.append("CMVM regulated")
    if fund.auditor:
        signals.append("auditor disclosed")
    if fund.custodian:
        signals.append("custodian disclosed")

    if not signals:
        return "Comprehensive disclosure."
    text = ", ".join(signals)
    return text[0].upper() + text[1:] + "."

