"""
Scoring engine
Rule-based fund scores.

Four independent sub-scores (0-100) combined with fixed weights:
- Fees (35%): lower combined fee scores higher
- Liquidity (35%): shorter term and more frequent redemption score higher
- Governance (20%): more disclosure scores higher
- Minimum investment (10%): lower minimum scores higher

Missing data never raises; it maps to a neutral contribution so every fund
can be ordered.
"""

import math

from loguru import logger

from fundrank.schemas.fund import Fund
from fundrank.schemas.results import ScoredFund, ScoreBreakdown
from fundrank.domain.completeness import is_complete
from fundrank.domain.explanations import generate_why_included

# Neutral score used when a dimension has no data
NEUTRAL_SCORE = 50.0

# --- Business-owned tuning parameters ---
# Fixed ceilings keep scores stable as the fund population changes.
MAX_COMBINED_FEE = 5.0             # % combined fee that scores 0
PERFORMANCE_FEE_CAPTURE = 50.0     # assumed % of profits the performance fee applies to
PERFORMANCE_FEE_DAMPING = 10.0     # performance fee is conditional, not guaranteed
MAX_LOCKUP_YEARS = 10.0            # term that earns no lock-up points
MAX_TERM_POINTS = 60.0
STANDARD_MINIMUM = 500_000         # EUR, standard Golden Visa subscription
PENALTY_PER_100K = 10.0

# Redemption frequency bonus, checked in order (substring match)
FREQUENCY_BONUS = [
    ("daily", 40),
    ("weekly", 35),
    ("monthly", 30),
    ("quarterly", 20),
    ("annual", 10),
    ("yearly", 10),
    ("end of term", 0),
]
UNKNOWN_FREQUENCY_BONUS = 15

# Governance disclosure points, scaled against a 10-point maximum
GOVERNANCE_MAX_POINTS = 10.0
DETAILED_DESCRIPTION_MIN_LENGTH = 200


def _clamp(value: float, low: float = 0.0, high: float = 100.0) -> float:
    return max(low, min(high, value))


def _round1(value: float) -> float:
    """Round half up to one decimal"""
    return math.floor(value * 10 + 0.5) / 10


class ScoringEngine:
    """
    Rule-based scoring engine

    Every method is a pure function of the fund it receives.
    """

    # Weights per dimension (sum 1.0)
    WEIGHTS = {
        "fees": 0.35,
        "liquidity": 0.35,
        "governance": 0.20,
        "minimum": 0.10,
    }

    def score(self, fund: Fund) -> ScoredFund:
        """
        Score a fund.

        Args:
            fund: fund snapshot

        Returns:
            ScoredFund: composite score, breakdown, completeness and
            justification
        """
        breakdown = ScoreBreakdown(
            fee_score=self.fee_score(fund),
            liquidity_score=self.liquidity_score(fund),
            governance_score=self.governance_score(fund),
            minimum_score=self.minimum_score(fund),
        )

        total = (
            breakdown.fee_score * self.WEIGHTS["fees"]
            + breakdown.liquidity_score * self.WEIGHTS["liquidity"]
            + breakdown.governance_score * self.WEIGHTS["governance"]
            + breakdown.minimum_score * self.WEIGHTS["minimum"]
        )

        result = ScoredFund(
            fund=fund,
            score=_clamp(_round1(total)),
            breakdown=breakdown,
            is_complete=is_complete(fund),
            why_included=generate_why_included(fund, breakdown),
        )

        logger.debug(f"Score for {fund.id}: {result.score:.1f}")
        return result

    def fee_score(self, fund: Fund) -> float:
        """Fee score: 100 at 0% combined fee, 0 at MAX_COMBINED_FEE"""
        if fund.management_fee is None and fund.performance_fee is None:
            return NEUTRAL_SCORE

        management = fund.management_fee or 0.0
        # e.g. a 20% performance fee -> 10% effective -> 1% after damping
        effective_performance = (fund.performance_fee or 0.0) / 100 * PERFORMANCE_FEE_CAPTURE
        combined = management + effective_performance / PERFORMANCE_FEE_DAMPING

        return _clamp(100 - combined * 100 / MAX_COMBINED_FEE)

    def liquidity_score(self, fund: Fund) -> float:
        """Liquidity score: term points (0-60) plus redemption bonus (0-40)"""
        score = NEUTRAL_SCORE
        if fund.term is not None:
            score = max(0.0, MAX_TERM_POINTS - fund.term * MAX_TERM_POINTS / MAX_LOCKUP_YEARS)

        score += self._frequency_bonus(fund.redemption_frequency)
        return min(100.0, score)

    def _frequency_bonus(self, frequency) -> int:
        frequency = (frequency or "").strip().lower()
        if not frequency:
            return 0
        for keyword, bonus in FREQUENCY_BONUS:
            if keyword in frequency:
                return bonus
        return UNKNOWN_FREQUENCY_BONUS

    def governance_score(self, fund: Fund) -> float:
        """Governance score: disclosure points scaled to 100"""
        points = 0.0

        if fund.cmvm_id:
            points += 2
        if fund.auditor:
            points += 1.5
        if fund.custodian:
            points += 1.5
        if fund.nav_frequency:
            points += 1
        if fund.isin:
            points += 1
        if fund.detailed_description and len(fund.detailed_description) > DETAILED_DESCRIPTION_MIN_LENGTH:
            points += 1
        if fund.faqs:
            points += 0.5
        if fund.documents:
            points += 0.5
        if fund.website_url:
            points += 0.5

        return points * 100 / GOVERNANCE_MAX_POINTS

    def minimum_score(self, fund: Fund) -> float:
        """Minimum investment score: 100 up to STANDARD_MINIMUM, then -10 per €100k"""
        minimum = fund.minimum_investment
        if minimum is None:
            return NEUTRAL_SCORE
        if minimum <= STANDARD_MINIMUM:
            return 100.0

        penalty = (minimum - STANDARD_MINIMUM) * PENALTY_PER_100K / 100_000
        return max(0.0, 100 - penalty)


def format_score_display(score: float) -> str:
    """Display form of a composite score, e.g. '72/100'"""
    return f"{math.floor(score + 0.5)}/100"


_default_engine = ScoringEngine()


def calculate_fund_score(fund: Fund) -> ScoredFund:
    return _default_engine.score(fund)


def fee_score(fund: Fund) -> float:
    return _default_engine.fee_score(fund)


def liquidity_score(fund: Fund) -> float:
    return _default_engine.liquidity_score(fund)


def governance_score(fund: Fund) -> float:
    return _default_engine.governance_score(fund)


def minimum_score(fund: Fund) -> float:
    return _default_engine.minimum_score(fund)
