"""
FundRank tests - Scoring Engine
"""

import pytest
import sys
sys.path.insert(0, ".")

from fundrank.domain.scoring import (
    ScoringEngine,
    calculate_fund_score,
    fee_score,
    liquidity_score,
    governance_score,
    minimum_score,
    format_score_display,
)
from fundrank.domain.completeness import count_missing_core_fields, is_complete
from fundrank.domain.explanations import generate_why_included
from fundrank.schemas.fund import Fund
from fundrank.schemas.results import ScoreBreakdown


def make_fund(**fields) -> Fund:
    return Fund(id=fields.pop("id", "test_fund"), **fields)


class TestFeeScore:
    """Fee score"""

    def test_zero_fees(self):
        """0% management and performance fee scores 100"""
        assert fee_score(make_fund(management_fee=0, performance_fee=0)) == 100

    def test_fee_at_ceiling(self):
        """5% combined fee scores 0"""
        assert fee_score(make_fund(management_fee=5, performance_fee=0)) == 0

    def test_unknown_fees_are_neutral(self):
        """No fee data -> 50"""
        assert fee_score(make_fund()) == 50

    def test_performance_fee_is_scaled_down(self):
        """20% performance fee counts as 1% combined"""
        assert fee_score(make_fund(performance_fee=20)) == pytest.approx(80)
        assert fee_score(make_fund(management_fee=1, performance_fee=20)) == pytest.approx(60)

    def test_one_percent_management_fee(self):
        assert fee_score(make_fund(management_fee=1)) == 80

    def test_clamped(self):
        """Scores stay in [0, 100] even for out-of-range fees"""
        assert fee_score(make_fund(management_fee=12)) == 0
        assert fee_score(make_fund(management_fee=-1)) == 100


class TestLiquidityScore:
    """Liquidity score"""

    def test_unknown_term_and_frequency(self):
        assert liquidity_score(make_fund()) == 50

    def test_zero_term_daily(self):
        fund = make_fund(term=0, redemption_terms={"frequency": "Daily"})
        assert liquidity_score(fund) == 100

    def test_long_term_earns_no_term_points(self):
        assert liquidity_score(make_fund(term=10, redemption_terms={"frequency": "Quarterly"})) == 20
        assert liquidity_score(make_fund(term=15, redemption_terms={"frequency": "Monthly"})) == 30

    def test_term_is_linear(self):
        fund = make_fund(term=3, redemption_terms={"frequency": "End of term"})
        assert liquidity_score(fund) == pytest.approx(42)

    def test_frequency_buckets(self):
        """Frequency bonus on top of the neutral base"""
        expected = {
            "Daily": 90,
            "weekly": 85,
            "Monthly": 80,
            "Quarterly": 70,
            "Annual": 60,
            "Yearly": 60,
            "End of term": 50,
            "": 50,
            "On request": 65,
        }
        for frequency, score in expected.items():
            fund = make_fund(redemption_terms={"frequency": frequency})
            assert liquidity_score(fund) == score, frequency

    def test_capped_at_100(self):
        fund = make_fund(term=-5, redemption_terms={"frequency": "Daily"})
        assert liquidity_score(fund) == 100


class TestGovernanceScore:
    """Governance disclosure score"""

    def test_no_disclosure(self):
        assert governance_score(make_fund()) == 0

    def test_cmvm_only(self):
        assert governance_score(make_fund(cmvm_id="1234")) == 20

    def test_full_disclosure(self):
        fund = make_fund(
            cmvm_id="1234",
            auditor="KPMG",
            custodian="Banco BPI",
            nav_frequency="Monthly",
            isin="PTXXXX000001",
            detailed_description="x" * 201,
            faqs=[{"question": "Q", "answer": "A"}],
            documents=[{"title": "Prospectus"}],
            website_url="https://example.com",
        )
        # signals add up to 9.5 of the 10-point scale
        assert governance_score(fund) == 95

    def test_short_detailed_description_earns_nothing(self):
        assert governance_score(make_fund(detailed_description="x" * 200)) == 0
        assert governance_score(make_fund(detailed_description="x" * 201)) == 10

    def test_empty_lists_earn_nothing(self):
        assert governance_score(make_fund(faqs=[], documents=[])) == 0


class TestMinimumScore:
    """Minimum investment score"""

    def test_unknown(self):
        assert minimum_score(make_fund()) == 50

    def test_at_threshold(self):
        assert minimum_score(make_fund(minimum_investment=500_000)) == 100
        assert minimum_score(make_fund(minimum_investment=100_000)) == 100

    def test_above_threshold(self):
        assert minimum_score(make_fund(minimum_investment=600_000)) == 90
        assert minimum_score(make_fund(minimum_investment=1_000_000)) == 50

    def test_floored_at_zero(self):
        assert minimum_score(make_fund(minimum_investment=2_000_000)) == 0


class TestCalculateFundScore:
    """Composite score"""

    def setup_method(self):
        self.engine = ScoringEngine()

    def test_weights_sum_to_one(self):
        assert sum(ScoringEngine.WEIGHTS.values()) == pytest.approx(1.0)

    def test_neutral_fund(self):
        """Sparse fund gets neutral contributions instead of failing"""
        result = self.engine.score(make_fund())

        assert result.breakdown.fee_score == 50
        assert result.breakdown.liquidity_score == 50
        assert result.breakdown.governance_score == 0
        assert result.breakdown.minimum_score == 50
        assert result.score == 40.0
        assert result.is_complete is False

    def test_rounded_to_one_decimal(self):
        fund = make_fund(
            management_fee=1.3,
            term=7,
            redemption_terms={"frequency": "Quarterly"},
            minimum_investment=550_000,
        )
        result = self.engine.score(fund)
        assert result.score == round(result.score, 1)

    def test_scores_in_range(self):
        funds = [
            make_fund(),
            make_fund(management_fee=0, performance_fee=0, term=0,
                      redemption_terms={"frequency": "Daily"}, minimum_investment=0,
                      cmvm_id="1", auditor="a", custodian="c"),
            make_fund(management_fee=9, performance_fee=40, term=20,
                      minimum_investment=5_000_000),
            make_fund(management_fee=-3, term=-2, minimum_investment=-1),
        ]
        for fund in funds:
            result = calculate_fund_score(fund)
            assert 0 <= result.score <= 100
            for value in result.breakdown.model_dump().values():
                assert 0 <= value <= 100

    def test_idempotent(self):
        """Same fund, same output"""
        fund = make_fund(
            management_fee=1.75,
            performance_fee=15,
            term=6,
            redemption_terms={"frequency": "Annual", "minimum_holding_period": 12},
            cmvm_id="1234",
            category="Debt",
            description="Senior lending",
        )
        first = calculate_fund_score(fund)
        second = calculate_fund_score(fund)

        assert first.model_dump() == second.model_dump()

    def test_fund_is_not_mutated(self):
        fund = make_fund(management_fee=1.0, category="Debt")
        before = fund.model_dump()
        calculate_fund_score(fund)
        assert fund.model_dump() == before

    def test_format_score_display(self):
        assert format_score_display(72.4) == "72/100"
        assert format_score_display(72.5) == "73/100"
        assert format_score_display(0) == "0/100"


class TestCompletenessGate:
    """Completeness gate"""

    def test_all_core_fields(self):
        fund = make_fund(
            management_fee=1.5, minimum_investment=500_000,
            category="Debt", description="Lending",
        )
        assert count_missing_core_fields(fund) == 0
        assert is_complete(fund)

    def test_one_missing_is_complete(self):
        fund = make_fund(management_fee=1.5, category="Debt", description="Lending")
        assert count_missing_core_fields(fund) == 1
        assert is_complete(fund)

    def test_two_missing_is_incomplete(self):
        fund = make_fund(management_fee=1.5, category="Debt")
        assert not is_complete(fund)

    def test_empty_strings_count_as_missing(self):
        fund = make_fund(management_fee=1.5, minimum_investment=500_000, category="", description="")
        assert count_missing_core_fields(fund) == 2
        assert not is_complete(fund)

    def test_zero_fee_is_disclosed(self):
        fund = make_fund(management_fee=0, minimum_investment=0, category="Debt")
        assert is_complete(fund)


class TestWhyIncluded:
    """Explanation generator"""

    def _breakdown(self, fee=50, liquidity=50, governance=0, minimum=50):
        return ScoreBreakdown(
            fee_score=fee,
            liquidity_score=liquidity,
            governance_score=governance,
            minimum_score=minimum,
        )

    def test_first_two_reasons(self):
        fund = make_fund(cmvm_id="1234", is_verified=True)
        text = generate_why_included(fund, self._breakdown(fee=90, liquidity=85, governance=90))
        assert text == "Competitive fee structure. Flexible liquidity terms."

    def test_flags_and_category(self):
        fund = make_fund(cmvm_id="1234", is_verified=True, category="Debt")
        assert generate_why_included(fund, self._breakdown()) == "Verified fund. CMVM regulated."

    def test_category_keywords(self):
        fund = make_fund(category="Private Debt")
        assert generate_why_included(fund, self._breakdown()) == "Income-focused strategy."
        fund = make_fund(category="Venture Capital")
        assert generate_why_included(fund, self._breakdown()) == "Growth-oriented exposure."

    def test_single_reason(self):
        text = generate_why_included(make_fund(), self._breakdown(governance=80))
        assert text == "Strong governance disclosure."

    def test_balanced_fallback(self):
        text = generate_why_included(make_fund(), self._breakdown(fee=75, liquidity=70))
        assert text == "Balanced fee and liquidity profile."

    def test_generic_fallback(self):
        text = generate_why_included(make_fund(), self._breakdown(fee=70, liquidity=70))
        assert text == "Strong overall profile."

    def test_score_carries_explanation(self):
        fund = make_fund(management_fee=0, performance_fee=0)
        assert calculate_fund_score(fund).why_included == "Competitive fee structure."


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
