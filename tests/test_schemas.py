"""
FundRank tests - Fund schema
"""

import pytest
import sys
sys.path.insert(0, ".")

from fundrank.schemas.fund import Fund
from fundrank.domain.scoring import governance_score
from fundrank.domain.contradictions import detect_fund_contradictions


class TestNullableLists:
    """Repository rows with null lists"""

    def test_null_lists_become_empty(self):
        fund = Fund.model_validate({"id": "x", "tags": None, "documents": None, "faqs": None})

        assert fund.tags == []
        assert fund.documents == []
        assert fund.faqs == []

    def test_null_lists_score_and_scan(self):
        fund = Fund.model_validate({
            "id": "x",
            "tags": None,
            "faqs": None,
            "documents": None,
            "cmvmId": "1234",
            "description": "Daily liquidity.",
            "redemptionTerms": {"frequency": "Quarterly"},
        })

        assert governance_score(fund) == 20
        assert not fund.has_tag("Daily NAV")
        assert detect_fund_contradictions(fund).error_count == 1

    def test_missing_lists_default_to_empty(self):
        fund = Fund(id="x")
        assert fund.tags == []
        assert fund.documents == []


class TestPresenceOnlyFields:
    """Governance lists count by presence, whatever their items"""

    def test_documents_of_any_shape(self):
        fund = Fund.model_validate({
            "id": "x",
            "documents": ["prospectus.pdf", "https://example.com/kid.pdf"],
            "faqs": [{"question": "Q", "answer": "A"}, "Plain text FAQ"],
        })

        assert len(fund.documents) == 2
        assert governance_score(fund) == 10

    def test_fractional_holding_period(self):
        fund = Fund.model_validate({
            "id": "x",
            "redemptionTerms": {"frequency": "Monthly", "minimumHoldingPeriod": 6.5},
        })
        assert fund.minimum_holding_period == 6.5


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
