"""
Completeness gate
Decides whether a fund discloses enough core data to be ranked.
"""

from fundrank.schemas.fund import Fund

# Funds missing more than this many core fields are kept out of shortlists
MAX_MISSING_CORE_FIELDS = 1


def count_missing_core_fields(fund: Fund) -> int:
    """Count missing values among management fee, minimum, category, description."""
    missing = 0
    if fund.management_fee is None:
        missing += 1
    if fund.minimum_investment is None:
        missing += 1
    if not fund.category:
        missing += 1
    if not fund.description:
        missing += 1
    return missing


def is_complete(fund: Fund) -> bool:
    return count_missing_core_fields(fund) <= MAX_MISSING_CORE_FIELDS
