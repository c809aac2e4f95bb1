"""
Fee statistics
Fee disclosure filters, management fee buckets and summary statistics.
"""

import math
from enum import Enum
from typing import Iterable, Optional

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from fundrank.schemas.fund import Fund


class ManagementFeeRange(str, Enum):
    """Management fee bucket"""
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    VERY_HIGH = "very-high"


# Half-open [low, high) bounds in percent
MANAGEMENT_FEE_RANGES: dict[ManagementFeeRange, tuple[float, float]] = {
    ManagementFeeRange.LOW: (0, 1),
    ManagementFeeRange.MEDIUM: (1, 1.5),
    ManagementFeeRange.HIGH: (1.5, 2),
    ManagementFeeRange.VERY_HIGH: (2, math.inf),
}

MANAGEMENT_FEE_RANGE_LABELS: dict[ManagementFeeRange, str] = {
    ManagementFeeRange.LOW: "Under 1%",
    ManagementFeeRange.MEDIUM: "1% – 1.5%",
    ManagementFeeRange.HIGH: "1.5% – 2%",
    ManagementFeeRange.VERY_HIGH: "Over 2%",
}


class FeeStatistics(BaseModel):
    """Fee disclosure summary over a set of funds"""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    avg_management_fee: Optional[float] = None
    median_management_fee: Optional[float] = None
    min_management_fee: Optional[float] = None
    max_management_fee: Optional[float] = None
    funds_with_management_fee: int = 0
    funds_with_performance_fee: int = 0
    funds_with_subscription_fee: int = 0
    funds_with_redemption_fee: int = 0
    total_funds: int = 0


# === Disclosure filters ===

def with_disclosed_management_fee(funds: Iterable[Fund]) -> list[Fund]:
    return [f for f in funds if f.management_fee is not None]


def with_disclosed_performance_fee(funds: Iterable[Fund]) -> list[Fund]:
    return [f for f in funds if f.performance_fee is not None]


def with_subscription_fee(funds: Iterable[Fund]) -> list[Fund]:
    """Funds charging a non-zero subscription fee"""
    return [f for f in funds if f.subscription_fee is not None and f.subscription_fee > 0]


def with_redemption_fee(funds: Iterable[Fund]) -> list[Fund]:
    """Funds charging a non-zero redemption fee"""
    return [f for f in funds if f.redemption_fee is not None and f.redemption_fee > 0]


# === Buckets ===

def management_fee_range(fee: float) -> ManagementFeeRange:
    for fee_range, (low, high) in MANAGEMENT_FEE_RANGES.items():
        if low <= fee < high:
            return fee_range
    # negative fees are not validated upstream
    return ManagementFeeRange.LOW


def filter_by_management_fee_range(
    funds: Iterable[Fund], fee_range: ManagementFeeRange
) -> list[Fund]:
    low, high = MANAGEMENT_FEE_RANGES[fee_range]
    return [
        f for f in funds
        if f.management_fee is not None and low <= f.management_fee < high
    ]


def get_management_fee_range_label(fee_range: ManagementFeeRange) -> str:
    return MANAGEMENT_FEE_RANGE_LABELS[ManagementFeeRange(fee_range)]


# === Statistics ===

def _round2(value: float) -> float:
    return math.floor(value * 100 + 0.5) / 100


def calculate_fee_statistics(funds: Iterable[Fund]) -> FeeStatistics:
    """
    Summarize fee disclosure.

    Average and median are rounded to two decimals; min and max are
    reported as disclosed.
    """
    funds = list(funds)
    fees = sorted(f.management_fee for f in with_disclosed_management_fee(funds))

    avg = median = None
    if fees:
        avg = _round2(sum(fees) / len(fees))
        middle = len(fees) // 2
        if len(fees) % 2 == 0:
            median = _round2((fees[middle - 1] + fees[middle]) / 2)
        else:
            median = _round2(fees[middle])

    return FeeStatistics(
        avg_management_fee=avg,
        median_management_fee=median,
        min_management_fee=fees[0] if fees else None,
        max_management_fee=fees[-1] if fees else None,
        funds_with_management_fee=len(fees),
        funds_with_performance_fee=len(with_disclosed_performance_fee(funds)),
        funds_with_subscription_fee=len(with_subscription_fee(funds)),
        funds_with_redemption_fee=len(with_redemption_fee(funds)),
        total_funds=len(funds),
    )
