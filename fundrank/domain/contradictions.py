"""
Contradiction engine
Rule-based detection of marketing copy that conflicts with structured
fund data.
"""

import re
from dataclasses import dataclass
from typing import Callable, Iterable, Optional

from loguru import logger

from fundrank.schemas.fund import Fund
from fundrank.schemas.results import (
    Contradiction,
    ContradictionLocation,
    ContradictionResult,
    ContradictionSeverity,
)

# Redemption frequencies that satisfy a daily liquidity claim
DAILY_FREQUENCIES = ("daily", "continuous trading")

CLOSED_END_TAG = "Closed-end Fund"
OPEN_ENDED_TAG = "Open Ended"
NO_LOCKUP_TAG = "No Lock-Up"
DAILY_NAV_TAG = "Daily NAV"

TAG_MISMATCH_TEXT = "Tag mismatch"

# Claim patterns per rule id (matched case-insensitively). Rules without an
# entry are tag rules.
TEXT_PATTERNS: dict[str, tuple[str, ...]] = {
    "daily-liquidity": (
        r"\bdaily\s+liquidity\b",
        r"\bdaily\s+redemption",
        r"\bredeem\s+daily\b",
        r"\bwith\s+daily\s+liquidity\b",
    ),
    "weekly-liquidity": (
        r"\bweekly\s+liquidity\b",
        r"\bweekly\s+redemption",
    ),
    "no-lockup": (
        r"\bno\s+lock[-\s]?up\b",
        r"\bno\s+lockup\b",
        r"\binstant\s+liquidity\b",
        r"\bimmediate\s+liquidity\b",
        r"\bno\s+minimum\s+holding\b",
    ),
    "no-management-fee": (
        r"\bno\s+management\s+fee",
        r"\bzero\s+management\s+fee",
        r"\bfee[-\s]?free\b",
        r"\b0%\s+management\b",
    ),
    "no-performance-fee": (
        r"\bno\s+performance\s+fee",
        r"\bzero\s+performance\s+fee",
        r"\b0%\s+performance\b",
    ),
    "open-ended": (
        r"\bopen[-\s]?ended\b",
        r"\bopen\s+ended\s+fund\b",
    ),
    "closed-ended": (
        r"\bclosed[-\s]?end(?:ed)?\s+fund\b",
    ),
}


@dataclass(frozen=True)
class ContradictionRule:
    """
    One contradiction rule.

    `applies_to` is true when the structured data rules out the claim the
    patterns look for. `build_message` returns (structured_value, message).
    """
    id: str
    field: str
    applies_to: Callable[[Fund], bool]
    severity: ContradictionSeverity
    build_message: Callable[[Fund], tuple[str, str]]
    patterns: tuple[re.Pattern, ...] = ()

    @property
    def is_text_rule(self) -> bool:
        return len(self.patterns) > 0

    def first_match(self, text: str) -> Optional[str]:
        """Matched text of the first pattern that hits, if any"""
        for pattern in self.patterns:
            match = pattern.search(text)
            if match:
                return match.group(0)
        return None


def _compile(rule_id: str) -> tuple[re.Pattern, ...]:
    return tuple(re.compile(p, re.IGNORECASE) for p in TEXT_PATTERNS.get(rule_id, ()))


def _frequency(fund: Fund) -> str:
    return (fund.redemption_frequency or "").lower()


def _has_holding_period(fund: Fund) -> bool:
    return (fund.minimum_holding_period or 0) > 0


def _is_positive(value: Optional[float]) -> bool:
    return value is not None and value > 0


def _frequency_or(fund: Fund, fallback: str) -> str:
    return fund.redemption_frequency or fallback


CONTRADICTION_RULES: list[ContradictionRule] = [
    ContradictionRule(
        id="daily-liquidity",
        field="redemptionTerms.frequency",
        applies_to=lambda f: _frequency(f) not in DAILY_FREQUENCIES,
        severity=ContradictionSeverity.ERROR,
        build_message=lambda f: (
            _frequency_or(f, "Not Daily"),
            f'Copy claims "daily liquidity" but redemption frequency is '
            f'"{_frequency_or(f, "not specified")}"',
        ),
        patterns=_compile("daily-liquidity"),
    ),
    ContradictionRule(
        id="weekly-liquidity",
        field="redemptionTerms.frequency",
        applies_to=lambda f: _frequency(f) not in DAILY_FREQUENCIES + ("weekly",),
        severity=ContradictionSeverity.ERROR,
        build_message=lambda f: (
            _frequency_or(f, "Not Weekly"),
            f'Copy claims "weekly liquidity" but redemption frequency is '
            f'"{_frequency_or(f, "not specified")}"',
        ),
        patterns=_compile("weekly-liquidity"),
    ),
    ContradictionRule(
        id="no-lockup",
        field="redemptionTerms.minimumHoldingPeriod",
        applies_to=_has_holding_period,
        severity=ContradictionSeverity.ERROR,
        build_message=lambda f: (
            f"{f.minimum_holding_period:g} months",
            f'Copy claims "no lock-up" but minimum holding period is '
            f"{f.minimum_holding_period:g} months",
        ),
        patterns=_compile("no-lockup"),
    ),
    ContradictionRule(
        id="no-management-fee",
        field="managementFee",
        applies_to=lambda f: _is_positive(f.management_fee),
        severity=ContradictionSeverity.ERROR,
        build_message=lambda f: (
            f"{f.management_fee:g}%",
            f'Copy claims "no management fee" but management fee is {f.management_fee:g}%',
        ),
        patterns=_compile("no-management-fee"),
    ),
    ContradictionRule(
        id="no-performance-fee",
        field="performanceFee",
        applies_to=lambda f: _is_positive(f.performance_fee),
        severity=ContradictionSeverity.ERROR,
        build_message=lambda f: (
            f"{f.performance_fee:g}%",
            f'Copy claims "no performance fee" but performance fee is {f.performance_fee:g}%',
        ),
        patterns=_compile("no-performance-fee"),
    ),
    ContradictionRule(
        id="open-ended",
        field="tags",
        applies_to=lambda f: f.has_tag(CLOSED_END_TAG),
        severity=ContradictionSeverity.ERROR,
        build_message=lambda f: (
            CLOSED_END_TAG,
            'Copy claims "open-ended" but fund is tagged as closed-end',
        ),
        patterns=_compile("open-ended"),
    ),
    ContradictionRule(
        id="closed-ended",
        field="tags",
        applies_to=lambda f: f.has_tag(OPEN_ENDED_TAG),
        severity=ContradictionSeverity.ERROR,
        build_message=lambda f: (
            OPEN_ENDED_TAG,
            'Copy claims "closed-end" but fund is tagged as open-ended',
        ),
        patterns=_compile("closed-ended"),
    ),
    # --- tag rules (no text patterns) ---
    ContradictionRule(
        id="tag-lockup-mismatch",
        field="tags vs redemptionTerms",
        applies_to=lambda f: f.has_tag(NO_LOCKUP_TAG) and _has_holding_period(f),
        severity=ContradictionSeverity.WARNING,
        build_message=lambda f: (
            f"{f.minimum_holding_period:g} months holding period",
            f'Fund has "No Lock-Up" tag but minimum holding period is '
            f"{f.minimum_holding_period:g} months",
        ),
    ),
    ContradictionRule(
        id="daily-nav-tag",
        field="tags vs redemptionTerms",
        applies_to=lambda f: f.has_tag(DAILY_NAV_TAG) and _frequency(f) not in DAILY_FREQUENCIES,
        severity=ContradictionSeverity.WARNING,
        build_message=lambda f: (
            _frequency_or(f, "Not Daily"),
            f'Fund has "Daily NAV" tag but redemption frequency is '
            f'{_frequency_or(f, "not specified")}',
        ),
    ),
]


class ContradictionEngine:
    """
    Contradiction detection engine

    Text rules scan `description` and `detailed_description` separately;
    tag rules compare tags with structured fields once per fund. Findings
    follow rule-table order within each pass.
    """

    def __init__(self, rules: Optional[list[ContradictionRule]] = None):
        self.rules = rules if rules is not None else CONTRADICTION_RULES

    def detect(self, fund: Fund) -> ContradictionResult:
        """
        Detect contradictions in one fund.

        Args:
            fund: fund snapshot

        Returns:
            ContradictionResult: findings in emission order
        """
        contradictions = []
        contradictions.extend(
            self._check_text(fund, fund.description, ContradictionLocation.DESCRIPTION)
        )
        contradictions.extend(
            self._check_text(
                fund, fund.detailed_description, ContradictionLocation.DETAILED_DESCRIPTION
            )
        )
        contradictions.extend(self._check_tags(fund))

        result = ContradictionResult(fund_id=fund.id, contradictions=contradictions)

        if result.has_contradictions:
            logger.debug(
                f"Contradictions for {fund.id}: "
                f"{result.error_count} errors, {result.warning_count} warnings"
            )
        return result

    def scan(self, funds: Iterable[Fund]) -> list[ContradictionResult]:
        """Detect contradictions for each fund, in input order"""
        return [self.detect(fund) for fund in funds]

    def _check_text(
        self, fund: Fund, text: Optional[str], location: ContradictionLocation
    ) -> list[Contradiction]:
        """Text rules against one copy field; at most one finding per rule"""
        if not text:
            return []

        contradictions = []
        for rule in self.rules:
            if not rule.is_text_rule:
                continue
            if not rule.applies_to(fund):
                continue

            matched = rule.first_match(text)
            if matched is None:
                continue

            structured_value, message = rule.build_message(fund)
            contradictions.append(Contradiction(
                field=rule.field,
                structured_value=structured_value,
                conflicting_text=matched,
                location=location,
                severity=rule.severity,
                message=message,
            ))

        return contradictions

    def _check_tags(self, fund: Fund) -> list[Contradiction]:
        """Tag rules against structured fields"""
        contradictions = []
        for rule in self.rules:
            if rule.is_text_rule:
                continue
            if not rule.applies_to(fund):
                continue

            structured_value, message = rule.build_message(fund)
            contradictions.append(Contradiction(
                field=rule.field,
                structured_value=structured_value,
                conflicting_text=TAG_MISMATCH_TEXT,
                location=ContradictionLocation.AUTO_GENERATED,
                severity=rule.severity,
                message=message,
            ))

        return contradictions


def get_contradiction_summary(result: ContradictionResult) -> str:
    """
    Short summary of a scan, e.g. "Found 2 errors and 1 warning".
    """
    if not result.has_contradictions:
        return "No contradictions detected"

    parts = []
    if result.error_count > 0:
        parts.append(f"{result.error_count} error{'s' if result.error_count > 1 else ''}")
    if result.warning_count > 0:
        parts.append(f"{result.warning_count} warning{'s' if result.warning_count > 1 else ''}")

    return f"Found {' and '.join(parts)}"


_default_engine = ContradictionEngine()


def detect_fund_contradictions(fund: Fund) -> ContradictionResult:
    return _default_engine.detect(fund)


def scan_funds(funds: Iterable[Fund]) -> list[ContradictionResult]:
    return _default_engine.scan(funds)
