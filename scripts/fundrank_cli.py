#!/usr/bin/env python
"""
FundRank CLI

Usage:
    python scripts/fundrank_cli.py shortlist funds.json [limit]   # ranked shortlist
    python scripts/fundrank_cli.py clusters funds.json            # thematic shortlists
    python scripts/fundrank_cli.py contradictions funds.json      # copy review
    python scripts/fundrank_cli.py fees funds.json                # fee statistics
    python scripts/fundrank_cli.py report funds.json [limit]      # full report

funds.json holds a JSON array of fund snapshots (camelCase or snake_case keys).
"""

import sys
from pathlib import Path

# add the project root to the path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from pydantic import TypeAdapter, ValidationError

from fundrank.logging_setup import configure_logging
from fundrank.schemas.fund import Fund
from fundrank.domain.clustering import ClusteringEngine
from fundrank.domain.contradictions import ContradictionEngine, get_contradiction_summary
from fundrank.domain.fee_stats import calculate_fee_statistics
from fundrank.domain.scoring import format_score_display
from fundrank.pipeline import PipelineOrchestrator

_funds_adapter = TypeAdapter(list[Fund])


def load_funds(path: str) -> list[Fund]:
    """Read and validate a JSON array of funds"""
    return _funds_adapter.validate_json(Path(path).read_text(encoding="utf-8"))


def _print_scored(scored_funds, indent: str = "  "):
    for i, sf in enumerate(scored_funds, start=1):
        print(
            f"{indent}{i:>2}. {sf.fund.name or sf.fund.id:<36} "
            f"{format_score_display(sf.score):>7}  {sf.why_included}"
        )


def cmd_shortlist(funds: list[Fund], limit: int = None):
    """Print the ranked shortlist"""
    ranked = ClusteringEngine().get_sorted_best_funds(funds, limit)

    print("=" * 70)
    print(f"Shortlist ({len(ranked)} of {len(funds)} funds)")
    print("=" * 70)
    if not ranked:
        print("  (no complete funds)")
        return
    _print_scored(ranked)


def cmd_clusters(funds: list[Fund]):
    """Print the thematic clusters"""
    clusters = ClusteringEngine().get_best_funds_by_category(funds)

    if not clusters:
        print("No cluster has at least two qualifying funds.")
        return

    for cluster in clusters:
        print("=" * 70)
        print(f"{cluster.title} [{cluster.id}]")
        print(f"  {cluster.description}")
        print("-" * 70)
        _print_scored(cluster.funds)


def cmd_contradictions(funds: list[Fund]):
    """Print copy review findings"""
    results = ContradictionEngine().scan(funds)
    flagged = [r for r in results if r.has_contradictions]

    print("=" * 70)
    print(f"Copy review: {len(flagged)} of {len(results)} funds flagged")
    print("=" * 70)

    for result in flagged:
        print(f"{result.fund_id}: {get_contradiction_summary(result)}")
        for c in result.contradictions:
            print(f"  [{c.severity.upper():<7}] {c.location:<20} {c.message}")


def cmd_fees(funds: list[Fund]):
    """Print fee statistics"""
    stats = calculate_fee_statistics(funds)

    print("=" * 40)
    print("Fee statistics")
    print("=" * 40)
    for name, value in stats.model_dump().items():
        print(f"  {name:<28} {value if value is not None else '-'}")


def cmd_report(funds: list[Fund], limit: int = None):
    """Print the full report summary"""
    report = PipelineOrchestrator(shortlist_limit=limit).run(funds)

    print("=" * 70)
    print(report.summary)
    print("=" * 70)
    _print_scored(report.shortlist)
    if report.insights:
        print("-" * 70)
        for insight in report.insights:
            print(f"  * {insight}")


def parse_limit(value: str) -> int:
    """Shortlist limit from the command line; a non-negative integer"""
    try:
        limit = int(value)
    except ValueError:
        raise ValueError(f"limit must be an integer, got {value!r}")
    if limit < 0:
        raise ValueError(f"limit must be >= 0, got {limit}")
    return limit


def print_help():
    """Print usage"""
    print(__doc__)


def main():
    if len(sys.argv) < 3:
        print_help()
        return

    command = sys.argv[1].lower()
    configure_logging("WARNING")

    try:
        funds = load_funds(sys.argv[2])
    except (OSError, ValidationError) as e:
        print(f"Could not read funds from {sys.argv[2]}: {e}")
        sys.exit(1)

    try:
        limit = parse_limit(sys.argv[3]) if len(sys.argv) > 3 else None
    except ValueError as e:
        print(f"Invalid limit: {e}")
        sys.exit(1)

    if command == "shortlist":
        cmd_shortlist(funds, limit)
    elif command == "clusters":
        cmd_clusters(funds)
    elif command == "contradictions":
        cmd_contradictions(funds)
    elif command == "fees":
        cmd_fees(funds)
    elif command == "report":
        cmd_report(funds, limit)
    else:
        print(f"Unknown command: {command}")
        print_help()


if __name__ == "__main__":
    main()
