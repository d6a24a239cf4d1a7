"""Service for aggregating scores across stored results."""

from __future__ import annotations

from dataclasses import dataclass, field

from quiz_maker.constants.quiz_constants import DISTRIBUTION_BANDS, SAME_PERFORMANCE_TOLERANCE
from quiz_maker.core.result import Result


@dataclass(slots=True)
class ResultStatistics:
    """Aggregate figures computed from a list of results."""

    total_attempts: int = 0
    passed: int = 0
    failed: int = 0
    pass_rate: float = 0.0
    average_percentage: float = 0.0
    highest_percentage: float = 0.0
    lowest_percentage: float = 0.0
    distribution: dict[str, int] = field(default_factory=dict)


@dataclass(slots=True)
class ResultComparison:
    first: Result
    second: Result
    difference: float  # second minus first, in percentage points

    def is_same(self) -> bool:
        return abs(self.difference) < SAME_PERFORMANCE_TOLERANCE

    def better(self) -> Result | None:
        if self.is_same():
            return None
        return self.second if self.difference > 0 else self.first


def distribution_label(percentage: float) -> str:
    for upper_bound, label in DISTRIBUTION_BANDS:
        if percentage <= upper_bound:
            return label
    return DISTRIBUTION_BANDS[-1][1]


def summarize(results: list[Result]) -> ResultStatistics:
    """Compute pass rate, score extremes and the score distribution."""
    distribution = {label: 0 for _, label in DISTRIBUTION_BANDS}
    if not results:
        return ResultStatistics(distribution=distribution)

    percentages = [result.percentage for result in results]
    passed = sum(1 for result in results if result.passed)
    for percentage in percentages:
        distribution[distribution_label(percentage)] += 1

    return ResultStatistics(
        total_attempts=len(results),
        passed=passed,
        failed=len(results) - passed,
        pass_rate=passed * 100 / len(results),
        average_percentage=sum(percentages) / len(results),
        highest_percentage=max(percentages),
        lowest_percentage=min(percentages),
        distribution=distribution,
    )


def compare(first: Result, second: Result) -> ResultComparison:
    return ResultComparison(first=first, second=second, difference=second.percentage - first.percentage)


def leaderboard(results: list[Result], limit: int = 3) -> list[Result]:
    """Return the top ``limit`` results by percentage, faster attempts first on ties."""
    ranked = sorted(results, key=lambda r: (-r.percentage, r.time_taken))
    return ranked[:limit]
