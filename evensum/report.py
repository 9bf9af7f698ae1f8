"""Console rendering of an even-number summary."""
from __future__ import annotations

from typing import Iterable, List, Optional

from config import ReportLabels
from evensum.even_filter import EvenPredicateResult


def format_total(total: int, labels: Optional[ReportLabels] = None) -> str:
    labels = labels or ReportLabels()
    return f"{labels.total}: {total}"


def format_evens(evens: Iterable[int], labels: Optional[ReportLabels] = None) -> str:
    """Return ``"Even numbers: 2 4 6"``; just the label and colon when empty."""
    labels = labels or ReportLabels()
    values = " ".join(str(n) for n in evens)
    if not values:
        return f"{labels.evens}:"
    return f"{labels.evens}: {values}"


def render_report(result: EvenPredicateResult, labels: Optional[ReportLabels] = None) -> List[str]:
    """Return the total line followed by the even-numbers line."""
    return [
        format_total(result.total, labels),
        format_evens(result.evens, labels),
    ]
