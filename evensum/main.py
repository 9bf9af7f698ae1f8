"""Orchestrate one even-sum run.

This module coordinates input resolution, the computation and the console
report. Key responsibilities and design points:
- Resolve the input: an explicit sequence from the caller, otherwise the
    configured numbers (see :func:`config.load_numbers`).
- Compute the total and the even subsequence in one pass (see
    :mod:`evensum.even_filter`).
- Print the report lines to standard output; logs go to standard error so
    the printed report stays clean.

The orchestration deliberately keeps business logic minimal and defers
parsing, computation and formatting to dedicated modules.
"""
from __future__ import annotations

import logging
from typing import Optional, Sequence

from config import APP_NAME, DEFAULT_LOG_LEVEL, load_numbers
from evensum.even_filter import EvenPredicateResult, summarize_evens
from evensum.report import render_report


def run(numbers: Optional[Sequence[int]] = None) -> EvenPredicateResult:
    """Perform one run and return the computed result.

    Sequence:
    1. Configure logging from ``LOG_LEVEL``.
    2. Use ``numbers`` if given, else load the configured input. A malformed
       ``EVEN_SUM_NUMBERS`` raises ``ValueError`` before anything is printed.
    3. Summarize and print ``Total: <sum>`` and ``Even numbers: ...``.
    """
    logging.basicConfig(
        level=getattr(logging, DEFAULT_LOG_LEVEL, logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )
    logger = logging.getLogger(APP_NAME)

    logger.info("Starting even-sum run")
    if numbers is None:
        numbers = load_numbers()
    logger.debug(f"Input: {list(numbers)}")
    logger.info(f"Received {len(numbers)} numbers")

    result = summarize_evens(numbers)
    logger.info(f"Even numbers found: {len(result.evens)}")

    for line in render_report(result):
        print(line)

    logger.info("Run complete")
    return result


def main() -> None:
    """Console-script entry point."""
    run()


if __name__ == "__main__":
    main()
