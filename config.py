"""Central configuration for the even-sums app.

This module centralizes configuration constants and the loading of the input
numbers so the driver and tests read them from one place.

Configuration notes
- ``EVEN_SUM_NUMBERS`` replaces the default classroom input. Integers may be
    separated by commas, whitespace, or both (``"1, 2 3,-4"``).
- ``LOG_LEVEL`` controls the root logging level configured by the driver.
"""
from __future__ import annotations

import os
from dataclasses import dataclass
from typing import List, Optional, Sequence

from evensum.number_parser import parse_numbers


# App constants
APP_NAME = "even-sums"

# Input used when no override is supplied
DEFAULT_NUMBERS: Sequence[int] = tuple(range(1, 11))

# Env var holding a replacement input sequence
NUMBERS_ENV_VAR = "EVEN_SUM_NUMBERS"


# Basic logging setup; main will configure handlers/level.
DEFAULT_LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO").upper()


@dataclass
class ReportLabels:
    total: str = "Total"
    evens: str = "Even numbers"


def load_numbers(environ: Optional[dict] = None) -> List[int]:
    """Return the configured input numbers.

    Reads ``EVEN_SUM_NUMBERS`` from ``environ`` (``os.environ`` by default)
    and falls back to :data:`DEFAULT_NUMBERS` when it is unset or blank.
    """
    environ = os.environ if environ is None else environ
    raw = environ.get(NUMBERS_ENV_VAR, "")
    if not raw.strip():
        return list(DEFAULT_NUMBERS)
    try:
        return parse_numbers(raw)
    except ValueError as e:
        raise ValueError(
            f"Invalid {NUMBERS_ENV_VAR} value {raw!r}: {e}. "
            "Provide integers separated by commas or spaces, e.g. '1, 2, 3'."
        ) from e
