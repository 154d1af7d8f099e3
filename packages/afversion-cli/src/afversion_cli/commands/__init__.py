# SPDX-License-Identifier: MIT
"""CLI command implementations."""

from . import parse, increment, compare, validate, info

__all__ = ["parse", "increment", "compare", "validate", "info"]
