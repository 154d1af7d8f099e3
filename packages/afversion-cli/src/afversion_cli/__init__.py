# SPDX-License-Identifier: MIT
"""Command-line front end for the afversion release version rules."""

__version__ = "0.1.0"
