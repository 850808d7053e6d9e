"""Diagnostics package.

Light-weight printing and self-check tools, runnable through `misri` subcommands.
"""

__all__ = ["pretty_month", "new_years_table", "round_trip"]
