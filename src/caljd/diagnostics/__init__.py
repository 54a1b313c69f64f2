"""Diagnostics package.

- round_trip: random integer and fractional round trips per calendar
- epsilon_residuals: encoding residuals with and without the epsilon nudge (plot needs matplotlib)
"""

__all__ = ["round_trip", "epsilon_residuals"]
