"""Financial calculator: interest, amortization, present and future value, with an interactive menu."""

__version__ = "1.0.0"
__all__ = ["formulas", "cli"]