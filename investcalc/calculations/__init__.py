"""
Investment Calculation Engine

Core calculation modules for rental property investment analysis.
The engine and break-even solvers are pure functions without shared state.
"""

from investcalc.calculations import engine, breakeven, sanitize, scoring, scenarios, presets

__all__ = ["engine", "breakeven", "sanitize", "scoring", "scenarios", "presets"]
