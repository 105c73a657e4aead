"""
Travel bucket list planner.

This package keeps a catalogue of aspirational trips, places them on a
multi-year timeline against an annual leave budget, suggests trips to fill
a year, and tracks savings and achievements against the plan.
"""

__version__ = "0.1.0"
