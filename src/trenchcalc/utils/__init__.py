"""
Utility helpers shared across trenchcalc.
"""
