"""
Utility functions module.

Display formatting shared by the calculators and their callers.
"""
