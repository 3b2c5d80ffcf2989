"""
Core domain models and postage formulas.

Independent of any output format: models and pure calculations only.
"""
