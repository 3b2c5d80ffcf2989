"""
Test suite for postal-accounting

Contains:
- tests/unit/          : Unit tests for models, formulas, box and report
"""
