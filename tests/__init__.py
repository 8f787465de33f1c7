"""
Test suite for safecalc

Contains:
- tests/unit/          : Unit tests for individual modules and the full pipeline
"""
