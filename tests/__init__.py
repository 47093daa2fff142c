"""Test suite for formfields.

This package contains tests for:
- Input masks and the date/time adapter
- Error message composition and configuration errors
- Every field type (string presets, dates, numbers, selections)
- ListField and Form aggregation
- Integration scenarios (fill, validate, merge server errors, submit)
"""
