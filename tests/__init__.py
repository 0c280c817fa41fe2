"""
Test suite for sdn-calendars

Contains:
- tests/unit/          : Unit tests for individual modules
"""
