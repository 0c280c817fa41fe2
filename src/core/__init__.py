"""
Core domain types, integer primitives, and export contracts.

This package holds the calendar-independent building blocks: calendar
identifiers, the date triple, platform integer limits, metadata tables,
and JSON Schema validation of exported records.
"""
