"""
Test suite for the invoicing money core

Contains:
- tests/unit/          : Unit tests for individual modules
"""
