"""
Test suite for the refresh-rate core

Contains:
- tests/unit/          : Unit tests for individual modules
"""
