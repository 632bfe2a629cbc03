"""
Test suite for numkit

Contains:
- tests/unit/          : Unit tests for individual modules
"""
