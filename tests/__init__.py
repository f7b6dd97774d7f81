"""
Test suite for the numerical methods toolkit

Contains:
- tests/unit/          : Unit tests for individual modules
"""
