"""
Core domain models, numerical safeguards, and payload contracts.

This module contains the building blocks shared by every numerical method:
epsilon guards, the Point value object, the NumericResult failure union and
the JSON Schema contracts used by the presentation layer.
"""
