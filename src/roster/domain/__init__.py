"""Domain layer for ROSTER.

Contains the person value object and the validation errors raised when
inputs break its rules. This package is deliberately technology-agnostic.

Dependency rule: do not import from `roster.adapters` or `roster.entrypoints`.
"""
