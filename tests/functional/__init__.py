"""Functional (black-box) tests of the ``roster`` CLI."""
