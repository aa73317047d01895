"""ROSTER command-line interface."""
