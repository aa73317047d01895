"""ROSTER

A small person-record toolkit. It validates names and height text
(e.g. ``6'8"``), converts heights to inches, and loads, saves and
updates people through an injected data-access port.
"""

__all__ = ["__version__"]
__version__ = "0.1.0"
