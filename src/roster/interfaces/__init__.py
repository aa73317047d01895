"""Interfaces (application boundary) for ROSTER.

Defines framework-free contracts shared by the service layer and adapters:
the data-access port and its error hierarchy.

Dependency rule: do not import from adapters, bootstrap, or entrypoints. It may
be imported by `roster.service_layer`, `roster.adapters`, and `roster.bootstrap`.
"""
