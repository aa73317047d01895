"""Entrypoints (inbound adapters) for ROSTER.

Expose the application to the outside world through the CLI. Parse and
validate inputs, call the service layer, and present results.

Dependency rule: may import `roster.service_layer` and `roster.bootstrap`;
avoid importing `roster.adapters` directly.
"""
