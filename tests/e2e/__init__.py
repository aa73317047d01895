"""End-to-end tests of CLI-wide behavior such as logging."""
