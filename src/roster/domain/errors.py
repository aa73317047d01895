"""Domain-layer error definitions."""

# ============================================================================
#                           General domain errors
# ============================================================================


class DomainError(Exception):
    """Base class for domain-layer errors."""


# ============================================================================
#                           Input validation errors
# ============================================================================


class InvalidArgumentError(DomainError, ValueError):
    """Raised when a named input violates a validation rule."""

    def __init__(self, param_name: str, value: object, reason: str) -> None:
        super().__init__(f"Invalid {param_name} ({value!r}): {reason}")
        self.param_name = param_name
        self.value = value
        self.reason = reason
