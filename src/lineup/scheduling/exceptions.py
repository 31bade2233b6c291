"""
Scheduling validation exceptions.

Configuration mistakes in the calling layer fail fast with these. Data
anomalies in event records never raise; they are reported as diagnostics.
"""


class ScheduleValidationError(Exception):
    """Base exception for all scheduling validation errors."""

    def __init__(self, message: str, violations: list[str] | None = None):
        """
        Initialize a scheduling validation error.

        Args:
            message: Human-readable error message
            violations: List of specific violation descriptions
        """
        super().__init__(message)
        self.message = message
        self.violations = violations or []

    def __str__(self) -> str:
        """Return formatted error message with violations."""
        if self.violations:
            violations_text = "\n  - ".join(self.violations)
            return f"{self.message}\nViolations:\n  - {violations_text}"
        return self.message


class ConfigurationError(ScheduleValidationError):
    """Raised when a projection is invoked with out-of-range configuration."""

    def __init__(
        self,
        message: str,
        parameter: str | None = None,
        violations: list[str] | None = None,
    ):
        super().__init__(message, violations)
        self.parameter = parameter
