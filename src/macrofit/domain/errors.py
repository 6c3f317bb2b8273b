"""Domain exceptions."""


class MacroFitError(Exception):
    """Base exception for MacroFit errors."""


class InvalidProfileError(MacroFitError):
    """Raised when profile biometrics fall outside plausible human ranges."""

    def __init__(self, fields: list[str]) -> None:
        super().__init__(f"Invalid profile fields: {', '.join(fields)}")
        self.fields = fields
