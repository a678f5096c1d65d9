"""
Error types for DelvForge configuration loading, color handling and builds.
"""


class DelvForgeError(Exception):
    """Base exception for all DelvForge errors."""

    def __init__(self, message: str, source: str | None = None):
        self.message = message
        self.source = source
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format error message with its source if available."""
        if self.source:
            return f"{self.source}: {self.message}"
        return self.message


class ConfigurationError(DelvForgeError):
    """
    Raised when a configuration cannot be turned into Options.

    Examples:
    - Unreadable or unparseable config file
    - Token table of the wrong shape
    - Plugin reference that cannot be imported
    """

    pass


class MalformedColorError(DelvForgeError):
    """
    Raised when a color value cannot be parsed.

    Never escapes a generation pass: the color variant expander catches it
    and falls back to a color-mix() expression.
    """

    pass


class BuildError(DelvForgeError):
    """
    Raised when a stylesheet cannot be written.

    Examples:
    - Output directory not writable
    - Disk full
    """

    pass
