"""Exceptions raised by langver."""

from typing import Self


class LanguageVersionFormatError(ValueError):
    """Raised when a string is not a valid language version.

    Attributes:
        message: Description of what is wrong with the source.
        source: The entire input string that failed to be parsed.
        offset: Zero-based index into ``source`` where the problem was found.
    """

    def __init__(self: Self, message: str, *, source: str, offset: int) -> None:
        """Initialize the error.

        Args:
            message: Description of the problem.
            source: The original, unmodified input string.
            offset: Zero-based index into source where the problem was found.
        """
        super().__init__(message)
        self.message = message
        self.source = source
        self.offset = offset

    def __str__(self: Self) -> str:
        """Return the message with a one-indexed character position."""
        return f"{self.message} (at character {self.offset + 1})"

    def __repr__(self: Self) -> str:
        return (
            f"LanguageVersionFormatError({self.message!r}, "
            f"source={self.source!r}, offset={self.offset})"
        )

    def __reduce__(self: Self) -> tuple[object, ...]:
        return (_rebuild_format_error, (self.message, self.source, self.offset))


def _rebuild_format_error(
    message: str, source: str, offset: int
) -> LanguageVersionFormatError:
    return LanguageVersionFormatError(message, source=source, offset=offset)


class ConfigError(Exception):
    """Raised when the langver configuration cannot be loaded."""
