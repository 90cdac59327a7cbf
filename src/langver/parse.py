"""Strict parsing of language version strings.

A language version string is a major and a minor version number separated by
a single full stop::

    <major>.<minor>

Each number must be a non-negative decimal integer made of ASCII digits, no
larger than MAX_VALUE, and without unnecessary leading zeros (``0`` on its
own is fine). No whitespace or any other character is allowed anywhere.
"""

from .exceptions import LanguageVersionFormatError
from .language_version import MAX_VALUE, MIN_VALUE, LanguageVersion

_DIGITS = frozenset("0123456789")
_MAX_DIGITS = len(str(MAX_VALUE))


def _scan_number(source: str, start: int, part: str) -> int:
    """Consume a run of digits for one version part.

    Args:
        source: Full source string.
        start: Offset where the part begins.
        part: "major" or "minor", used in error messages.

    Returns:
        Offset just past the last digit of the part.

    Raises:
        LanguageVersionFormatError: If the part is missing or has leading
            zeros.
    """
    if start >= len(source) or source[start] not in _DIGITS:
        raise LanguageVersionFormatError(
            f"Expected digit at start of {part} version",
            source=source,
            offset=start,
        )

    end = start + 1
    while end < len(source) and source[end] in _DIGITS:
        end += 1

    if source[start] == "0" and end - start > 1:
        raise LanguageVersionFormatError(
            f"{part.capitalize()} version has unnecessary leading zeros",
            source=source,
            offset=start,
        )

    return end


def _to_value(source: str, start: int, end: int, part: str) -> int:
    # Parts never have leading zeros, so a longer run is always out of range.
    # This also keeps int() clear of the interpreter's digit limit.
    value = MAX_VALUE + 1 if end - start > _MAX_DIGITS else int(source[start:end])
    if value > MAX_VALUE:
        raise LanguageVersionFormatError(
            f"{part.capitalize()} version must be between {MIN_VALUE} and "
            f"{MAX_VALUE}",
            source=source,
            offset=start,
        )
    return value


def parse_language_version(source: str) -> LanguageVersion:
    """Parse a language version string.

    Args:
        source: String in the form "major.minor", for example "2.19".

    Returns:
        The parsed LanguageVersion.

    Raises:
        LanguageVersionFormatError: If source is not a valid language version.
            The error's offset points at the character in source where the
            problem was detected.

    Example:
        >>> parse_language_version("2.19")
        LanguageVersion(2, 19)
    """
    if not source:
        raise LanguageVersionFormatError(
            "Language version can't be empty", source=source, offset=0
        )

    major_start = 0
    major_end = _scan_number(source, major_start, "major")

    if major_end >= len(source) or source[major_end] != ".":
        raise LanguageVersionFormatError(
            'Expected "." after major version', source=source, offset=major_end
        )

    minor_start = major_end + 1
    minor_end = _scan_number(source, minor_start, "minor")

    if minor_end < len(source):
        raise LanguageVersionFormatError(
            "Unexpected character after minor version",
            source=source,
            offset=minor_end,
        )

    major = _to_value(source, major_start, major_end, "major")
    minor = _to_value(source, minor_start, minor_end, "minor")
    return LanguageVersion(major, minor)


def try_parse_language_version(source: str) -> LanguageVersion | None:
    """Parse a language version string, returning None if it is invalid.

    Use parse_language_version when the reason for a failure is needed.

    Args:
        source: String in the form "major.minor".

    Returns:
        The parsed LanguageVersion, or None if source is not valid.
    """
    try:
        return parse_language_version(source)
    except LanguageVersionFormatError:
        return None
