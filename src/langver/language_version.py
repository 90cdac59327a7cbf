"""Models a language version made of a major and minor number."""

from dataclasses import dataclass
from typing import Any, Self

from pydantic import GetCoreSchemaHandler, GetJsonSchemaHandler
from pydantic.json_schema import JsonSchemaValue
from pydantic_core import core_schema

MIN_VALUE = 0
MAX_VALUE = 0x7FFFFFFF

_PATTERN = r"^(0|[1-9][0-9]*)\.(0|[1-9][0-9]*)$"


def _check_bounds(name: str, value: int) -> None:
    assert isinstance(value, int) and not isinstance(value, bool), (
        f"{name} version must be an int, got {type(value).__name__}"
    )
    assert MIN_VALUE <= value <= MAX_VALUE, (
        f"{name} version must be between {MIN_VALUE} and {MAX_VALUE}, got {value}"
    )


@dataclass(frozen=True)
class LanguageVersion:
    """Language version representation.

    Two language versions are equal when both their major and minor numbers
    match. They are ordered by major version first and minor version second.

    Attributes:
        major: Major version number, between MIN_VALUE and MAX_VALUE.
        minor: Minor version number, between MIN_VALUE and MAX_VALUE.
    """

    major: int
    minor: int

    def __post_init__(self: Self) -> None:
        _check_bounds("Major", self.major)
        _check_bounds("Minor", self.minor)

    @classmethod
    def parse(cls, source: str) -> "LanguageVersion":
        """Parse a language version string.

        Args:
            source: Version string in format "major.minor".

        Returns:
            Parsed LanguageVersion instance.

        Raises:
            LanguageVersionFormatError: If the string is not a valid version.
        """
        from .parse import parse_language_version

        return parse_language_version(source)

    def compare(self: Self, other: "LanguageVersion") -> int:
        """Compare this version to another.

        Args:
            other: Version to compare against.

        Returns:
            A negative number if this version is earlier than other, zero if
            they are equal, and a positive number if this version is later.
        """
        if self.major != other.major:
            return -1 if self.major < other.major else 1
        if self.minor != other.minor:
            return -1 if self.minor < other.minor else 1
        return 0

    def __lt__(self: Self, other: object) -> bool:
        if not isinstance(other, LanguageVersion):
            return NotImplemented
        return self.compare(other) < 0

    def __le__(self: Self, other: object) -> bool:
        if not isinstance(other, LanguageVersion):
            return NotImplemented
        return self.compare(other) <= 0

    def __gt__(self: Self, other: object) -> bool:
        if not isinstance(other, LanguageVersion):
            return NotImplemented
        return self.compare(other) > 0

    def __ge__(self: Self, other: object) -> bool:
        if not isinstance(other, LanguageVersion):
            return NotImplemented
        return self.compare(other) >= 0

    def __str__(self: Self) -> str:
        """Return string representation of version.

        Returns:
            Version string in format "major.minor".
        """
        return f"{self.major}.{self.minor}"

    def __repr__(self: Self) -> str:
        """Return detailed string representation.

        Returns:
            Detailed version representation.
        """
        return f"LanguageVersion({self.major}, {self.minor})"

    @classmethod
    def _validate(cls, value: Any) -> "LanguageVersion":
        """Accept a LanguageVersion as is or parse a version string."""
        if isinstance(value, LanguageVersion):
            return value
        if isinstance(value, str):
            return cls.parse(value)
        raise ValueError(
            f"Expected a language version string, got {type(value).__name__}"
        )

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        """Validate from a version string and serialize back to one."""
        return core_schema.no_info_plain_validator_function(
            cls._validate,
            serialization=core_schema.to_string_ser_schema(),
        )

    @classmethod
    def __get_pydantic_json_schema__(
        cls, schema: core_schema.CoreSchema, handler: GetJsonSchemaHandler
    ) -> JsonSchemaValue:
        """Describe the field as a version string."""
        return {"type": "string", "pattern": _PATTERN}
