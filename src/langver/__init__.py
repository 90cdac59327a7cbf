"""langver - strict parsing and comparison of language versions.

A language version is a ``major.minor`` pair identifying a set of supported
syntax and semantics, for example ``2.19``.
"""

from ._version import __version__
from .config import LangverConfig, load_config
from .exceptions import ConfigError, LanguageVersionFormatError
from .language_version import MAX_VALUE, MIN_VALUE, LanguageVersion
from .parse import parse_language_version, try_parse_language_version

__all__ = [
    "MAX_VALUE",
    "MIN_VALUE",
    "ConfigError",
    "LangverConfig",
    "LanguageVersion",
    "LanguageVersionFormatError",
    "__version__",
    "load_config",
    "parse_language_version",
    "try_parse_language_version",
]
