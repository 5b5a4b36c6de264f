"""Core enumerations used across the package."""

from __future__ import annotations

from enum import Enum


class Variation(str, Enum):
    """Case variations applied to a property name after a manipulation."""

    NONE = "NONE"
    LOWERCASE = "LOWERCASE"
    UPPERCASE = "UPPERCASE"


class Manipulation(str, Enum):
    """Naming-convention rewrites applied to a property name.

    Values are strings to ease logging and test parametrization.
    """

    NONE = "NONE"
    HYPHEN_TO_UNDERSCORE = "HYPHEN_TO_UNDERSCORE"
    UNDERSCORE_TO_PERIOD = "UNDERSCORE_TO_PERIOD"
    PERIOD_TO_UNDERSCORE = "PERIOD_TO_UNDERSCORE"
    CAMELCASE_TO_UNDERSCORE = "CAMELCASE_TO_UNDERSCORE"
    CAMELCASE_TO_HYPHEN = "CAMELCASE_TO_HYPHEN"
    SEPARATED_TO_CAMELCASE = "SEPARATED_TO_CAMELCASE"
    CASE_INSENSITIVE_SEPARATED_TO_CAMELCASE = "CASE_INSENSITIVE_SEPARATED_TO_CAMELCASE"


__all__ = ["Variation", "Manipulation"]
