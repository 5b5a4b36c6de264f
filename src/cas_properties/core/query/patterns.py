from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional
import re

from cas_properties.core.errors import PatternSyntaxError


@dataclass(frozen=True)
class PropertyPattern:
    """A compiled search pattern.

    The text is compiled on construction, so an invalid expression raises
    PatternSyntaxError here and never at match time. Equality is by pattern
    text and flags so that two queries built from the same input compare
    equal.
    """

    text: str
    ignore_case: bool = False
    compiled: re.Pattern[str] = field(init=False, compare=False, repr=False)

    def __post_init__(self) -> None:
        if self.text is None:
            raise PatternSyntaxError("Pattern cannot be None", pattern=None)
        flags = re.IGNORECASE if self.ignore_case else 0
        try:
            compiled = re.compile(self.text, flags)
        except re.error as e:
            raise PatternSyntaxError(
                f"Invalid pattern {self.text!r}: {e}", pattern=self.text, position=e.pos
            ) from e
        object.__setattr__(self, "compiled", compiled)

    def matches(self, candidate: str) -> bool:
        """Anchored match: the pattern must cover the whole candidate."""
        return self.compiled.fullmatch(candidate) is not None

    def search(self, candidate: str) -> bool:
        """Unanchored match: the pattern may occur anywhere in the candidate."""
        return self.compiled.search(candidate) is not None


def compile_pattern(text: Optional[str], *, ignore_case: bool = False) -> PropertyPattern:
    """Compile a regular expression into a PropertyPattern.

    Matching is case-sensitive unless `ignore_case` is set or the pattern
    carries its own inline flag such as ``(?i)``.

    Raises:
        PatternSyntaxError: If `text` is None or not a valid expression.
    """
    return PropertyPattern(text=text, ignore_case=ignore_case)  # type: ignore[arg-type]


def matches(pattern: PropertyPattern, candidate: str, strict: bool) -> bool:
    """Strict mode requires a full match; otherwise a search hit is enough."""
    if strict:
        return pattern.matches(candidate)
    return pattern.search(candidate)
