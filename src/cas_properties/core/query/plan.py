from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Union

from cas_properties.core.errors import PatternSyntaxError
from .patterns import PropertyPattern, compile_pattern


@dataclass(frozen=True)
class MatchQuery:
    """A validated search: compiled pattern plus match mode.

    Construction fails with PatternSyntaxError on an invalid pattern, whether
    it goes through `MatchQuery.build` or passes pattern text directly.
    """

    pattern: Union[PropertyPattern, str]
    strict: bool = False

    def __post_init__(self) -> None:
        if isinstance(self.pattern, str):
            object.__setattr__(self, "pattern", compile_pattern(self.pattern))
        elif not isinstance(self.pattern, PropertyPattern):
            raise PatternSyntaxError(
                f"Pattern must be text or a PropertyPattern, not {type(self.pattern).__name__}",
                pattern=None,
            )

    @classmethod
    def build(
        cls, text: Optional[str], *, strict: bool = False, ignore_case: bool = False
    ) -> "MatchQuery":
        return cls(pattern=compile_pattern(text, ignore_case=ignore_case), strict=bool(strict))
