"""ConjunctionMatcher: logical AND over any number of matchers.

Differs from hamcrest's ``all_of`` and ``both``:

- It does not short-circuit, so every failing component is reported.
- It does not wrap its description in parentheses.
- It accepts an optional label that prefixes the description.
- It does not repeat component descriptions when describing a mismatch.

Instances are immutable. ``and_`` returns a new matcher and leaves the
receiver untouched, so a conjunction can be extended from several places
without the branches seeing each other's components.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from hamcrest.core.base_matcher import BaseMatcher
from hamcrest.core.string_description import StringDescription

from hamcrest_compose._errors import (
    EmptyConjunctionError,
    MissingArgumentError,
    require_matcher,
    require_optional_str,
)

if TYPE_CHECKING:
    from hamcrest.core.description import Description
    from hamcrest.core.matcher import Matcher

SEPARATOR = " and "


@dataclass(frozen=True, slots=True)
class ConjunctionMatcher[T](BaseMatcher[T]):
    """Matches when every component matcher matches.

    >>> from hamcrest import contains_string, starts_with
    >>> m = ConjunctionMatcher((starts_with("h"),)).and_(contains_string("a"))
    >>> m.matches("ham")
    True

    Raises:
        EmptyConjunctionError: If ``matchers`` is empty.
        MissingArgumentError: If ``matchers`` or any component is None.
        NotAStringError: If ``description`` is neither None nor a string.
        NotAMatcherError: If any component is not a hamcrest Matcher.
    """

    matchers: tuple[Matcher[T], ...]
    description: str | None = None

    def __post_init__(self) -> None:
        if self.matchers is None:
            raise MissingArgumentError("matchers")
        require_optional_str(self.description, "description")
        matchers = tuple(self.matchers)
        if not matchers:
            raise EmptyConjunctionError
        for matcher in matchers:
            require_matcher(matcher, "matcher")
        object.__setattr__(self, "matchers", matchers)

    def and_(self, matcher: Matcher[T]) -> ConjunctionMatcher[T]:
        """Return a new conjunction with ``matcher`` appended.

        The receiver is not modified.
        """
        require_matcher(matcher, "matcher")
        return ConjunctionMatcher(self.matchers + (matcher,), self.description)

    def __and__(self, matcher: Matcher[T]) -> ConjunctionMatcher[T]:
        return self.and_(matcher)

    # ── Matcher ───────────────────────────────────────────────────────────

    def matches(self, item: Any, mismatch_description: Description | None = None) -> bool:
        matched = True
        for matcher in self.matchers:
            if mismatch_description is None:
                if not matcher.matches(item):
                    matched = False
                continue
            # Each component is evaluated once; its mismatch text is collected
            # while matching and only kept when it fails.
            component_mismatch = StringDescription()
            if matcher.matches(item, component_mismatch):
                continue
            if not matched:
                mismatch_description.append_text(SEPARATOR)
            mismatch_description.append_text(str(component_mismatch))
            matched = False
        return matched

    def _matches(self, item: Any) -> bool:
        return self.matches(item)

    def describe_mismatch(self, item: Any, mismatch_description: Description) -> None:
        self.matches(item, mismatch_description)

    def describe_to(self, description: Description) -> None:
        start = f"{self.description} " if self.description is not None else ""
        description.append_list(start, SEPARATOR, "", self.matchers)
