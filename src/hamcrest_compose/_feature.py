"""HasFeatureMatcher: match a feature extracted from the candidate.

The feature function is any callable taking the candidate. It is called on
every ``matches``/``describe_mismatch`` call, once per call; nothing is cached.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from hamcrest.core.base_matcher import BaseMatcher
from hamcrest.core.string_description import StringDescription

from hamcrest_compose._errors import require_callable, require_matcher, require_optional_str

if TYPE_CHECKING:
    from collections.abc import Callable

    from hamcrest.core.description import Description
    from hamcrest.core.matcher import Matcher

# Name used when a feature function carries no usable __name__ (lambdas,
# partials, callable objects).
UNNAMED_FEATURE = "<feature>"


def default_feature_name(function: Callable[..., Any]) -> str:
    """Derive a feature name from a function.

    Named functions and methods give their ``__name__`` (``len``, ``upper``).
    Anything else gives ``UNNAMED_FEATURE``.
    """
    name = getattr(function, "__name__", None)
    if not isinstance(name, str) or not name or name == "<lambda>":
        return UNNAMED_FEATURE
    return name


@dataclass(frozen=True, slots=True)
class HasFeatureMatcher[T, U](BaseMatcher[T]):
    """Extract a feature with ``feature_function``, then match it.

    ``feature_name`` prefixes mismatch descriptions and defaults to
    ``default_feature_name(feature_function)``. ``feature_description``
    prefixes the expectation and defaults to ``feature_name``.

    Raises:
        MissingArgumentError: If the function or matcher is None.
        NotCallableError: If the function is not callable.
        NotAMatcherError: If the matcher is not a hamcrest Matcher.
        NotAStringError: If a name or description is not a string.
    """

    feature_function: Callable[[T], U]
    feature_matcher: Matcher[U]
    feature_name: str | None = None
    feature_description: str | None = None

    def __post_init__(self) -> None:
        require_callable(self.feature_function, "feature_function")
        require_matcher(self.feature_matcher, "feature_matcher")
        require_optional_str(self.feature_name, "feature_name")
        require_optional_str(self.feature_description, "feature_description")
        if self.feature_name is None:
            object.__setattr__(
                self, "feature_name", default_feature_name(self.feature_function)
            )
        if self.feature_description is None:
            object.__setattr__(self, "feature_description", self.feature_name)

    def matches(self, item: Any, mismatch_description: Description | None = None) -> bool:
        feature = self.feature_function(item)
        if mismatch_description is None:
            return self.feature_matcher.matches(feature)
        feature_mismatch = StringDescription()
        if self.feature_matcher.matches(feature, feature_mismatch):
            return True
        mismatch_description.append_text(f"{self.feature_name} {feature_mismatch}")
        return False

    def _matches(self, item: Any) -> bool:
        return self.matches(item)

    def describe_mismatch(self, item: Any, mismatch_description: Description) -> None:
        feature = self.feature_function(item)
        mismatch_description.append_text(f"{self.feature_name} ")
        self.feature_matcher.describe_mismatch(feature, mismatch_description)

    def describe_to(self, description: Description) -> None:
        description.append_text(f"{self.feature_description} ").append_description_of(
            self.feature_matcher
        )
