"""Factory functions: the public way to build compose matchers.

    assert_that("ham", compose("a word with", starts_with("h"))
                       .and_(contains_string("a"))
                       .and_(ends_with("m")))

    assert_that("ham", has_feature("a string with length", "length", len, equal_to(3)))

Each factory accepts its optional labels as leading positional arguments,
so the shortest form passes only the function and matcher.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, overload

from hamcrest import equal_to

from hamcrest_compose._conjunction import ConjunctionMatcher
from hamcrest_compose._feature import HasFeatureMatcher

if TYPE_CHECKING:
    from collections.abc import Callable

    from hamcrest.core.matcher import Matcher


@overload
def compose[T](matcher: Matcher[T], /) -> ConjunctionMatcher[T]: ...
@overload
def compose[T](description: str | None, matcher: Matcher[T], /) -> ConjunctionMatcher[T]: ...


def compose(*args: Any) -> ConjunctionMatcher[Any]:
    """Start a conjunction from a single matcher, optionally labelled.

    Extend the result with ``and_`` (or ``&``). The label, when given,
    prefixes the description: ``compose("a word with", starts_with("h"))``
    describes itself as ``a word with a string starting with 'h'``.

    Raises:
        MissingArgumentError: If the matcher is None.
        NotAMatcherError: If the matcher is not a hamcrest Matcher.
        NotAStringError: If the label is neither None nor a string.
    """
    match args:
        case (matcher,):
            description = None
        case (description, matcher):
            pass
        case _:
            msg = f"compose() takes 1 or 2 positional arguments but {len(args)} were given"
            raise TypeError(msg)
    return ConjunctionMatcher((matcher,), description)


@overload
def has_feature[T, U](
    feature_function: Callable[[T], U], feature_matcher: Matcher[U], /
) -> HasFeatureMatcher[T, U]: ...
@overload
def has_feature[T, U](
    feature_name: str, feature_function: Callable[[T], U], feature_matcher: Matcher[U], /
) -> HasFeatureMatcher[T, U]: ...
@overload
def has_feature[T, U](
    feature_description: str,
    feature_name: str,
    feature_function: Callable[[T], U],
    feature_matcher: Matcher[U],
    /,
) -> HasFeatureMatcher[T, U]: ...


def has_feature(*args: Any) -> HasFeatureMatcher[Any, Any]:
    """Match a feature of an object.

    - ``has_feature(len, equal_to(3))`` names the feature after the function.
    - ``has_feature("length", len, equal_to(3))`` uses one name for both
      the expectation and the mismatch.
    - ``has_feature("a string with length", "length", len, equal_to(3))``
      describes itself as ``a string with length <3>`` and reports a
      mismatch as ``length was <2>``.
    """
    match args:
        case (function, matcher):
            return HasFeatureMatcher(function, matcher)
        case (name, function, matcher):
            return HasFeatureMatcher(function, matcher, name, name)
        case (description, name, function, matcher):
            return HasFeatureMatcher(function, matcher, name, description)
    msg = f"has_feature() takes 2 to 4 positional arguments but {len(args)} were given"
    raise TypeError(msg)


@overload
def has_feature_value[T, U](
    feature_function: Callable[[T], U], feature_value: U, /
) -> HasFeatureMatcher[T, U]: ...
@overload
def has_feature_value[T, U](
    feature_name: str, feature_function: Callable[[T], U], feature_value: U, /
) -> HasFeatureMatcher[T, U]: ...
@overload
def has_feature_value[T, U](
    feature_description: str,
    feature_name: str,
    feature_function: Callable[[T], U],
    feature_value: U,
    /,
) -> HasFeatureMatcher[T, U]: ...


def has_feature_value(*args: Any) -> HasFeatureMatcher[Any, Any]:
    """Match a feature of an object against a literal value.

    Shorthand for ``has_feature(..., equal_to(value))`` with the same
    call shapes as ``has_feature``.
    """
    if not 2 <= len(args) <= 4:
        msg = f"has_feature_value() takes 2 to 4 positional arguments but {len(args)} were given"
        raise TypeError(msg)
    *labels_and_function, value = args
    return has_feature(*labels_and_function, equal_to(value))
