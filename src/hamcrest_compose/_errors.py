"""Error types for hamcrest_compose.

Construction-time failures (a missing matcher, an empty conjunction, a
non-callable feature function) are raised eagerly by the constructing call.
Matching and describing never raise on their own account.

"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from hamcrest.core.matcher import Matcher

if TYPE_CHECKING:
    from collections.abc import Callable


class ComposeError(Exception):
    """Base class for every error raised by hamcrest_compose."""


# ═══════════════════════════════════════════════════════════════════════════════
# Precondition errors
# ═══════════════════════════════════════════════════════════════════════════════


class MissingArgumentError(ComposeError, ValueError):
    """A required argument was None."""

    def __init__(self, argument: str) -> None:
        self.argument = argument
        super().__init__(f"{argument} must not be None")


class EmptyConjunctionError(ComposeError, ValueError):
    """A conjunction was constructed without any component matchers."""

    def __init__(self) -> None:
        super().__init__("matchers cannot be empty")


class NotAMatcherError(ComposeError, TypeError):
    """An argument that must be a hamcrest Matcher was something else."""

    def __init__(self, argument: str, value: Any) -> None:
        self.argument = argument
        self.value = value
        super().__init__(
            f"{argument} must be a hamcrest Matcher, got {type(value).__name__}"
        )


class NotCallableError(ComposeError, TypeError):
    """A feature function was not callable."""

    def __init__(self, argument: str, value: Any) -> None:
        self.argument = argument
        self.value = value
        super().__init__(f"{argument} must be callable, got {type(value).__name__}")


class NotAStringError(ComposeError, TypeError):
    """A label that must be a string (or None) was something else."""

    def __init__(self, argument: str, value: Any) -> None:
        self.argument = argument
        self.value = value
        super().__init__(f"{argument} must be a string, got {type(value).__name__}")


def require_matcher[T](value: Matcher[T] | None, argument: str) -> Matcher[T]:
    """Return value unchanged if it is a Matcher, otherwise raise."""
    if value is None:
        raise MissingArgumentError(argument)
    if not isinstance(value, Matcher):
        raise NotAMatcherError(argument, value)
    return value


def require_callable[F: Callable[..., Any]](value: F | None, argument: str) -> F:
    """Return value unchanged if it is callable, otherwise raise."""
    if value is None:
        raise MissingArgumentError(argument)
    if not callable(value):
        raise NotCallableError(argument, value)
    return value


def require_optional_str(value: str | None, argument: str) -> str | None:
    """Return value unchanged if it is a string or None, otherwise raise."""
    if value is not None and not isinstance(value, str):
        raise NotAStringError(argument, value)
    return value
