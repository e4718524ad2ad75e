"""hamcrest_compose: readable compound matchers for PyHamcrest.

All public types are exported from this module for flat imports:

    from hamcrest_compose import compose, has_feature, has_feature_value
"""

__version__ = "0.1.0"

# Matchers
from hamcrest_compose._conjunction import SEPARATOR, ConjunctionMatcher

# Errors
from hamcrest_compose._errors import (
    ComposeError,
    EmptyConjunctionError,
    MissingArgumentError,
    NotAMatcherError,
    NotAStringError,
    NotCallableError,
)

# Factories
from hamcrest_compose._factories import compose, has_feature, has_feature_value
from hamcrest_compose._feature import UNNAMED_FEATURE, HasFeatureMatcher, default_feature_name

__all__ = [
    # Factories
    "compose",
    "has_feature",
    "has_feature_value",
    # Matchers
    "ConjunctionMatcher",
    "HasFeatureMatcher",
    "SEPARATOR",
    "UNNAMED_FEATURE",
    "default_feature_name",
    # Errors
    "ComposeError",
    "MissingArgumentError",
    "EmptyConjunctionError",
    "NotAMatcherError",
    "NotCallableError",
    "NotAStringError",
]
