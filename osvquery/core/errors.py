"""Errors raised while turning external references into queries."""


class ReferenceParseError(Exception):
    """Base class for locators of a known scheme that cannot be parsed."""

    def __init__(self, message: str, locator: str):
        super().__init__(message)
        self.locator = locator


class InvalidReferencePattern(ReferenceParseError):
    """The locator does not match the grammar of its reference type."""

    def __init__(self, locator: str, pattern: str, message: str | None = None):
        super().__init__(
            message or f"Reference locator '{locator}' does not match the pattern '{pattern}'",
            locator,
        )
        self.pattern = pattern


class MalformedCpe(InvalidReferencePattern):
    """The locator could not be decomposed into a CPE 2.2 or 2.3 name."""

    def __init__(self, locator: str, reason: str):
        super().__init__(
            locator,
            pattern='cpe:/<part>:<vendor>:<product>:... or cpe:2.3:<part>:<vendor>:<product>:...',
            message=f"Invalid CPE reference '{locator}': {reason}",
        )
        self.reason = reason
