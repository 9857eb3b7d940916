"""Exceptions raised while reading checks and version documents."""

from constants import Constants


class ParseError(ValueError):
    """Base class for check tokens that could not be parsed.

    ``input`` always holds the full original token, verbatim.
    """

    def __init__(self, message: str, input_text: str):
        super().__init__(message)
        self.input = input_text


class MissingFieldError(ParseError):
    """A required coordinate segment was absent or empty."""

    def __init__(self, field: str, input_text: str):
        super().__init__(f"Missing {field} in {input_text}", input_text)
        self.field = field


class InvalidRangeError(ParseError):
    """A version qualifier is not a valid semantic version range."""

    def __init__(self, segment: str, input_text: str, cause: Exception):
        super().__init__(
            f"Could not parse {segment} into a semantic version range. "
            f"Please provide a valid range according to {Constants.RANGE_SYNTAX_URL}",
            input_text,
        )
        self.segment = segment
        self.cause = cause


class VersionsSourceError(Exception):
    """A versions document could not be read or has the wrong shape."""
