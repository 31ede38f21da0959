"""howlongago exception hierarchy.

Only truly invalid input is an error. Unknown locale keys, incomplete inline
packs and resolver misses are handled by fallback and never raise.

Python 3.13+. Zero external dependencies.
"""

__all__ = [
    "HowLongAgoError",
    "InvalidInstantError",
    "LanguagePackError",
]


class HowLongAgoError(Exception):
    """Base exception for all howlongago errors."""


class InvalidInstantError(HowLongAgoError, ValueError):
    """Value cannot be converted to a valid point in time.

    Raised instead of rendering a phrase from a meaningless difference.
    Subclasses ValueError so callers validating user input can catch the
    builtin type.

    Attributes:
        input_value: The value that failed to convert
        argument: Which argument carried it ('target' or 'reference')

    Example:
        >>> try:
        ...     format_time_difference("not a date")
        ... except InvalidInstantError as e:
        ...     print(e.argument, e.input_value)
        target not a date
    """

    def __init__(self, message: str, *, input_value: object = None, argument: str = "") -> None:
        """Initialize InvalidInstantError.

        Args:
            message: Error message
            input_value: The value that failed to convert
            argument: Which argument carried it ('target' or 'reference')
        """
        super().__init__(message)
        self.input_value = input_value
        self.argument = argument


class LanguagePackError(HowLongAgoError, TypeError):
    """Malformed language pack or locale option.

    Examples:
    - Template value that is not a string
    - Template set that is not a mapping
    - Locale option of an unsupported type

    Unknown unit keys are not an error; they are ignored during merge.
    """
