"""
Maximum length formatting for display values.

Truncates values that exceed a fixed length and trims the whitespace left
around the cut, e.g. before storing a name in a bounded column.
"""

from ..log_config import get_logger


logger = get_logger(__name__)


class MaxLengthFormatter:
    """
    Formats strings so they never exceed a maximum length.

    The maximum length is fixed at construction; instances are immutable and
    safe to share between threads.

    Example:
        >>> formatter = MaxLengthFormatter.of(10)
        >>> formatter.format("This is a long text")
        'This is a'
    """

    __slots__ = ("_max_length",)

    def __init__(self, max_length: int):
        if isinstance(max_length, bool) or not isinstance(max_length, int) or max_length <= 0:
            raise ValueError("Max length must be > 0")
        object.__setattr__(self, "_max_length", max_length)

    def __setattr__(self, name, value):
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __repr__(self) -> str:
        return f"{type(self).__name__}(max_length={self._max_length})"

    @classmethod
    def of(cls, max_length: int) -> "MaxLengthFormatter":
        """
        Create a formatter for the given maximum length.

        Args:
            max_length: Maximum length of formatted strings, greater than 0

        Returns:
            New MaxLengthFormatter instance

        Raises:
            ValueError: If max_length is not a positive integer
        """
        return cls(max_length)

    @property
    def max_length(self) -> int:
        return self._max_length

    def format(self, value: str) -> str:
        """
        Truncate a value to the maximum length.

        Values longer than the maximum are cut and stripped of surrounding
        whitespace; shorter values are returned unchanged.

        Args:
            value: String to format

        Returns:
            The formatted string
        """
        if len(value) > self._max_length:
            truncated = value[:self._max_length].strip()
            logger.debug(
                "Value truncated",
                max_length=self._max_length,
                original_length=len(value),
                truncated_length=len(truncated),
            )
            return truncated
        return value
