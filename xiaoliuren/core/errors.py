class MinorRenError(ValueError):
    """Base class for every error raised by xiaoliuren."""


class InvalidInput(MinorRenError):
    """A count passed to the calculator (or a starter) is below 1."""


class InvalidRange(MinorRenError):
    """Random bounds with min > max."""
