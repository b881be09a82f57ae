"""Errors raised for misuse of the iptcolor API.

Color math itself never raises: out-of-range channels are truncated into
their lanes. These exceptions only cover malformed input text, exhausted
sampling budgets and invalid table sizes.
"""


class ColorError(Exception):
    """Base class for iptcolor errors."""
    pass


class ColorParseError(ColorError):
    """Failed to parse a color from text."""
    pass


class SamplingExhaustedError(ColorError):
    """Rejection sampling ran out of attempts."""
    pass


class GradientError(ColorError):
    """Invalid gradient or lookup-table request."""
    pass
