"""
Errors raised by enumerables and counting functions.
"""


class RangeError(IndexError, ValueError):
    """
    A rank, size or argument falls outside its valid range.
    """


class CapacityError(OverflowError):
    """
    A count does not fit the bounded integer representation
    where one is required.
    """
