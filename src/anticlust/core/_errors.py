"""Exceptions raised by the exchange optimiser."""


class AllocationError(MemoryError):
    """The working structures of an exchange run could not be allocated.

    Raised instead of returning a partial result: the caller's label array is
    left exactly as it was passed in.
    """
