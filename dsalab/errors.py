"""Exceptions raised by the data structures in this package."""


class DataStructureError(Exception):
    """Base class for every error a data structure in this package raises."""


class OverflowFullError(DataStructureError):
    """Raised when a value is added to a structure that is already full."""


class UnderflowError(DataStructureError):
    """Raised when a value is taken from a structure that is empty."""


class InvalidPositionError(DataStructureError, IndexError):
    """Raised when a position lies outside the range a structure accepts."""