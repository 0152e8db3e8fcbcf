"""Exceptions raised while validating intersection arguments."""


class LineIntersectionError(Exception):
    """Base class for errors converted into a NoResult at the public boundary."""


class InvalidInputError(LineIntersectionError):
    """A line or point argument is malformed or too short."""


class InvalidOptionsError(LineIntersectionError):
    """The options argument, or one of its entries, has the wrong shape."""
