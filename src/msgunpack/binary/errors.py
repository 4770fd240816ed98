from __future__ import annotations


class MessagePackError(ValueError):
    """Base class for every decode failure."""


class InvalidArgument(MessagePackError):
    """A read helper was asked for zero or a negative number of bytes."""


class InsufficientData(MessagePackError):
    """Fewer bytes remain than the current field declares."""


class InvalidData(MessagePackError):
    """Unknown tag byte, or string payload that is not UTF-8."""


class DepthLimitExceeded(InvalidData):
    """Containers nest deeper than max_depth or than the interpreter stack allows."""
