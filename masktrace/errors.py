# errors.py
# exception types raised by the package


class MasktraceError(Exception):
    """Base class for every error raised by masktrace."""


class InvalidInputError(MasktraceError, ValueError):
    """Grid or pixel data rejected before any tracing started."""


class AlgorithmInvariantError(MasktraceError, RuntimeError):
    """The geometry logic reached a state that would not terminate.

    Raised mid-extraction; no partial results are returned with it.
    """
