"""Exception taxonomy.

``InvalidArgument``, ``FormatError`` and ``ExhaustedRetries`` are ordinary
conditions a caller is expected to handle. ``ContractViolation`` signals a
broken upstream invariant (out-of-bounds access, a troll leaving the map) and
is never caught inside the package.
"""


class TrollMazeError(Exception):
    """Base class for every error raised by :mod:`troll_maze`."""


class InvalidArgument(TrollMazeError, ValueError):
    """A caller-supplied value is outside its valid domain."""


class FormatError(TrollMazeError, ValueError):
    """A text layout could not be parsed into a maze."""


class ExhaustedRetries(TrollMazeError, RuntimeError):
    """A bounded rejection-sampling loop gave up."""


class ContractViolation(TrollMazeError, IndexError):
    """An internal invariant was broken; the current operation must abort."""
