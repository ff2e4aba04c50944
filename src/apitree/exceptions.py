"""Exception hierarchy for apitree.

All exceptions inherit from :class:`ApitreeError`, which carries an
``exit_code`` attribute mapped to a constant from :mod:`apitree.exit_codes`.

Subclass hierarchy::

    ApitreeError (exit 1)
    +-- ConfigError      (exit 2)
    +-- SpecShapeError   (exit 7)
    +-- TreeError        (exit 1)
"""

from apitree.exit_codes import (
    EXIT_GENERIC_FAILURE,
    EXIT_INVALID_USAGE,
    EXIT_SPEC_SHAPE_ERROR,
)


class ApitreeError(Exception):
    """Base exception for all apitree errors.

    Every subclass sets a class-level ``exit_code`` corresponding to one of
    the constants in :mod:`apitree.exit_codes`.

    Args:
        message: Human-readable error description.
        exit_code: Optional override for the class-level exit code.
    """

    exit_code: int = EXIT_GENERIC_FAILURE

    def __init__(self, message: str, exit_code: int | None = None):
        super().__init__(message)
        if exit_code is not None:
            self.exit_code = exit_code


class ConfigError(ApitreeError):
    """Raised for invalid generator options (unknown folder strategy, bad option types)."""

    exit_code = EXIT_INVALID_USAGE


class SpecShapeError(ApitreeError):
    """Raised when the specification lacks a ``paths`` mapping."""

    exit_code = EXIT_SPEC_SHAPE_ERROR


class TreeError(ApitreeError):
    """Raised when a node/edge operation would break the tree's structure."""

    exit_code = EXIT_GENERIC_FAILURE
