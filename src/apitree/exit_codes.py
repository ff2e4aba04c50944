"""Numeric exit codes carried by :mod:`apitree.exceptions`.

apitree is a library and never exits the process itself. The codes follow
`clig.dev <https://clig.dev/>`_ conventions so that a CLI embedding the tree
generator can map an :class:`~apitree.exceptions.ApitreeError` straight to a
process status via its ``exit_code`` attribute.
"""

EXIT_SUCCESS = 0
"""The tree was generated successfully."""

EXIT_GENERIC_FAILURE = 1
"""An unclassified error occurred."""

EXIT_INVALID_USAGE = 2
"""The generator was called with invalid options (e.g. an unknown folder strategy)."""

EXIT_SPEC_SHAPE_ERROR = 7
"""The specification mapping is missing a section the generator requires."""
