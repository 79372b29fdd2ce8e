"""Base exception for the database build pipeline."""


class BuildError(Exception):
    """Raised when building an election database cannot continue.

    The CLI reports the message on stderr and exits with status 1.
    """
