"""
debugstr exception hierarchy.

All custom exceptions live here to avoid circular imports.
"""


class CliError(Exception):
    """Exit code 1 — validation, parse and argument errors."""

    exit_code = 1


class InvalidArgumentError(CliError, ValueError):
    """An argument is outside its allowed range.

    Carries the offending parameter name, the violated lower bound and the
    value that was passed.
    """

    def __init__(self, param, bound, value):
        self.param = param
        self.bound = bound
        self.value = value
        super().__init__(
            f"[ERROR] {param} must be equal to or greater than {bound}, got {value!r}."
        )
