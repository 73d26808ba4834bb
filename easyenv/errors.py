"""Errors raised while handling the user's configuration."""


class UserConfigError(Exception):
    """Wraps a failure that happened while reading or writing config files."""

    def __init__(self, err):
        super().__init__(err)
        self.err = err

    def __str__(self):
        return f"UserConfigError: {self.err}"