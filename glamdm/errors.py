# errors.py
# Exceptions that end the program. Bad color text is never one of these.


class BannerError(Exception):
    """Base class for glamdm failures."""


class TerminalUnavailableError(BannerError):
    """stdin/stdout cannot be driven as an interactive terminal."""
