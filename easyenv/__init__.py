"""Group environment variables into named collections and write them to .env files."""

__version__ = "0.1.0"