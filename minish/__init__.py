"""Building blocks of a small interactive shell: text helpers, tokens, environment, expansion and builtins."""

__version__ = "0.1.0"
__all__ = ["libtext", "command", "environment", "expansion", "builtins"]