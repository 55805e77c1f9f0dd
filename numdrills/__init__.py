"""Number, digit, pattern, classification and array exercises, with a swap command."""

__version__ = "0.1.0"
__all__ = ["arrays", "classify", "cli", "digits", "divisors", "patterns", "sequences"]