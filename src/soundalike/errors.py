class SoundalikeError(Exception):
    """Base class for all soundalike errors."""


class OutOfRange(SoundalikeError, ValueError):
    """Raised when a numeral cannot be named with the English scale table."""

    def __init__(self, value, detail: str = "outside the naming scale"):
        shown = repr(value)
        if len(shown) > 40:
            shown = f"{shown[:20]}...{shown[-10:]} ({len(str(value))} chars)"
        super().__init__(f"Number {shown} is {detail}")
        self.value = value


class ConfigError(SoundalikeError, ValueError):
    pass


class InvalidColumn(SoundalikeError, ValueError):
    """Raised when a column name is not safe to embed in an SQL expression."""
