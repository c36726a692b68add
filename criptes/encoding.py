"""Text to bytes at the engine boundary."""

from .errors import ValidationError


def utf8(text: str, field: str = "Text") -> bytes:
    """UTF-8 bytes of text; lone surrogates are rejected as invalid input."""
    try:
        return text.encode("utf-8")
    except UnicodeEncodeError as exc:
        raise ValidationError(f"{field} is not valid Unicode text.") from exc
