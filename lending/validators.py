from typing import Optional

from lending.errors import InvalidArgument


class TextValidator:
    """Non-empty text checks shared by Book and Person."""

    @staticmethod
    def is_non_empty(text: Optional[str]) -> bool:
        if text is None or not isinstance(text, str):
            return False
        return bool(text.strip())

    @staticmethod
    def require(text: Optional[str], field: str) -> str:
        """Return the stripped text or raise InvalidArgument naming the field."""
        if not TextValidator.is_non_empty(text):
            raise InvalidArgument(f"{field} can not be empty")
        return text.strip()
