"""
Sign — знак десятичного значения

Двузначная полярность (POSITIVE/NEGATIVE). Используется как множитель
(-1 или 1) и как глиф при форматировании ("" или "-").
Упорядочивание знаков само по себе не имеет смысла.
"""

from enum import Enum


class Sign(str, Enum):
    """Знак значения"""

    POSITIVE = "+"
    NEGATIVE = "-"

    @property
    def glyph(self) -> str:
        """Глиф для канонической строки: '' для POSITIVE, '-' для NEGATIVE"""
        return "-" if self is Sign.NEGATIVE else ""

    def to_int(self) -> int:
        """Множитель знака: 1 или -1"""
        return -1 if self is Sign.NEGATIVE else 1

    def negate(self) -> "Sign":
        return Sign.POSITIVE if self is Sign.NEGATIVE else Sign.NEGATIVE

    @classmethod
    def of_string(cls, text: str) -> "Sign":
        """
        Знак из захваченной группы литерала.

        Args:
            text: '', '+' или '-'

        Returns:
            Соответствующий Sign

        Raises:
            ValueError: Для любой другой строки
        """
        if text == "-":
            return cls.NEGATIVE
        if text in ("", "+"):
            return cls.POSITIVE
        raise ValueError(f"invalid sign: {text!r}")

    @classmethod
    def of_int(cls, value: int) -> "Sign":
        """Знак целого числа (ноль считается положительным)"""
        return cls.NEGATIVE if value < 0 else cls.POSITIVE
