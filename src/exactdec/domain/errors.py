"""
Ошибки десятичного движка.

Ровно два вида ошибок, оба локальные и детерминированные:
- InvalidLiteral — строка не соответствует ни одной форме литерала
- UndefinedComparison — сравнение с NaN

Повторять операцию после любой из них бессмысленно: это некорректный ввод
или логическая ошибка вызывающего кода.
"""


class DecimalError(Exception):
    """Базовый класс ошибок exactdec"""

    pass


class InvalidLiteral(DecimalError, ValueError):
    """
    Строка не распознана грамматикой литералов.

    Attributes:
        literal: Строка после нормализации (trim, удаление '_' и ведущих нулей)
    """

    def __init__(self, literal: str):
        self.literal = literal
        super().__init__(f"invalid literal: {literal!r}")


class UndefinedComparison(DecimalError, ArithmeticError):
    """
    Сравнение, в котором участвует NaN.

    NaN не упорядочен ни с чем (включая другой NaN), поэтому compare
    и все операторы сравнения отказывают явно, а не сортируют NaN
    в конец.
    """

    def __init__(self, left: object, right: object):
        self.left = left
        self.right = right
        super().__init__(f"cannot compare NaN: {left!r} vs {right!r}")
