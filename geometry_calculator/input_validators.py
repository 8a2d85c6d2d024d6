########################
# Input Validators      #
########################

import math
import re

from geometry_calculator.calculator_config import INT_MAX
from geometry_calculator.exceptions import ValidationError

_INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")
_INT_MIN = -2 ** 31

MENU_NOT_A_NUMBER = "Por favor ingresa un número válido."
MENU_OUT_OF_RANGE = "Opción fuera de rango."
INT_NOT_A_NUMBER = "Número inválido."
INT_NEGATIVE = "Debe ser 0 o mayor."
DOUBLE_NOT_A_NUMBER = "Entrada inválida. Ingresa un número válido."
DOUBLE_NOT_POSITIVE = "El valor debe ser mayor que 0."


def _parse_int(raw: str, message: str, max_value: int = INT_MAX) -> int:
    text = (raw or "").strip()
    if not _INTEGER_PATTERN.fullmatch(text):
        raise ValidationError(message, ValidationError.FORMAT)
    value = int(text)
    if value < _INT_MIN or value > max_value:
        # Too large to be an integer the calculator works with.
        raise ValidationError(message, ValidationError.FORMAT)
    return value


class InputValidator:
    """
    Pure checks that turn one line of console text into a value.

    Nothing here reads or prints. A bad line raises ValidationError, which the
    reader treats as "show this message and ask again".
    """

    @staticmethod
    def validate_menu_option(raw: str, max_value: int) -> int:
        """Return an integer in [0, max_value]."""
        option = _parse_int(raw, MENU_NOT_A_NUMBER)
        if 0 <= option <= max_value:
            return option
        raise ValidationError(MENU_OUT_OF_RANGE, ValidationError.RANGE)

    @staticmethod
    def validate_positive_int(raw: str, max_value: int = INT_MAX) -> int:
        """Return an integer >= 0. Values above ``max_value`` count as unparseable."""
        value = _parse_int(raw, INT_NOT_A_NUMBER, max_value)
        if value >= 0:
            return value
        raise ValidationError(INT_NEGATIVE, ValidationError.RANGE)

    @staticmethod
    def validate_positive_double(raw: str) -> float:
        """Return a float strictly greater than zero."""
        text = (raw or "").strip()
        if not text or "_" in text:
            raise ValidationError(DOUBLE_NOT_A_NUMBER, ValidationError.FORMAT)
        try:
            value = float(text)
        except ValueError:
            raise ValidationError(DOUBLE_NOT_A_NUMBER, ValidationError.FORMAT)
        if math.isinf(value):
            raise ValidationError(DOUBLE_NOT_A_NUMBER, ValidationError.FORMAT)
        if math.isnan(value) or value <= 0:
            raise ValidationError(DOUBLE_NOT_POSITIVE, ValidationError.RANGE)
        return value
