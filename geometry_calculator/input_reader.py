########################
# Input Reader          #
########################

import logging
from typing import Callable, Optional

from geometry_calculator.calculator_config import MAX_EXPONENT
from geometry_calculator.exceptions import ValidationError
from geometry_calculator.input_validators import InputValidator

MENU_PROMPT = "Opción: "
VALUE_PROMPT = "Valor: "


class InputReader:
    """
    Blocking console reads that only return once a line validates.

    Every failed line prints the validator's message and asks again, with no
    limit on retries. Validation errors never reach the caller.
    """

    def __init__(self, max_int: int = MAX_EXPONENT):
        self.max_int = max_int

    def _read_until_valid(self, prompt: str, validate: Callable[[str], object]):
        while True:
            raw = input(prompt)
            try:
                return validate(raw)
            except ValidationError as e:
                logging.debug(f"Rejected input {raw!r} ({e.kind}): {e}")
                print(str(e))

    @staticmethod
    def _show_label(label: Optional[str], inline: bool) -> None:
        # An inline label shares its line with the value prompt.
        if not label:
            return
        if inline:
            print(label, end="")
        else:
            print(label)

    def read_menu_option(self, max_value: int) -> int:
        return self._read_until_valid(
            MENU_PROMPT,
            lambda raw: InputValidator.validate_menu_option(raw, max_value),
        )

    def read_positive_int(self, label: Optional[str] = None, inline: bool = False) -> int:
        self._show_label(label, inline)
        return self._read_until_valid(
            VALUE_PROMPT,
            lambda raw: InputValidator.validate_positive_int(raw, self.max_int),
        )

    def read_positive_double(self, label: Optional[str] = None, inline: bool = False) -> float:
        self._show_label(label, inline)
        return self._read_until_valid(VALUE_PROMPT, InputValidator.validate_positive_double)
