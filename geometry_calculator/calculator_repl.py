########################
# Calculator REPL       #
########################

import logging
from typing import Optional

from geometry_calculator.calculator import GeometryCalculator
from geometry_calculator.calculator_config import CalculatorConfig
from geometry_calculator.exceptions import OperationError, ValidationError
from geometry_calculator.history import LoggingObserver

SHAPE_MENU = (
    "\nElige una figura:",
    "1. Círculo",
    "2. Cuadrado",
    "3. Triángulo",
    "4. Rectángulo",
    "5. Pentágono",
    "0. Salir",
)
SHAPE_MENU_MAX = 5

OPERATION_MENU = (
    "Elige una operación:",
    "1. Área",
    "2. Perímetro",
    "3. Potencia",
    "0. Volver",
)
OPERATION_MENU_MAX = 3

EXIT_OPTION = 0
BACK_OPTION = 0


def ask_shape_menu(calc: GeometryCalculator) -> int:
    for line in SHAPE_MENU:
        print(line)
    return calc.reader.read_menu_option(SHAPE_MENU_MAX)


def ask_operation_menu(calc: GeometryCalculator) -> int:
    for line in OPERATION_MENU:
        print(line)
    return calc.reader.read_menu_option(OPERATION_MENU_MAX)


def print_history(calc: GeometryCalculator) -> None:
    print("Resultados almacenados:")
    for value in calc.show_history():
        print(value)


def calculator_repl(config: Optional[CalculatorConfig] = None):
    """
    Menu-driven console session.

    Loops over shape and operation menus, computing and storing one result per
    pass, until the user picks "0. Salir" (or input ends). The stored results
    are then printed in the order they were computed.
    """
    try:
        calc = GeometryCalculator(config)
        calc.add_observer(LoggingObserver())

        while True:
            try:
                shape = ask_shape_menu(calc)
                if shape == EXIT_OPTION:
                    break

                operation = ask_operation_menu(calc)
                if operation == BACK_OPTION:
                    continue

                try:
                    result = calc.perform_calculation(shape, operation)
                    print(f"Resultado: {result}")
                except OperationError as e:
                    # Unknown shape or operation; history is left untouched
                    logging.warning(f"Calculation rejected: {e}")
                    print(str(e))
                except (ValidationError, ValueError) as e:
                    logging.warning(f"Invalid input during calculation: {e}")
                    print("Entrada inválida. Intenta de nuevo.")

            except KeyboardInterrupt:
                # Ctrl+C abandons the current step, not the session
                print("\nOperación cancelada")
                continue
            except EOFError:
                print("\nFin de la entrada.")
                break

        print_history(calc)
        calc.log_summary()
        return calc.show_history()

    except Exception as e:
        print(f"Fatal error: {e}")
        logging.error(f"Fatal error in calculator REPL: {e}")
        raise


def main() -> None:
    calculator_repl()
