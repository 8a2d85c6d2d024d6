########################
# Shape Operations      #
########################

from dataclasses import dataclass
from enum import IntEnum
import math
import operator
from typing import Callable, Dict, Tuple, Union

from geometry_calculator.exceptions import OperationError, UnknownShapeError

# Fixed value, kept for output compatibility with earlier releases.
PI = 3.1416

UNKNOWN_SHAPE = "Figura desconocida."
UNKNOWN_OPERATION = "Operación desconocida."

BASE_LABEL = "Base:"
EXPONENT_LABEL = "Exponente (entero, puede ser 0 o positivo):"


class Shape(IntEnum):
    CIRCLE = 1
    SQUARE = 2
    TRIANGLE = 3
    RECTANGLE = 4
    PENTAGON = 5


class Operation(IntEnum):
    AREA = 1
    PERIMETER = 2
    POWER = 3


def circle_area(radius: float) -> float:
    return PI * radius * radius


def circle_perimeter(radius: float) -> float:
    return 2 * PI * radius


def square_area(side: float) -> float:
    return side * side


def square_perimeter(side: float) -> float:
    return 4 * side


def triangle_area(base: float, height: float) -> float:
    return 0.5 * base * height


def triangle_perimeter(a: float, b: float, c: float) -> float:
    return a + b + c


def rectangle_area(base: float, height: float) -> float:
    return base * height


def rectangle_perimeter(base: float, height: float) -> float:
    return 2 * (base + height)


def pentagon_area(side: float, apothem: float) -> float:
    return (5 * side * apothem) / 2


def pentagon_perimeter(side: float) -> float:
    return 5 * side


def power_recursive(base: float, exponent: int) -> float:
    """
    Raise ``base`` to a non-negative integer ``exponent``.

    Follows the recursive definition ``b^0 = 1`` and ``b^e = b * b^(e-1)``,
    multiplying in the same order, but runs as a loop so that large exponents
    do not hit the interpreter's recursion limit. A zero base is not special
    cased: ``power_recursive(0, 0)`` is 1.
    """
    exponent = operator.index(exponent)
    if exponent < 0:
        raise ValueError("exponent must be a non-negative integer")

    base = float(base)
    result = 1.0
    for _ in range(exponent):
        product = base * result
        if math.isnan(product):
            return product
        if product == result and math.copysign(1.0, product) == math.copysign(1.0, result):
            # Fixed point: every further multiplication yields the same value.
            return product
        result = product
    return result


@dataclass(frozen=True)
class Formula:
    """A calculation together with the labels of the values it needs, in order."""

    name: str
    labels: Tuple[str, ...]
    compute: Callable[..., float]
    inline: bool = False

    def read_dimensions(self, reader) -> Tuple[float, ...]:
        return tuple(reader.read_positive_double(label, inline=self.inline) for label in self.labels)

    def execute(self, *dimensions) -> float:
        return self.compute(*dimensions)


class PowerFormula(Formula):
    """Power takes a positive real base followed by a non-negative integer exponent."""

    def read_dimensions(self, reader) -> Tuple[float, int]:
        base = reader.read_positive_double(self.labels[0])
        exponent = reader.read_positive_int(self.labels[1])
        return base, exponent


POWER_FORMULA = PowerFormula("power", (BASE_LABEL, EXPONENT_LABEL), power_recursive)

FORMULAS: Dict[Tuple[Shape, Operation], Formula] = {
    (Shape.CIRCLE, Operation.AREA): Formula("circle area", ("Radio: ",), circle_area, inline=True),
    (Shape.CIRCLE, Operation.PERIMETER): Formula("circle perimeter", ("Radio:",), circle_perimeter),
    (Shape.SQUARE, Operation.AREA): Formula("square area", ("Lado:",), square_area),
    (Shape.SQUARE, Operation.PERIMETER): Formula("square perimeter", ("Lado:",), square_perimeter),
    (Shape.TRIANGLE, Operation.AREA): Formula("triangle area", ("Base:", "Altura:"), triangle_area),
    (Shape.TRIANGLE, Operation.PERIMETER): Formula(
        "triangle perimeter", ("Lado 1:", "Lado 2:", "Lado 3:"), triangle_perimeter
    ),
    (Shape.RECTANGLE, Operation.AREA): Formula("rectangle area", ("Base:", "Altura:"), rectangle_area),
    (Shape.RECTANGLE, Operation.PERIMETER): Formula(
        "rectangle perimeter", ("Base:", "Altura:"), rectangle_perimeter
    ),
    (Shape.PENTAGON, Operation.AREA): Formula("pentagon area", ("Lado:", "Apotema:"), pentagon_area),
    (Shape.PENTAGON, Operation.PERIMETER): Formula("pentagon perimeter", ("Lado:",), pentagon_perimeter),
}


class FormulaFactory:
    """Looks up the formula for a shape/operation pair."""

    @staticmethod
    def create_formula(shape: Union[Shape, int, None], operation: Union[Operation, int]) -> Formula:
        try:
            operation = Operation(operation)
        except ValueError:
            raise OperationError(UNKNOWN_OPERATION)

        # Power does not depend on the shape, so the shape is not checked.
        if operation is Operation.POWER:
            return POWER_FORMULA

        try:
            shape = Shape(shape)
        except ValueError:
            raise UnknownShapeError(UNKNOWN_SHAPE)
        return FORMULAS[(shape, operation)]


def calculate(shape, operation, reader) -> float:
    """
    Read the values the chosen formula needs through ``reader`` and apply it.

    Raises UnknownShapeError for an unrecognized shape unless the operation is
    Power.
    """
    formula = FormulaFactory.create_formula(shape, operation)
    return formula.execute(*formula.read_dimensions(reader))
