import pytest

from geometry_calculator.calculator import GeometryCalculator
from geometry_calculator.calculator_config import CalculatorConfig


class FakeReader:
    """Stands in for InputReader: hands out queued values and records labels."""

    def __init__(self, doubles=(), ints=()):
        self.doubles = list(doubles)
        self.ints = list(ints)
        self.labels = []
        self.inline = []

    def read_positive_double(self, label=None, inline=False):
        self.labels.append(label)
        self.inline.append(inline)
        return self.doubles.pop(0)

    def read_positive_int(self, label=None, inline=False):
        self.labels.append(label)
        self.inline.append(inline)
        return self.ints.pop(0)


@pytest.fixture
def fake_reader():
    return FakeReader


@pytest.fixture
def config(tmp_path):
    return CalculatorConfig(base_dir=tmp_path)


@pytest.fixture
def calculator(config):
    return GeometryCalculator(config=config)
