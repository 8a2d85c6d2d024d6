########################
# Geometry Calculator   #
########################

import logging
from typing import List, Optional

from geometry_calculator.calculation import Calculation
from geometry_calculator.calculator_config import CalculatorConfig
from geometry_calculator.history import HistoryObserver, ResultHistory
from geometry_calculator.input_reader import InputReader
from geometry_calculator.operations import Operation, Shape, calculate


class RecordingReader:
    """Passes reads through to another reader and keeps every value it returned."""

    def __init__(self, reader):
        self.reader = reader
        self.values = []

    def read_positive_double(self, label=None, inline=False):
        value = self.reader.read_positive_double(label, inline=inline)
        self.values.append(value)
        return value

    def read_positive_int(self, label=None, inline=False):
        value = self.reader.read_positive_int(label, inline=inline)
        self.values.append(value)
        return value


class GeometryCalculator:
    """
    Owns the session state: configuration, the result history and the
    observers told about each new result.
    """

    def __init__(self, config: Optional[CalculatorConfig] = None):
        self.config = config or CalculatorConfig()
        self.config.validate()
        self.config.log_dir.mkdir(parents=True, exist_ok=True)

        self._setup_logging()

        self.history = ResultHistory()
        self.observers: List[HistoryObserver] = []
        self.reader = InputReader(max_int=self.config.max_exponent)

        logging.info("Calculator initialized with configuration")

    def _setup_logging(self) -> None:
        try:
            logging.basicConfig(
                filename=str(self.config.log_file),
                level=getattr(logging, self.config.log_level.upper()),
                format='%(asctime)s - %(levelname)s - %(message)s',
                encoding='utf-8',
            )
            logging.info(f"Logging initialized at: {self.config.log_file}")
        except Exception as e:
            print(f"Error setting up logging: {e}")
            raise

    def add_observer(self, observer: HistoryObserver) -> None:
        self.observers.append(observer)
        logging.info(f"Added observer: {observer.__class__.__name__}")

    def remove_observer(self, observer: HistoryObserver) -> None:
        self.observers.remove(observer)
        logging.info(f"Removed observer: {observer.__class__.__name__}")

    def notify_observers(self, calculation: Calculation) -> None:
        for observer in self.observers:
            observer.update(calculation)

    def perform_calculation(self, shape, operation) -> float:
        """
        Read the dimensions for ``shape``/``operation``, compute the result and
        record it.

        Nothing is recorded if the formula cannot be found.
        """
        recorder = RecordingReader(self.reader)
        result = calculate(shape, operation, recorder)
        dimensions = tuple(recorder.values)

        operation = Operation(operation)
        calculation = Calculation(
            operation=operation,
            dimensions=dimensions,
            result=result,
            shape=None if operation is Operation.POWER else Shape(shape),
        )
        self.history.append(calculation)
        self.notify_observers(calculation)
        return result

    def show_history(self) -> List[float]:
        return self.history.results()

    def log_summary(self) -> None:
        """Log how many results the session produced, per operation."""
        df = self.history.to_dataframe()
        if df.empty:
            logging.info("Session ended with no calculations")
            return
        counts = df.groupby('operation')['result'].count().to_dict()
        logging.info(f"Session ended with {len(df)} calculations: {counts}")
