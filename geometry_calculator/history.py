########################
# Result History        #
########################

from abc import ABC, abstractmethod
import logging
from typing import Iterator, List

import pandas as pd

from geometry_calculator.calculation import Calculation

HISTORY_COLUMNS = ['shape', 'operation', 'dimensions', 'result', 'timestamp']


class ResultHistory:
    """
    Append-only record of the results computed in one session.

    Entries keep insertion order and are never persisted.
    """

    def __init__(self):
        self._entries: List[Calculation] = []

    def append(self, calculation: Calculation) -> None:
        self._entries.append(calculation)

    def results(self) -> List[float]:
        return [entry.result for entry in self._entries]

    def entries(self) -> List[Calculation]:
        return list(self._entries)

    def to_dataframe(self) -> pd.DataFrame:
        return pd.DataFrame([entry.to_dict() for entry in self._entries], columns=HISTORY_COLUMNS)

    def __len__(self):
        return len(self._entries)

    def __iter__(self) -> Iterator[Calculation]:
        return iter(list(self._entries))


class HistoryObserver(ABC):
    """Notified every time a calculation is recorded."""

    @abstractmethod
    def update(self, calculation: Calculation) -> None:
        pass  # pragma: no cover


class LoggingObserver(HistoryObserver):

    def update(self, calculation: Calculation) -> None:
        if calculation is None:
            raise AttributeError("Calculation cannot be None")
        logging.info(f"Calculation performed: {calculation}")
