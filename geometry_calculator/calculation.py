########################
# Calculation Record    #
########################

from dataclasses import dataclass, field
import datetime
from typing import Any, Dict, Optional, Tuple

from geometry_calculator.operations import Operation, Shape


@dataclass(frozen=True)
class Calculation:
    """
    One computed result and what produced it.

    ``shape`` is None for Power, which does not depend on a shape.
    """

    operation: Operation
    dimensions: Tuple[float, ...]
    result: float
    shape: Optional[Shape] = None
    timestamp: datetime.datetime = field(default_factory=datetime.datetime.now)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'shape': self.shape.name.lower() if self.shape is not None else None,
            'operation': self.operation.name.lower(),
            'dimensions': self.dimensions,
            'result': self.result,
            'timestamp': self.timestamp.isoformat(),
        }

    def __str__(self):
        subject = self.shape.name.lower() if self.shape is not None else "number"
        values = ", ".join(str(value) for value in self.dimensions)
        return f"{self.operation.name.lower()} of {subject} ({values}) = {self.result}"
