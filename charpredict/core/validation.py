import math
from typing import Iterable


class TableValidationError(ValueError):
    """A transition row or emission distribution is missing, malformed or not a probability distribution."""

    def __init__(self, table: str, state, total: float | None = None, reason: str | None = None):
        self.table = table
        self.state = state
        self.total = total
        name = getattr(state, 'name', state)
        if reason is None:
            reason = f"sums to {total!r}, expected 1.0"
        super().__init__(f"{table} row for {name} {reason}")


def is_probability(p: float) -> bool:
    return isinstance(p, (int, float)) and not math.isnan(p) and 0.0 <= p <= 1.0


def sums_to_one(values: Iterable[float], tol: float = 1e-6) -> bool:
    return abs(math.fsum(values) - 1.0) <= tol


def check_distribution(table: str, state, values: Iterable[float], tol: float = 1e-6) -> None:
    values = list(values)
    if not all(is_probability(v) for v in values) or not sums_to_one(values, tol):
        raise TableValidationError(table, state, math.fsum(values))
