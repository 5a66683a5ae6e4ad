from __future__ import annotations

from .results import IterationRecord


def approx_relative_error(x_new: float, x_old: float, previous: float) -> float:
    """Percent relative change ``|(x_new - x_old) / x_new| * 100``.

    Returns ``previous`` unchanged when ``x_new == 0``.
    """
    if x_new != 0:
        return abs((x_new - x_old) / x_new) * 100.0
    return previous


class History:
    """Collects IterationRecord entries when enabled, otherwise a no-op."""

    __slots__ = ("_records",)

    def __init__(self, enabled: bool) -> None:
        self._records: list[IterationRecord] | None = [] if enabled else None

    def add(self, iteration: int, x: float, f_x: float, approx_error: float) -> None:
        if self._records is not None:
            self._records.append(
                IterationRecord(
                    iteration=iteration,
                    x=float(x),
                    f_x=float(f_x),
                    approx_error=float(approx_error),
                )
            )

    def freeze(self) -> tuple[IterationRecord, ...] | None:
        return None if self._records is None else tuple(self._records)
