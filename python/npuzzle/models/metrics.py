"""Search statistics, kept as a string → string mapping."""

from __future__ import annotations

from collections.abc import Iterator, Mapping

NODES_EXPANDED = "nodesExpanded"
QUEUE_SIZE = "queueSize"
MAX_QUEUE_SIZE = "maxQueueSize"
PATH_COST = "pathCost"

# Display order used by the CLI statistics block.
REPORTED_KEYS: tuple[str, ...] = (MAX_QUEUE_SIZE, NODES_EXPANDED, PATH_COST, QUEUE_SIZE)


class Metrics(Mapping[str, str]):
    """Read-only mapping view with typed setters and getters.

    Every value is stored as a string; numeric values are rendered with
    ``str`` so integral costs read ``"4"`` rather than ``"4.0"``.
    """

    def __init__(self) -> None:
        self._values: dict[str, str] = {}

    # -- writers --------------------------------------------------------------

    def set(self, name: str, value: object) -> None:
        if isinstance(value, float) and value.is_integer():
            value = int(value)
        self._values[name] = str(value)

    def inc(self, name: str) -> None:
        self.set(name, self.get_int(name) + 1)

    def clear(self) -> None:
        self._values.clear()

    # -- readers --------------------------------------------------------------

    def get_int(self, name: str) -> int:
        return int(self._values.get(name, "0"))

    def get_float(self, name: str) -> float:
        return float(self._values.get(name, "0"))

    def as_dict(self) -> dict[str, str]:
        return dict(self._values)

    # -- Mapping protocol -----------------------------------------------------

    def __getitem__(self, name: str) -> str:
        return self._values[name]

    def __iter__(self) -> Iterator[str]:
        return iter(sorted(self._values))

    def __len__(self) -> int:
        return len(self._values)

    def __repr__(self) -> str:
        return f"Metrics({self.as_dict()!r})"
