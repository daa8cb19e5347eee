"""In-memory response accumulator."""

from __future__ import annotations

from typing import Any


class ResponseCollector:
    """Collects call results in dispatch order.

    Satisfies the ``ResponseAccumulator`` protocol; serializing the collected
    values for the client is left to the host.
    """

    def __init__(self) -> None:
        self._responses: list[Any] = []

    def append(self, value: Any) -> None:
        self._responses.append(value)

    @property
    def responses(self) -> list[Any]:
        return list(self._responses)

    def clear(self) -> None:
        self._responses.clear()

    def __len__(self) -> int:
        return len(self._responses)

    def __repr__(self) -> str:
        return f"<ResponseCollector responses={len(self._responses)}>"
