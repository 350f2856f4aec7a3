"""Result set — Ordered records hydrated from one search response."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from typing import Any, Generic, TypeVar, overload

R = TypeVar("R")


class ResultSet(Sequence[R], Generic[R]):
    """Records in the order the engine ranked them, plus response metadata.

    Built fresh per query and only ever grown by ``append`` while it is
    being hydrated.

    Attributes:
        took: Engine-side execution time in ms.
        timed_out: Whether the engine reported a timeout.
        shards: The ``_shards`` summary of the response.
        total_hits: Total matching documents (not just the returned page).
        max_score: Highest score in the response.
        hits: The raw hit dicts the records were built from.
    """

    def __init__(
        self,
        records: list[R] | None = None,
        *,
        took: int | None = None,
        timed_out: bool = False,
        shards: dict[str, Any] | None = None,
        total_hits: int = 0,
        max_score: float | None = None,
        hits: list[dict[str, Any]] | None = None,
    ) -> None:
        self._records: list[R] = list(records or [])
        self.took = took
        self.timed_out = timed_out
        self.shards = shards or {}
        self.total_hits = total_hits
        self.max_score = max_score
        self.hits = hits or []

    def append(self, record: R) -> None:
        self._records.append(record)

    @overload
    def __getitem__(self, i: int) -> R: ...

    @overload
    def __getitem__(self, i: slice) -> list[R]: ...

    def __getitem__(self, i: int | slice) -> R | list[R]:
        return self._records[i]

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[R]:
        return iter(self._records)

    def __repr__(self) -> str:
        return f"ResultSet(records={len(self._records)}, total_hits={self.total_hits}, max_score={self.max_score})"
