"""Minimal log, chunk and cluster types consumed by format construction.

Clustering and tokenization happen upstream; these classes only carry their
results. Any object with the same attributes works with ``gen_format``.
"""

from dataclasses import dataclass, field
from typing import Iterable, Iterator, List, Optional


@dataclass(frozen=True)
class Chunk:
    """One token of a tokenized log line."""
    data: str


@dataclass(eq=False)
class Log:
    chunks: List[Chunk]
    raw: Optional[str] = None
    format: Optional[object] = field(default=None, repr=False)

    @classmethod
    def from_tokens(cls, tokens: Iterable[str], raw: Optional[str] = None) -> "Log":
        """Wrap already-split tokens into chunks."""
        return cls([Chunk(t) for t in tokens], raw=raw)


class Cluster:
    """Ordered group of logs that share the same chunk count."""

    def __init__(self, logs: Optional[Iterable[Log]] = None):
        self.logs: List[Log] = list(logs or [])

    @classmethod
    def from_token_lists(cls, token_lists: Iterable[Iterable[str]]) -> "Cluster":
        return cls(Log.from_tokens(tokens) for tokens in token_lists)

    def add(self, log: Log):
        self.logs.append(log)

    def __iter__(self) -> Iterator[Log]:
        return iter(self.logs)

    def __len__(self) -> int:
        return len(self.logs)

    def __repr__(self):
        return f"Cluster(logs={len(self.logs)})"
