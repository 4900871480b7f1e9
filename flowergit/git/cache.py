"""Memoization of parsed git output."""

import logging
from collections.abc import Callable, Hashable, Iterable, Sequence
from enum import Enum
from typing import Any

logger = logging.getLogger(__name__)


class QueryKind(str, Enum):
    """Kinds of queries whose parsed output is cached."""

    STATUS = "status"
    RECENT_LOG = "recent_log"
    COMMIT_LOG = "commit_log"


class ResultCache:
    """Last raw text and parsed records per query.

    Entries are keyed by query kind plus the argument signature, so the same
    kind queried against a different remote never returns stale records.
    Records are stored as tuples; on a hit the very same tuple is returned,
    which lets callers detect "nothing changed" by identity.
    """

    def __init__(self):
        self._entries: dict[tuple, tuple[str, tuple]] = {}

    def get_or_parse(
        self,
        kind: QueryKind,
        raw: str,
        parse_fn: Callable[[str], Iterable[Any]],
        signature: Sequence[Hashable] = (),
    ) -> tuple:
        """
        Return cached records if ``raw`` is unchanged, else parse and store.

        Args:
            kind: Query kind
            raw: Raw command output
            parse_fn: Parser applied on a miss
            signature: Arguments that distinguish queries of the same kind

        Returns:
            Tuple of parsed records
        """
        key = (kind, tuple(signature))
        entry = self._entries.get(key)
        if entry is not None and entry[0] == raw:
            logger.debug(f"Cache hit for {kind.value} {tuple(signature)}")
            return entry[1]

        records = tuple(parse_fn(raw))
        self._entries[key] = (raw, records)
        return records

    def clear(self) -> None:
        """Forget every cached entry."""
        self._entries = {}
