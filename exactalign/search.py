"""Exact search of patterns in a sequence and the checksums of the result."""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from itertools import accumulate
from typing import Iterable, Sequence

CHECKSUM_MAX = 65535


def find_first(sequence: str, pattern: str) -> int | None:
    """Return the first start of ``pattern`` in ``sequence``, or None."""
    if not pattern or len(pattern) > len(sequence):
        return None
    position = sequence.find(pattern)
    return None if position < 0 else position


@dataclass(frozen=True)
class AlignmentResult:
    """Where each pattern was first found and how often each position is covered."""

    found: tuple[int | None, ...]
    pattern_lengths: tuple[int, ...]
    coverage: tuple[int, ...]

    @property
    def matches(self) -> int:
        """Number of patterns found in the sequence."""
        return sum(1 for start in self.found if start is not None)

    def checksums(self) -> tuple[int, int]:
        """Return the checksum of the found starts and of the position matches.

        A position covered by ``n`` found patterns contributes ``n - 1``;
        uncovered positions contribute nothing.
        """
        found_sum = sum(start for start in self.found if start is not None)
        matches_sum = sum(count - 1 for count in self.coverage if count)
        return found_sum % CHECKSUM_MAX, matches_sum % CHECKSUM_MAX

    def summary(self) -> str:
        """The one-line result: matches and both checksums."""
        checksum_found, checksum_matches = self.checksums()
        return f"Result: {self.matches}, {checksum_found}, {checksum_matches}"


def _coverage(
    seq_length: int, found: Iterable[int | None], lengths: Iterable[int]
) -> tuple[int, ...]:
    deltas = [0] * (seq_length + 1)
    for start, length in zip(found, lengths):
        if start is None:
            continue
        deltas[start] += 1
        deltas[start + length] -= 1
    return tuple(accumulate(deltas[:seq_length]))


def align(
    sequence: str, patterns: Sequence[str], workers: int | None = None
) -> AlignmentResult:
    """Search every pattern in ``sequence``, optionally with worker threads."""
    if workers is not None and workers < 1:
        raise ValueError("workers must be at least 1")
    if workers is None or workers == 1:
        found = tuple(find_first(sequence, pattern) for pattern in patterns)
    else:
        with ThreadPoolExecutor(max_workers=workers) as pool:
            found = tuple(pool.map(lambda pattern: find_first(sequence, pattern), patterns))
    lengths = tuple(len(pattern) for pattern in patterns)
    return AlignmentResult(found, lengths, _coverage(len(sequence), found, lengths))