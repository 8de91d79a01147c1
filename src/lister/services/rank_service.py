# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

from __future__ import annotations

import heapq
import logging
import math
import os
import time
from operator import itemgetter
from pathlib import Path
from typing import Callable, Iterable, Iterator, Optional, Tuple, Union

from ..config import parse_sort_key
from ..domain.errors import InvalidArgument, TimestampUnavailable
from ..domain.models import FileCandidate, RankedEntry, SortKey

logger = logging.getLogger(__name__)

# On Windows st_ctime is the creation time; elsewhere it is inode change time.
_CTIME_IS_CREATION = os.name == "nt"


def timestamp_of(
    metadata: Optional[os.stat_result], sort_key: Union[SortKey, str]
) -> int:
    """
    Whole seconds since the epoch for the requested timestamp.

    Raises:
        TimestampUnavailable: no metadata, no such field on this platform,
            or a value that is not a finite, non-negative number.
        InvalidArgument: for an unknown sort key.
    """
    sort_key = parse_sort_key(sort_key)
    if metadata is None:
        raise TimestampUnavailable("no metadata")

    if sort_key is SortKey.MODIFIED:
        value = getattr(metadata, "st_mtime", None)
    else:
        value = getattr(metadata, "st_birthtime", None)
        if value is None and _CTIME_IS_CREATION:
            value = getattr(metadata, "st_ctime", None)
    if value is None:
        raise TimestampUnavailable(f"{sort_key.value} time not supported here")

    try:
        value = float(value)
    except (TypeError, ValueError) as e:
        raise TimestampUnavailable(f"bad {sort_key.value} time {value!r}") from e
    if not math.isfinite(value) or value < 0:
        raise TimestampUnavailable(f"{sort_key.value} time out of range: {value}")
    return int(value)


def resolve_timestamp(
    metadata: Optional[os.stat_result], sort_key: Union[SortKey, str]
) -> Optional[int]:
    """Like timestamp_of, but None when the timestamp is unavailable."""
    try:
        return timestamp_of(metadata, sort_key)
    except TimestampUnavailable:
        return None


class RankService:
    """
    Picks the N most recent candidates, newest first.

    Timestamps that cannot be read are replaced by a single fallback, the
    wall-clock time captured once when ranking starts. Since the fallback is
    "now", such files usually land near the top of the listing rather than
    the bottom; that is the documented behaviour, not a bug to paper over.

    Selection uses a bounded heap (heapq.nlargest), so a large tree is never
    fully sorted when N is small. Equal timestamps keep arrival order; there
    is no secondary key.
    """

    def __init__(self, clock: Callable[[], float] = time.time) -> None:
        self._clock = clock

    def rank(
        self,
        candidates: Iterable[FileCandidate],
        root: Union[str, Path],
        n: int,
        sort_key: Union[SortKey, str] = SortKey.MODIFIED,
    ) -> list[RankedEntry]:
        """
        Returns:
            min(n, number of candidates) entries with root-relative paths.

        Raises:
            InvalidArgument: for a negative `n` or an unknown sort key.
        """
        if n < 0:
            raise InvalidArgument(f"Result count must be >= 0, got {n}")
        sort_key = parse_sort_key(sort_key)
        if n == 0:
            return []

        root = os.fspath(root)
        fallback = int(self._clock())

        top = heapq.nlargest(
            n, self._stamped(candidates, sort_key, fallback), key=itemgetter(0)
        )
        return [
            RankedEntry(path=os.path.relpath(path, root), timestamp=ts)
            for ts, path in top
        ]

    @staticmethod
    def _stamped(
        candidates: Iterable[FileCandidate], sort_key: SortKey, fallback: int
    ) -> Iterator[Tuple[int, str]]:
        for c in candidates:
            ts = resolve_timestamp(c.metadata, sort_key)
            if ts is None:
                logger.debug("Using fallback timestamp for %s", c.path)
                ts = fallback
            yield ts, c.path
