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

import logging
from pathlib import Path
from typing import Iterable, Iterator, Optional, Union

from ..domain.models import RankedEntry, SortKey
from ..ports.filesystem import FilesystemPort
from .rank_service import RankService

logger = logging.getLogger(__name__)


class ListingService:
    """
    Walk -> rank -> lines.

    Ranking consumes the whole walk before any line is produced, so a failed
    run (RootInaccessible) never leaves partial output behind.
    """

    def __init__(self, walker: FilesystemPort, ranker: Optional[RankService] = None) -> None:
        self._walker = walker
        self._ranker = ranker or RankService()

    def run(
        self,
        root: Union[str, Path],
        n: int,
        sort_key: Union[SortKey, str] = SortKey.MODIFIED,
    ) -> list[RankedEntry]:
        candidates = self._walker.walk(root)
        entries = self._ranker.rank(candidates, root, n, sort_key)
        logger.debug("Listing %d entries from %s", len(entries), root)
        return entries

    @staticmethod
    def lines(entries: Iterable[RankedEntry]) -> Iterator[str]:
        """One relative path per entry, unescaped, in ranked order."""
        for entry in entries:
            yield entry.path
