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
import os
from concurrent.futures import FIRST_COMPLETED, ThreadPoolExecutor, wait
from pathlib import Path
from typing import Iterator, List, Optional, Tuple, Union

from ...config import MAX_WALK_WORKERS, is_hidden, walk_worker_count
from ...domain.errors import EntryUnreadable, RootInaccessible
from ...domain.models import FileCandidate
from ...ports.filesystem import FilesystemPort

logger = logging.getLogger(__name__)

Listing = Tuple[List[FileCandidate], List[str]]


def _list_directory(path: str) -> Listing:
    """
    List one directory: regular files become candidates, subdirectories are
    returned for the caller to schedule.

    Hidden entries are dropped here, before recursion, so a hidden directory
    is never opened. Symlinks are never followed: a link to a directory is
    not descended into and a link to a file is not a regular file.

    If reading the directory fails partway through, the entries read so far
    are kept and the rest are skipped.

    Raises:
        EntryUnreadable: if the directory cannot be opened at all.
    """
    candidates: List[FileCandidate] = []
    subdirs: List[str] = []
    try:
        scanner = os.scandir(path)
    except OSError as e:
        raise EntryUnreadable(path, e) from e

    with scanner as it:
        entries = iter(it)
        while True:
            try:
                entry = next(entries)
            except StopIteration:
                break
            except OSError as e:
                logger.debug("Listing of %s cut short: %s", path, e)
                break

            if is_hidden(entry.name):
                continue
            try:
                if entry.is_dir(follow_symlinks=False):
                    subdirs.append(entry.path)
                    continue
                if not entry.is_file(follow_symlinks=False):
                    continue
            except OSError as e:
                logger.debug("Skipping %s: %s", entry.path, e)
                continue

            # Listed fine; a failed stat still yields a candidate, and the
            # ranker substitutes its fallback timestamp.
            try:
                meta: Optional[os.stat_result] = entry.stat(follow_symlinks=False)
            except OSError as e:
                logger.debug("stat failed for %s: %s", entry.path, e)
                meta = None
            candidates.append(FileCandidate(entry.path, meta))
    return candidates, subdirs


def _list_subdirectory(path: str) -> Listing:
    try:
        return _list_directory(path)
    except EntryUnreadable as e:
        logger.debug("Skipping unreadable directory %s", e)
        return [], []


class LocalWalker(FilesystemPort):
    """
    Local filesystem walker backed by os.scandir.

    Directory listing and the per-file stat calls run on a small thread pool;
    each job lists one directory and hands back (candidates, subdirectories),
    and the calling thread schedules the subdirectories as new jobs. Workers
    share no state. With a worker count of 0 the walk runs in the caller.
    """

    def __init__(self, max_workers: Optional[int] = None) -> None:
        if max_workers is None:
            max_workers = walk_worker_count()
        self._max_workers = max(0, min(MAX_WALK_WORKERS, int(max_workers)))

    def worker_count(self) -> int:
        return self._max_workers

    def walk(self, root: Union[str, Path]) -> Iterator[FileCandidate]:
        root = os.fspath(root)
        # The root is listed eagerly so that a bad root fails here, before
        # the caller consumes anything.
        try:
            candidates, pending = _list_directory(root)
        except EntryUnreadable as e:
            raise RootInaccessible(root, e.cause) from e
        logger.debug(
            "Walking %s with %d worker(s)", root, self._max_workers
        )
        if self._max_workers == 0:
            return self._walk_serial(candidates, pending)
        return self._walk_parallel(candidates, pending)

    def _walk_serial(
        self, candidates: List[FileCandidate], pending: List[str]
    ) -> Iterator[FileCandidate]:
        yield from candidates
        while pending:
            found, subdirs = _list_subdirectory(pending.pop())
            pending.extend(subdirs)
            yield from found

    def _walk_parallel(
        self, candidates: List[FileCandidate], pending: List[str]
    ) -> Iterator[FileCandidate]:
        yield from candidates
        if not pending:
            return
        with ThreadPoolExecutor(
            max_workers=self._max_workers, thread_name_prefix="lister-walk"
        ) as pool:
            running = {pool.submit(_list_subdirectory, d) for d in pending}
            while running:
                done, running = wait(running, return_when=FIRST_COMPLETED)
                for future in done:
                    found, subdirs = future.result()
                    running.update(pool.submit(_list_subdirectory, d) for d in subdirs)
                    yield from found
