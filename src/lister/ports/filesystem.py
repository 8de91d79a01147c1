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

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Iterator, Union

from ..domain.models import FileCandidate


class FilesystemPort(ABC):
    """Abstract interface for walking a directory tree."""

    @abstractmethod
    def walk(self, root: Union[str, Path]) -> Iterator[FileCandidate]:
        """
        Return every accessible, non-hidden regular file under `root`.

        Implementations must raise RootInaccessible before yielding anything
        when `root` itself cannot be listed. Order is unspecified.
        """
        raise NotImplementedError
