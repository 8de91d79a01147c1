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
from typing import Optional

import typer

from .. import __version__
from ..adapters.filesystem.local_walker import LocalWalker
from ..config import DEFAULT_RESULT_COUNT, parse_result_count
from ..domain.errors import InvalidArgument, RootInaccessible
from ..domain.models import SortKey
from ..services import ListingService, RankService

from ..logging_config import setup_logging

setup_logging()

app = typer.Typer(
    help="Recursively list files by most-recently-modified or -created times",
    add_completion=False,
)

logger = logging.getLogger(__name__)


def _parse_count(value: Optional[str]) -> int:
    """
    Parse and validate -n/--number-of-results.
    Raises Typer BadParameter if the value is not a non-negative integer.
    """
    try:
        return parse_result_count(value)
    except InvalidArgument:
        raise typer.BadParameter(
            "Please pass a number to -n/--number-of-results."
        ) from None


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"lister {__version__}")
        raise typer.Exit()


def _wire() -> ListingService:
    """
    Minimal composition root:
      LocalWalker + RankService
    """
    walker = LocalWalker()
    logger.debug("LocalWalker using %d worker(s)", walker.worker_count())
    return ListingService(walker, RankService())


@app.command()
def main(
    directory: Path = typer.Argument(
        Path("."),
        help="Directory to walk through (defaults to current directory)",
        show_default=False,
    ),
    number_of_results: Optional[str] = typer.Option(
        None,
        "--number-of-results",
        "-n",
        metavar="N",
        help=f"Number of results to print (default {DEFAULT_RESULT_COUNT})",
    ),
    sort_by: SortKey = typer.Option(
        SortKey.MODIFIED,
        "--sort-by",
        "-s",
        case_sensitive=False,
        help="Sort by an attribute (defaults to modified)",
        show_default=False,
    ),
    verbose: bool = typer.Option(
        False, "--verbose", help="Report skipped entries on stderr"
    ),
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show the version and exit.",
    ),
):
    """
    Print the N most recent files under DIRECTORY, newest first, one path
    per line relative to DIRECTORY. Hidden files and directories are skipped.
    """
    if verbose:
        logging.getLogger().setLevel(logging.DEBUG)
        logger.debug("Verbose logging enabled")

    count = _parse_count(number_of_results)
    listing = _wire()

    try:
        entries = listing.run(directory, count, sort_by)
    except RootInaccessible as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1) from e

    for line in listing.lines(entries):
        typer.echo(line)
