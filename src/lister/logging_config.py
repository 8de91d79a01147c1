# Licensed under the Apache License, Version 2.0
import logging


def setup_logging(level: int = logging.WARNING) -> None:
    # basicConfig writes to stderr; stdout is reserved for result paths.
    fmt = "%(asctime)s %(levelname)s %(name)s: %(message)s"
    logging.basicConfig(level=level, format=fmt)
