"""Scoped change of the process working directory."""

from __future__ import annotations

import logging
import os
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, Optional, Union

logger = logging.getLogger(__name__)


@contextmanager
def working_directory(target: Optional[Union[str, Path]]) -> Iterator[Path]:
    """Switch to *target* for the duration of the block, then switch back.

    The original directory is restored even when the block raises. A
    ``None`` target leaves the working directory alone.
    """
    original = Path.cwd()
    if target is None:
        yield original
        return

    logger.debug("changing directory to %s", target)
    os.chdir(target)
    try:
        yield Path.cwd()
    finally:
        logger.debug("returning to original directory %s", original)
        os.chdir(original)
