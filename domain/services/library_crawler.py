import os
from pathlib import Path
from typing import Iterable, List, Union

from domain.models.track import TrackDescriptor
from domain.services.path_classifier import classify
from utils.logger import get_logger

logger = get_logger(__name__)

def _relative_to(base_path: str, path: str) -> str:
    rel_path = os.path.relpath(path, base_path)
    # classification segments on "/"
    return Path(rel_path).as_posix()

def crawl_dir(
    allowed_extensions: Iterable[str],
    base_path: Union[str, Path],
    directory: Union[str, Path],
) -> List[TrackDescriptor]:
    """
    Walk `directory` and classify every file relative to `base_path`.

    Order follows the directory listings; callers sort. Any OSError from
    listing a directory aborts the crawl and is raised as-is.
    """
    allowed = frozenset(allowed_extensions)
    base_path = os.fspath(base_path)
    directory = os.fspath(directory)

    if not os.path.isdir(directory):
        return []

    entries: List[TrackDescriptor] = []
    pending = [directory]

    while pending:
        current = pending.pop()
        logger.debug(f"Scanning {current}")

        with os.scandir(current) as it:
            for entry in it:
                if entry.is_dir():
                    pending.append(entry.path)
                    continue

                descriptor = classify(allowed, _relative_to(base_path, entry.path))
                if descriptor:
                    entries.append(descriptor)

    logger.info(f"Crawled {directory}: {len(entries)} tracks")
    return entries
