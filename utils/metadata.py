import math
from typing import Any, Optional
from tinytag import TinyTag

from domain.models.track import ExtractedTags, ParsedTags, UnparsedTags
from utils.filesystem import resolve_path
from utils.logger import get_logger

logger = get_logger(__name__)

def _text(value: Any) -> Optional[str]:
    if value is None:
        return None
    return str(value).strip()

def _year(value: Any) -> Optional[int]:
    # "2004", "2004-05-01", 2004
    if value is None:
        return None
    try:
        return int(str(value).strip()[:4])
    except ValueError:
        return None

def _track_number(value: Any) -> Optional[int]:
    # "3", "3/12", 3
    if value is None:
        return None
    if isinstance(value, int):
        return value
    try:
        return int(str(value).split("/")[0].strip())
    except ValueError:
        return None

def _duration(value: Any) -> Optional[int]:
    if value is None:
        return None
    return int(math.ceil(float(value)))

def extract_track_metadata(filepath: str) -> ExtractedTags:
    """
    Read embedded tags with TinyTag.

    Never raises: an unreadable or unsupported file gives UnparsedTags,
    which is still persisted so the file is not read again.
    """
    resolved_path = resolve_path(filepath)
    if not resolved_path:
        logger.warning(f"Cannot read tags, file not found: {filepath}")
        return UnparsedTags(path=filepath, reason="file not found")

    try:
        tag = TinyTag.get(resolved_path)
        return ParsedTags(
            title=_text(tag.title),
            artist=_text(tag.artist),
            album=_text(tag.album),
            year=_year(tag.year),
            genre=_text(tag.genre),
            composer=_text(tag.composer),
            track_number=_track_number(tag.track),
            duration=_duration(tag.duration),
        )
    except Exception as e:
        logger.warning(f"Error reading metadata for {filepath}: {e}")
        return UnparsedTags(path=filepath, reason=str(e))
