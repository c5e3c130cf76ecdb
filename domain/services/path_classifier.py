from pathlib import PurePath
from typing import Iterable, Optional, Union

from domain.constants import UNKNOWN_SEGMENT, TRACK_PATH_SEGMENTS, PATH_SEPARATOR
from domain.models.track import TrackDescriptor

def _split_extension(name: str) -> Optional[str]:
    stem, dot, extension = name.rpartition(".")
    # "noext" and ".hidden" have no extension
    if not dot or not stem:
        return None
    return extension

def classify(allowed_extensions: Iterable[str], relative_path: Union[str, PurePath]) -> Optional[TrackDescriptor]:
    """
    Decide whether a scan-root-relative path is a track and derive its identity.

    Artist and album come from the path only when it is exactly
    <artist>/<album>/<file>; any other depth falls back to "Unknown".
    """
    filepath = str(relative_path)
    name = filepath.rsplit(PATH_SEPARATOR, 1)[-1]

    extension = _split_extension(name)
    if extension is None or extension not in allowed_extensions:
        return None

    segments = filepath.split(PATH_SEPARATOR)
    if len(segments) == TRACK_PATH_SEGMENTS:
        artist, album = segments[0], segments[1]
    else:
        artist, album = UNKNOWN_SEGMENT, UNKNOWN_SEGMENT

    # Textual replace: "a.mp3.live.mp3" becomes "a.live"
    filename = name.replace(f".{extension}", "")

    return TrackDescriptor(
        filename=filename,
        filepath=filepath,
        extension=extension,
        artist=artist,
        album=album,
        full_path=filepath,
    )
