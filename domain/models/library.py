from typing import Iterator, Optional, Tuple
from datetime import datetime
from pydantic import BaseModel, ConfigDict, Field

from domain.models.track import Song

class LibrarySnapshot(BaseModel):
    """
    The songs found by one startup scan, sorted by (artist, album, filename).

    Built once and then only read; request handlers share the same instance.
    """
    model_config = ConfigDict(frozen=True)

    version: int
    root: str
    scanned_at: datetime = Field(default_factory=datetime.now)
    songs: Tuple[Song, ...] = ()

    def get(self, song_id: int) -> Optional[Song]:
        # ids are positions in the sorted scan
        if 0 <= song_id < len(self.songs):
            return self.songs[song_id]
        return None

    def __len__(self) -> int:
        return len(self.songs)

    def __iter__(self) -> Iterator[Song]:
        return iter(self.songs)
