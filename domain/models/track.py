from typing import Optional, Union
from pydantic import BaseModel, ConfigDict

from domain.models.catalog import TrackMetadata

class TrackDescriptor(BaseModel):
    """
    A file found during a scan, before it is matched against the catalog.

    `filepath` is relative to the scan root and is the identity key.
    `full_path` carries the same relative path for later absolute resolution.
    """
    model_config = ConfigDict(frozen=True)

    filename: str
    filepath: str
    extension: str
    artist: str
    album: str
    full_path: str

    def with_id(self, song_id: int) -> "Song":
        return Song(id=song_id, **self.model_dump())

    @property
    def sort_key(self):
        return (self.artist, self.album, self.filename)

class Song(TrackDescriptor):
    """A descriptor numbered by its position in the sorted scan."""
    id: int

class ParsedTags(BaseModel):
    """Tags read from a file. Fields missing in the file stay None."""
    model_config = ConfigDict(frozen=True)

    title: Optional[str] = None
    artist: Optional[str] = None
    album: Optional[str] = None
    year: Optional[int] = None
    genre: Optional[str] = None
    composer: Optional[str] = None
    track_number: Optional[int] = None
    duration: Optional[int] = None

    def to_metadata(self, artifact_id: int) -> TrackMetadata:
        return TrackMetadata(
            filesystem_artifact_id=artifact_id,
            artist=self.artist,
            album=self.album,
            track_name=self.title,
            genre=self.genre,
            composer=self.composer,
            release_year=self.year,
            track_number=self.track_number,
            duration=self.duration,
        )

class UnparsedTags(BaseModel):
    """Tags could not be read. Still persisted, as an all-NULL record."""
    model_config = ConfigDict(frozen=True)

    path: str
    reason: str = ""

    def to_metadata(self, artifact_id: int) -> TrackMetadata:
        return TrackMetadata(filesystem_artifact_id=artifact_id)

ExtractedTags = Union[ParsedTags, UnparsedTags]
