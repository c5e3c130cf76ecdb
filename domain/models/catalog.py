from typing import Optional
from datetime import datetime
from sqlalchemy import Column, DateTime
from pydantic import NaiveDatetime
from sqlmodel import Field, SQLModel

class FilesystemArtifact(SQLModel, table=True):
    """
    One audio file ever observed under the music root.

    Identity is (relative_path, file_name, file_extension). Rows are never
    deleted; files gone from disk are flagged with is_present = False.
    """
    __tablename__ = "filesystem_artifacts"

    id: Optional[int] = Field(default=None, primary_key=True)
    relative_path: str = Field(index=True, nullable=False)
    file_name: str = Field(nullable=False)
    file_extension: str = Field(nullable=False)
    is_present: bool = Field(default=True)

    # artist/album as laid out on disk when first seen
    first_path_segment: Optional[str] = None
    second_path_segment: Optional[str] = None

    # naive local time, stored as plain TIMESTAMP
    created_at: NaiveDatetime = Field(default_factory=datetime.now, sa_column=Column(DateTime, nullable=False))
    updated_at: Optional[NaiveDatetime] = Field(default=None, sa_column=Column(DateTime, nullable=True))

    @property
    def identity(self):
        return (self.relative_path, self.file_name, self.file_extension)

class TrackMetadata(SQLModel, table=True):
    """Tags read once from an artifact. Every content column is nullable."""
    __tablename__ = "track_metadata"

    filesystem_artifact_id: int = Field(primary_key=True)
    artist: Optional[str] = None
    album: Optional[str] = None
    track_name: Optional[str] = None
    genre: Optional[str] = None
    composer: Optional[str] = None
    release_year: Optional[int] = None
    track_number: Optional[int] = None
    duration: Optional[int] = None

class ScanReport(SQLModel):
    scanned: int = 0
    created: int = 0
    existing: int = 0
    restored: int = 0
    metadata_created: int = 0
    metadata_unparsed: int = 0
    marked_missing: int = 0
