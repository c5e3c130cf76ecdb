from typing import List, Optional, Set, Tuple
from datetime import datetime
from sqlmodel import Session, select
from sqlalchemy import func

from domain.models.catalog import FilesystemArtifact, TrackMetadata
from domain.models.track import TrackDescriptor

Identity = Tuple[str, str, str]

def descriptor_identity(descriptor: TrackDescriptor) -> Identity:
    return (descriptor.filepath, descriptor.filename, descriptor.extension)

class CatalogRepository:
    """
    Storage boundary for the catalog. Every write commits on its own;
    nothing here spans more than one file.
    """
    def __init__(self, session: Session):
        self.session = session

    def find_artifact(self, descriptor: TrackDescriptor) -> Optional[FilesystemArtifact]:
        relative_path, file_name, file_extension = descriptor_identity(descriptor)
        statement = select(FilesystemArtifact).where(
            FilesystemArtifact.file_name == file_name,
            FilesystemArtifact.file_extension == file_extension,
            FilesystemArtifact.relative_path == relative_path,
        )
        return self.session.exec(statement).first()

    def create_artifact(self, descriptor: TrackDescriptor) -> int:
        artifact = FilesystemArtifact(
            relative_path=descriptor.filepath,
            file_name=descriptor.filename,
            file_extension=descriptor.extension,
            is_present=True,
            first_path_segment=descriptor.artist,
            second_path_segment=descriptor.album,
            created_at=datetime.now(),
            updated_at=None,
        )
        self.session.add(artifact)
        self.session.commit()
        self.session.refresh(artifact)
        return artifact.id

    def set_present(self, artifact: FilesystemArtifact, is_present: bool) -> FilesystemArtifact:
        artifact.is_present = is_present
        artifact.updated_at = datetime.now()
        self.session.add(artifact)
        self.session.commit()
        self.session.refresh(artifact)
        return artifact

    def has_metadata(self, artifact_id: int) -> bool:
        statement = select(TrackMetadata.filesystem_artifact_id).where(
            TrackMetadata.filesystem_artifact_id == artifact_id
        )
        return self.session.exec(statement).first() is not None

    def save_metadata(self, metadata: TrackMetadata) -> TrackMetadata:
        self.session.add(metadata)
        self.session.commit()
        self.session.refresh(metadata)
        return metadata

    def find_present_artifacts(self) -> List[FilesystemArtifact]:
        statement = select(FilesystemArtifact).where(FilesystemArtifact.is_present == True)  # noqa: E712
        return self.session.exec(statement).all()

    def mark_missing(self, present_identities: Set[Identity]) -> int:
        """Flag present artifacts whose identity is not in `present_identities`."""
        now = datetime.now()
        missing = [
            artifact for artifact in self.find_present_artifacts()
            if artifact.identity not in present_identities
        ]
        for artifact in missing:
            artifact.is_present = False
            artifact.updated_at = now
            self.session.add(artifact)
        if missing:
            self.session.commit()
        return len(missing)

    def count_artifacts(self, is_present: Optional[bool] = None) -> int:
        statement = select(func.count()).select_from(FilesystemArtifact)
        if is_present is not None:
            statement = statement.where(FilesystemArtifact.is_present == is_present)
        return self.session.exec(statement).one()

    def count_metadata(self) -> int:
        return self.session.exec(select(func.count()).select_from(TrackMetadata)).one()
