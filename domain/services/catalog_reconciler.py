from pathlib import Path
from typing import Sequence, Union
from sqlmodel import Session
from sqlalchemy.exc import SQLAlchemyError

from domain.models.catalog import ScanReport
from domain.models.track import TrackDescriptor, UnparsedTags
from infra.repositories.catalog_repository import CatalogRepository, descriptor_identity
from utils.filesystem import library_path
from utils.metadata import extract_track_metadata
from utils.logger import get_logger

logger = get_logger(__name__)

class CatalogReconciler:
    """
    Aligns the catalog with the descriptors of one scan.

    Files are handled one at a time on the session given at construction.
    A storage error stops the run; rows committed for earlier files stay.
    """
    def __init__(self, session: Session):
        self.session = session
        self.repository = CatalogRepository(session)

    def _find_or_create_artifact(self, descriptor: TrackDescriptor, report: ScanReport) -> int:
        artifact = self.repository.find_artifact(descriptor)
        if artifact is None:
            report.created += 1
            return self.repository.create_artifact(descriptor)

        report.existing += 1
        if not artifact.is_present:
            # back on disk after being flagged missing
            self.repository.set_present(artifact, True)
            report.restored += 1
        return artifact.id

    def _save_metadata(self, base_path: Union[str, Path], descriptor: TrackDescriptor, artifact_id: int, report: ScanReport):
        tags = extract_track_metadata(library_path(base_path, descriptor.full_path))
        if isinstance(tags, UnparsedTags):
            report.metadata_unparsed += 1
        self.repository.save_metadata(tags.to_metadata(artifact_id))
        report.metadata_created += 1

    def reconcile(self, base_path: Union[str, Path], descriptor: TrackDescriptor, report: ScanReport) -> int:
        artifact_id = self._find_or_create_artifact(descriptor, report)
        if not self.repository.has_metadata(artifact_id):
            self._save_metadata(base_path, descriptor, artifact_id, report)
        report.scanned += 1
        return artifact_id

    def startup_scan(self, base_path: Union[str, Path], descriptors: Sequence[TrackDescriptor]) -> ScanReport:
        report = ScanReport()
        try:
            for descriptor in descriptors:
                self.reconcile(base_path, descriptor, report)

            identities = {descriptor_identity(d) for d in descriptors}
            report.marked_missing = self.repository.mark_missing(identities)
        except SQLAlchemyError as e:
            logger.error(f"Catalog reconciliation aborted after {report.scanned} files: {e}")
            raise

        logger.info(
            f"Catalog reconciled: {report.scanned} files, {report.created} new, "
            f"{report.metadata_created} metadata records ({report.metadata_unparsed} unparsed), "
            f"{report.restored} restored, {report.marked_missing} missing"
        )
        return report
