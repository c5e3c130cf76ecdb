import itertools
from pathlib import Path
from typing import Iterable, List, Optional, Union
from sqlmodel import Session

from config import settings
import infra.database.connection as db_connection
from domain.models.catalog import ScanReport
from domain.models.library import LibrarySnapshot
from domain.models.track import TrackDescriptor
from domain.services.catalog_reconciler import CatalogReconciler
from domain.services.library_crawler import crawl_dir
from utils.logger import get_logger

logger = get_logger(__name__)

_versions = itertools.count(1)

def sort_descriptors(descriptors: Iterable[TrackDescriptor]) -> List[TrackDescriptor]:
    return sorted(descriptors, key=lambda d: d.sort_key)

class LibraryAppService:
    def __init__(self, root: Union[str, Path, None] = None, allowed_extensions: Optional[Iterable[str]] = None):
        self.root = str(root if root is not None else settings.MUS_DIR)
        self.allowed_extensions = frozenset(
            allowed_extensions if allowed_extensions is not None else settings.ALLOWED_EXTENSIONS
        )

    def load_library(self) -> LibrarySnapshot:
        """Crawl the music root and number the sorted result."""
        logger.info(f"Loading library from {self.root}...")
        descriptors = sort_descriptors(crawl_dir(self.allowed_extensions, self.root, self.root))
        snapshot = LibrarySnapshot(
            version=next(_versions),
            root=self.root,
            songs=tuple(d.with_id(index) for index, d in enumerate(descriptors)),
        )
        logger.info(f"Done loading library. Loaded {len(snapshot)} songs")
        return snapshot

    def reconcile_catalog(self, snapshot: LibrarySnapshot, session: Optional[Session] = None) -> ScanReport:
        if session is not None:
            return CatalogReconciler(session).startup_scan(snapshot.root, snapshot.songs)

        with Session(db_connection.engine) as session:
            return CatalogReconciler(session).startup_scan(snapshot.root, snapshot.songs)

    def startup(self) -> LibrarySnapshot:
        """Scan, then reconcile the catalog. Errors propagate and stop startup."""
        snapshot = self.load_library()
        if settings.SCAN_ON_STARTUP:
            self.reconcile_catalog(snapshot)
        return snapshot
