from fastapi import APIRouter, Depends
from sqlmodel import Session
import duckdb
from infra.database import get_session
from infra.repositories.catalog_repository import CatalogRepository
from api.schemas.catalog import CatalogStats

router = APIRouter()

@router.get("/api/")
def health_check():
    return {
        "status": "ok",
        "duckdb_version": duckdb.__version__,
    }

@router.get("/api/catalog/stats", response_model=CatalogStats)
def get_catalog_stats(session: Session = Depends(get_session)):
    """Counts over the persistent catalog, including files no longer on disk."""
    repository = CatalogRepository(session)
    return CatalogStats(
        total_artifacts=repository.count_artifacts(),
        present_artifacts=repository.count_artifacts(is_present=True),
        missing_artifacts=repository.count_artifacts(is_present=False),
        metadata_records=repository.count_metadata(),
    )
