from sqlmodel import SQLModel

class CatalogStats(SQLModel):
    total_artifacts: int
    present_artifacts: int
    missing_artifacts: int
    metadata_records: int
