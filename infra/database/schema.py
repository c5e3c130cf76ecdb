from sqlalchemy import text
from sqlalchemy.engine import Engine
from utils.logger import get_logger

logger = get_logger(__name__)

CURRENT_SCHEMA_VERSION = 1

def get_db_schema_sql() -> str:
    """
    DuckDB has trouble updating rows in tables referenced by a FOREIGN KEY,
    so track_metadata keys on the artifact id without a physical constraint.
    The identity triple is enforced with a UNIQUE constraint instead.
    """
    return """
    CREATE SEQUENCE IF NOT EXISTS seq_filesystem_artifacts_id START 1;

    CREATE TABLE IF NOT EXISTS filesystem_artifacts (
        id INTEGER PRIMARY KEY DEFAULT nextval('seq_filesystem_artifacts_id'),
        relative_path VARCHAR NOT NULL,
        file_name VARCHAR NOT NULL,
        file_extension VARCHAR NOT NULL,
        is_present BOOLEAN DEFAULT TRUE,
        first_path_segment VARCHAR,
        second_path_segment VARCHAR,
        created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP,
        updated_at TIMESTAMP,
        UNIQUE (relative_path, file_name, file_extension)
    );

    CREATE TABLE IF NOT EXISTS track_metadata (
        filesystem_artifact_id INTEGER PRIMARY KEY,
        artist VARCHAR,
        album VARCHAR,
        track_name VARCHAR,
        genre VARCHAR,
        composer VARCHAR,
        release_year INTEGER,
        track_number INTEGER,
        duration INTEGER
    );

    CREATE TABLE IF NOT EXISTS schema_info (
        key VARCHAR PRIMARY KEY,
        value VARCHAR NOT NULL
    );
    """

def get_current_schema_version(conn) -> int:
    result = conn.execute(text("SELECT value FROM schema_info WHERE key = 'version'"))
    row = result.fetchone()
    return int(row[0]) if row else 0

def set_schema_version(conn, version: int):
    conn.execute(text("""
        INSERT INTO schema_info (key, value) VALUES ('version', :version)
        ON CONFLICT (key) DO UPDATE SET value = :version
    """), {"version": str(version)})

def init_raw_db(conn_engine: Engine):
    logger.info("Initializing DuckDB schema...")
    try:
        with conn_engine.begin() as conn:
            statements = [s.strip() for s in get_db_schema_sql().split(';') if s.strip()]
            for stmt in statements:
                conn.execute(text(stmt))

            current_version = get_current_schema_version(conn)
            if current_version < CURRENT_SCHEMA_VERSION:
                set_schema_version(conn, CURRENT_SCHEMA_VERSION)
    except Exception as e:
        logger.error(f"Failed to initialize database schema: {e}")
        raise
