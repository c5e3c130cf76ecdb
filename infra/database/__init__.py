# Database module
from .connection import get_session, init_db, close_db
