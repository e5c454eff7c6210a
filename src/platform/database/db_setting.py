"""
Database configuration entry point

Re-exports the SQLAlchemy pieces from orm_db_setting so models and repos import from one place.
"""

from src.platform.database.orm_db_setting import (
    AsyncEngineManager,
    Base,
    Database,
    create_db_and_tables,
    dispose_engine,
    get_engine,
    get_session_maker,
)

__all__ = [
    'AsyncEngineManager',
    'Base',
    'Database',
    'create_db_and_tables',
    'dispose_engine',
    'get_engine',
    'get_session_maker',
]
