# 📄 File: authuser/shared/infrastructure/database/__init__.py
# 🧭 Purpose (Layman Explanation):
# Everything needed to reach the user database.
# 🧪 Purpose (Technical Summary):
# Database package exports: declarative Base, engine lifecycle and session dependency.
# 🔗 Dependencies:
# connection.py, session.py
# 🔄 Connected Modules / Calls From:
# authuser.main, repository implementations, migrations/env.py

from .connection import (
    Base,
    close_database,
    database_health_check,
    db_manager,
    get_database_engine,
    init_database,
)
from .session import get_db_session, initialize_sessions, session_manager

__all__ = [
    "Base",
    "close_database",
    "database_health_check",
    "db_manager",
    "get_database_engine",
    "get_db_session",
    "init_database",
    "initialize_sessions",
    "session_manager",
]
