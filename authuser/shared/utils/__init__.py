# 📄 File: authuser/shared/utils/__init__.py
# 🧭 Purpose (Layman Explanation):
# Small helpers shared across the user service.
# 🧪 Purpose (Technical Summary):
# Utility package exports (structured logging setup and request context).
# 🔗 Dependencies:
# logging.py
# 🔄 Connected Modules / Calls From:
# authuser.main, API middleware, all module loggers

from .logging import get_logger, log_context, request_id_var, setup_logging

__all__ = [
    "get_logger",
    "log_context",
    "request_id_var",
    "setup_logging",
]
