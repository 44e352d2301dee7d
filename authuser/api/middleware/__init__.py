# 📄 File: authuser/api/middleware/__init__.py
# 🧭 Purpose (Layman Explanation):
# Checks that run around every request: error catching and request logging.
# 🧪 Purpose (Technical Summary):
# Middleware and exception handler exports.
# 🔗 Dependencies:
# error_handling.py, logging.py
# 🔄 Connected Modules / Calls From:
# authuser.main

from .error_handling import (
    ErrorHandlingMiddleware,
    auth_user_exception_handler,
    build_error_body,
    http_exception_handler,
)
from .logging import RequestLoggingMiddleware

__all__ = [
    "ErrorHandlingMiddleware",
    "RequestLoggingMiddleware",
    "auth_user_exception_handler",
    "build_error_body",
    "http_exception_handler",
]
