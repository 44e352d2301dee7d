# 📄 File: authuser/api/v1/__init__.py
# 🧭 Purpose (Layman Explanation):
# Version 1 of the user service's web interface.
# 🧪 Purpose (Technical Summary):
# API v1 package (aggregate router, health endpoints).
# 🔗 Dependencies:
# router.py, health.py
# 🔄 Connected Modules / Calls From:
# authuser.main

from .router import api_v1_router

__all__ = ["api_v1_router"]
