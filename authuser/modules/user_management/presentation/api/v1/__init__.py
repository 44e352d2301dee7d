# 📄 File: authuser/modules/user_management/presentation/api/v1/__init__.py
# 🧭 Purpose (Layman Explanation):
# The user module's web endpoints.
# 🧪 Purpose (Technical Summary):
# Router exports (auth, users, instructors).
# 🔗 Dependencies:
# auth.py, users.py, instructors.py
# 🔄 Connected Modules / Calls From:
# authuser.api.router

from .auth import auth_router
from .instructors import instructors_router
from .users import users_router

__all__ = ["auth_router", "instructors_router", "users_router"]
