# 📄 File: authuser/modules/user_management/domain/services/__init__.py
# 🧭 Purpose (Layman Explanation):
# The rules for managing users.
# 🧪 Purpose (Technical Summary):
# Domain service exports.
# 🔗 Dependencies:
# user_service.py
# 🔄 Connected Modules / Calls From:
# presentation/dependencies.py

from .user_service import UserService

__all__ = ["UserService"]
