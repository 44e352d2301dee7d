# 📄 File: authuser/modules/user_management/domain/repositories/__init__.py
# 🧭 Purpose (Layman Explanation):
# Contracts for storing users.
# 🧪 Purpose (Technical Summary):
# Repository interface and listing filter exports.
# 🔗 Dependencies:
# user_repository.py
# 🔄 Connected Modules / Calls From:
# user_service.py, infrastructure implementations

from .user_repository import UserFilter, UserRepository

__all__ = ["UserFilter", "UserRepository"]
