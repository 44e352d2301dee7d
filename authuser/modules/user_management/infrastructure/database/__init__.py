# 📄 File: authuser/modules/user_management/infrastructure/database/__init__.py
# 🧭 Purpose (Layman Explanation):
# Where users are actually stored.
# 🧪 Purpose (Technical Summary):
# ORM model and SQLAlchemy repository exports.
# 🔗 Dependencies:
# models.py, user_repository_impl.py
# 🔄 Connected Modules / Calls From:
# presentation/dependencies.py, migrations/env.py

from .models import UserModel
from .user_repository_impl import UserRepositoryImpl

__all__ = ["UserModel", "UserRepositoryImpl"]
