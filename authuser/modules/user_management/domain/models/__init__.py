# 📄 File: authuser/modules/user_management/domain/models/__init__.py
# 🧭 Purpose (Layman Explanation):
# The things this module talks about: users and the courses they follow.
# 🧪 Purpose (Technical Summary):
# Domain model exports.
# 🔗 Dependencies:
# user.py, course.py
# 🔄 Connected Modules / Calls From:
# Services, repositories, API layer

from .course import CourseSummary
from .user import User, UserStatus, UserType, utc_now

__all__ = ["CourseSummary", "User", "UserStatus", "UserType", "utc_now"]
