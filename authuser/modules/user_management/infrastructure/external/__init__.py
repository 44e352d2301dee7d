# 📄 File: authuser/modules/user_management/infrastructure/external/__init__.py
# 🧭 Purpose (Layman Explanation):
# Other platform services the user module asks for information.
# 🧪 Purpose (Technical Summary):
# Course service client export.
# 🔗 Dependencies:
# course_client.py
# 🔄 Connected Modules / Calls From:
# presentation/dependencies.py, authuser.main

from .course_client import CourseClient

__all__ = ["CourseClient"]
