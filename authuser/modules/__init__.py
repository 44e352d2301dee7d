# 📄 File: authuser/modules/__init__.py
# 🧭 Purpose (Layman Explanation):
# The feature areas of the service.
# 🧪 Purpose (Technical Summary):
# Module packages (user_management).
# 🔗 Dependencies:
# user_management/
# 🔄 Connected Modules / Calls From:
# authuser.api, authuser.main
