# 📄 File: authuser/modules/user_management/presentation/api/__init__.py
# 🧭 Purpose (Layman Explanation):
# The web-facing part of the user module.
# 🧪 Purpose (Technical Summary):
# API package (versioned routers and request/response schemas).
# 🔗 Dependencies:
# v1/, schemas/
# 🔄 Connected Modules / Calls From:
# authuser.api.v1.router
