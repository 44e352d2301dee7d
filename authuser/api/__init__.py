# 📄 File: authuser/api/__init__.py
# 🧭 Purpose (Layman Explanation):
# The application-wide web layer: routing, health checks and request middleware.
# 🧪 Purpose (Technical Summary):
# API package (v1 routers, middleware).
# 🔗 Dependencies:
# v1/, middleware/
# 🔄 Connected Modules / Calls From:
# authuser.main
