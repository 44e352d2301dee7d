# 📄 File: authuser/modules/user_management/presentation/__init__.py
# 🧭 Purpose (Layman Explanation):
# How the user module is reached from outside: HTTP endpoints and their helpers.
# 🧪 Purpose (Technical Summary):
# Presentation layer (API routers, schemas, FastAPI dependencies).
# 🔗 Dependencies:
# api/, dependencies.py
# 🔄 Connected Modules / Calls From:
# authuser.api.v1.router, authuser.main
