# 📄 File: authuser/shared/infrastructure/__init__.py
# 🧭 Purpose (Layman Explanation):
# Shared plumbing: the database and outbound HTTP calls.
# 🧪 Purpose (Technical Summary):
# Infrastructure package (database, external_apis).
# 🔗 Dependencies:
# database/, external_apis/
# 🔄 Connected Modules / Calls From:
# Module infrastructure layers, authuser.main
