# 📄 File: authuser/modules/user_management/infrastructure/__init__.py
# 🧭 Purpose (Layman Explanation):
# Connections from the user module to the outside world: database, broker, course service.
# 🧪 Purpose (Technical Summary):
# Infrastructure layer (database, messaging, external).
# 🔗 Dependencies:
# database/, messaging/, external/
# 🔄 Connected Modules / Calls From:
# Domain services, presentation dependencies
