# 📄 File: authuser/modules/user_management/__init__.py
# 🧭 Purpose (Layman Explanation):
# Everything about user accounts: sign-up, profiles, passwords, instructors.
# 🧪 Purpose (Technical Summary):
# User management module (domain, infrastructure, presentation layers).
# 🔗 Dependencies:
# domain/, infrastructure/, presentation/
# 🔄 Connected Modules / Calls From:
# authuser.api.v1.router, authuser.main
