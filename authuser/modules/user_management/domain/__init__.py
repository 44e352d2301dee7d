# 📄 File: authuser/modules/user_management/domain/__init__.py
# 🧭 Purpose (Layman Explanation):
# The heart of the user module: what a user is and what may happen to one.
# 🧪 Purpose (Technical Summary):
# Domain layer (models, repositories, events, services).
# 🔗 Dependencies:
# models/, repositories/, events/, services/
# 🔄 Connected Modules / Calls From:
# Infrastructure and presentation layers
