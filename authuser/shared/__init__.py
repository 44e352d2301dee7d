# 📄 File: authuser/shared/__init__.py
# 🧭 Purpose (Layman Explanation):
# Building blocks shared by every module of the service.
# 🧪 Purpose (Technical Summary):
# Shared kernel (config, core, events, infrastructure, utils).
# 🔗 Dependencies:
# config/, core/, events/, infrastructure/, utils/
# 🔄 Connected Modules / Calls From:
# All modules, authuser.main
