# 📄 File: authuser/__init__.py
# 🧭 Purpose (Layman Explanation):
# The user account service of the EAD learning platform.
# 🧪 Purpose (Technical Summary):
# Application package root.
# 🔗 Dependencies:
# main.py, api/, modules/, shared/
# 🔄 Connected Modules / Calls From:
# uvicorn (authuser.main:app), tests

__version__ = "1.0.0"
