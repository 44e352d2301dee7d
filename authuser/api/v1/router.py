# 📄 File: authuser/api/v1/router.py
# 🧭 Purpose (Layman Explanation):
# The traffic director: sends sign-up requests, user requests and instructor requests
# to the right handlers.
# 🧪 Purpose (Technical Summary):
# Aggregates module routers under their resource prefixes (/auth, /users, /instructors)
# plus the health router. Mounted at the application root.
# 🔗 Dependencies:
# FastAPI, authuser.api.v1.health, authuser.modules.user_management.presentation.api.v1
# 🔄 Connected Modules / Calls From:
# authuser.main

from fastapi import APIRouter

from authuser.modules.user_management.presentation.api.v1 import (
    auth_router,
    instructors_router,
    users_router,
)

from .health import health_router

api_v1_router = APIRouter()

api_v1_router.include_router(health_router, tags=["Health Check"])
api_v1_router.include_router(auth_router, prefix="/auth", tags=["Authentication"])
api_v1_router.include_router(users_router, prefix="/users", tags=["Users"])
api_v1_router.include_router(instructors_router, prefix="/instructors", tags=["Instructors"])
