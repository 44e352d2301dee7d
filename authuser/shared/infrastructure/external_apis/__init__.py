# 📄 File: authuser/shared/infrastructure/external_apis/__init__.py
# 🧭 Purpose (Layman Explanation):
# Tools for calling other services of the platform over HTTP.
# 🧪 Purpose (Technical Summary):
# Exports the aiohttp JSON client and the tenacity-based retry policy.
# 🔗 Dependencies:
# api_client.py, retry_policy.py
# 🔄 Connected Modules / Calls From:
# Course service client

from .api_client import APIClient, is_retryable_error
from .retry_policy import RetryPolicy, RetryResult

__all__ = ["APIClient", "RetryPolicy", "RetryResult", "is_retryable_error"]
