"""
API client with a query cache, for scripts and dashboards.
"""

from app.client.api import ApiClient, ApiError, resource_root
from app.client.roles import AccessDenied, RoleGate

__all__ = ["AccessDenied", "ApiClient", "ApiError", "RoleGate", "resource_root"]
