# app/client/api.py
"""
Python client for the marketplace API.

Queries go through a cache keyed by path and query params, so dashboards that
render the same list twice issue one request. Every mutation drops the cache
entries under the resource it touched; views refetch on their next query.

Example:
    client = ApiClient(requests.Session(), "http://localhost:8000")
    client.login("alice", "secret123")
    courses = client.courses(level="beginner")
    client.enroll(courses[0]["id"])
"""

import logging
from typing import Any, Dict, Iterable, Optional, Tuple

import requests

from app.core.config import settings

logger = logging.getLogger(__name__)

CacheKey = Tuple[str, Tuple[Tuple[str, Any], ...]]


class ApiError(Exception):
    """Non-2xx response; ``message`` is the server's ``{"message"}`` verbatim."""

    def __init__(self, status_code: int, message: str):
        self.status_code = status_code
        self.message = message
        super().__init__(f"{status_code}: {message}")


def resource_root(path: str) -> str:
    """``/api/courses/42/enroll`` -> ``/api/courses``"""
    parts = [p for p in path.split("/") if p]
    if len(parts) >= 2 and parts[0] == "api":
        return f"/api/{parts[1]}"
    return "/" + "/".join(parts[:1])


class ApiClient:
    def __init__(self, session=None, base_url: Optional[str] = None):
        # Anything with a requests-style ``request`` method works (TestClient in tests)
        self.session = session or requests.Session()
        self.base_url = (settings.app_url if base_url is None else base_url).rstrip("/")
        self.token: Optional[str] = None
        self._cache: Dict[CacheKey, Any] = {}

    # ---------- core ----------

    @staticmethod
    def cache_key(path: str, params: Optional[Dict[str, Any]] = None) -> CacheKey:
        active = {k: v for k, v in (params or {}).items() if v is not None}
        return path, tuple(sorted(active.items()))

    def query(self, path: str, params: Optional[Dict[str, Any]] = None) -> Any:
        """GET ``path``, served from the cache when already fetched"""
        key = self.cache_key(path, params)
        if key in self._cache:
            return self._cache[key]

        data = self._request("GET", path, params=dict(key[1]))
        self._cache[key] = data
        return data

    def mutate(
        self,
        method: str,
        path: str,
        json: Optional[Dict[str, Any]] = None,
        invalidate: Optional[Iterable[str]] = None,
    ) -> Any:
        """Send a write request, then drop cached queries under ``invalidate``"""
        data = self._request(method, path, json=json)
        self.invalidate(*(invalidate or (resource_root(path),)))
        return data

    def invalidate(self, *prefixes: str) -> None:
        stale = [key for key in self._cache if key[0].startswith(prefixes)]
        for key in stale:
            del self._cache[key]
        if stale:
            logger.debug(f"Invalidated {len(stale)} cached queries under {prefixes}")

    def _request(self, method: str, path: str, **kwargs) -> Any:
        headers = {"Accept": "application/json"}
        if self.token:
            headers["Authorization"] = f"Bearer {self.token}"

        response = self.session.request(
            method, f"{self.base_url}{path}", headers=headers, **kwargs
        )

        if response.status_code >= 400:
            raise ApiError(response.status_code, self._error_message(response))
        if response.status_code == 204 or not response.content:
            return None
        return response.json()

    @staticmethod
    def _error_message(response) -> str:
        try:
            body = response.json()
        except ValueError:
            return response.text or "Request failed"
        if isinstance(body, dict) and "message" in body:
            return body["message"]
        return str(body)

    # ---------- auth ----------

    def register(self, **fields) -> Dict[str, Any]:
        auth = self.mutate("POST", "/api/register", json=fields, invalidate=("/",))
        self.token = auth["access_token"]
        return auth["user"]

    def login(self, username: str, password: str) -> Dict[str, Any]:
        auth = self.mutate(
            "POST",
            "/api/login",
            json={"username": username, "password": password},
            invalidate=("/",),
        )
        self.token = auth["access_token"]
        return auth["user"]

    def logout(self) -> None:
        self.mutate("POST", "/api/logout", invalidate=("/",))
        self.token = None

    def current_user(self) -> Dict[str, Any]:
        return self.query("/api/user")

    # ---------- catalog ----------

    def categories(self):
        return self.query("/api/categories")

    def courses(self, **filters):
        """Catalog page: category_id, instructor_id, level, status, is_published, is_featured, search, offset, limit"""
        return self.query("/api/courses", filters)

    def course(self, course_id: str):
        return self.query(f"/api/courses/{course_id}")

    def lessons(self, course_id: str):
        return self.query(f"/api/courses/{course_id}/lessons")

    def reviews(self, course_id: str):
        return self.query(f"/api/courses/{course_id}/reviews")

    def instructors(self):
        return self.query("/api/instructors")

    def create_course(self, **fields):
        return self.mutate("POST", "/api/courses", json=fields)

    def update_course(self, course_id: str, **fields):
        return self.mutate("PUT", f"/api/courses/{course_id}", json=fields)

    def delete_course(self, course_id: str) -> None:
        self.mutate("DELETE", f"/api/courses/{course_id}")

    def add_lesson(self, course_id: str, **fields):
        return self.mutate("POST", f"/api/courses/{course_id}/lessons", json=fields)

    def enroll(self, course_id: str):
        return self.mutate(
            "POST",
            f"/api/courses/{course_id}/enroll",
            invalidate=("/api/courses", "/api/my-enrollments"),
        )

    def review(self, course_id: str, rating: int, comment: Optional[str] = None):
        return self.mutate(
            "POST",
            f"/api/courses/{course_id}/reviews",
            json={"rating": rating, "comment": comment},
        )

    def buy(self, course_id: str, payment_method: Optional[str] = None):
        return self.mutate(
            "POST",
            f"/api/courses/{course_id}/payments",
            json={"payment_method": payment_method},
            invalidate=("/api/my-payments",),
        )

    # ---------- wishlist ----------

    def in_wishlist(self, course_id: str) -> bool:
        return self.query(f"/api/courses/{course_id}/wishlist")["in_wishlist"]

    def add_to_wishlist(self, course_id: str):
        return self.mutate(
            "POST",
            f"/api/courses/{course_id}/wishlist",
            invalidate=("/api/courses", "/api/my-wishlist"),
        )

    def remove_from_wishlist(self, course_id: str) -> None:
        self.mutate(
            "DELETE",
            f"/api/courses/{course_id}/wishlist",
            invalidate=("/api/courses", "/api/my-wishlist"),
        )

    # ---------- dashboards ----------

    def my_enrollments(self):
        return self.query("/api/my-enrollments")

    def my_wishlist(self):
        return self.query("/api/my-wishlist")

    def my_payments(self):
        return self.query("/api/my-payments")

    def update_progress(self, enrollment_id: str, **fields):
        return self.mutate(
            "PUT",
            f"/api/enrollments/{enrollment_id}",
            json=fields,
            invalidate=("/api/my-enrollments",),
        )

    # ---------- blog ----------

    def blog_posts(self, **filters):
        return self.query("/api/blog/posts", filters)

    def blog_post(self, post_id: str):
        return self.query(f"/api/blog/posts/{post_id}")

    def create_post(self, **fields):
        return self.mutate("POST", "/api/blog/posts", json=fields)

    def comment(self, post_id: str, content: str, parent_id: Optional[str] = None):
        return self.mutate(
            "POST",
            f"/api/blog/posts/{post_id}/comments",
            json={"content": content, "parent_id": parent_id},
        )

    # ---------- admin ----------

    def admin_stats(self):
        return self.query("/api/admin/stats")

    def admin_users(self, offset: int = 0, limit: Optional[int] = None):
        return self.query("/api/admin/users", {"offset": offset, "limit": limit})

    def approve_course(self, course_id: str):
        return self.mutate(
            "POST",
            f"/api/admin/courses/{course_id}/approve",
            invalidate=("/api/courses", "/api/admin"),
        )

    def reject_course(self, course_id: str):
        return self.mutate(
            "POST",
            f"/api/admin/courses/{course_id}/reject",
            invalidate=("/api/courses", "/api/admin"),
        )
