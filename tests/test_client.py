import pytest

from app.client import AccessDenied, ApiClient, ApiError, RoleGate, resource_root
from app.core.config import settings


class CountingSession:
    """Forwards to the TestClient and records every request made."""

    def __init__(self, client):
        self.client = client
        self.calls = []

    def request(self, method, url, **kwargs):
        self.calls.append((method, url))
        return self.client.request(method, url, **kwargs)


@pytest.fixture
def session(client):
    return CountingSession(client)


@pytest.fixture
def api(session):
    return ApiClient(session, base_url="")


def gets(session):
    return [url for method, url in session.calls if method == "GET"]


def test_resource_root():
    assert resource_root("/api/courses/42/enroll") == "/api/courses"
    assert resource_root("/api/blog/posts") == "/api/blog"
    assert resource_root("/health") == "/health"


def test_cache_key_ignores_param_order_and_nones():
    assert ApiClient.cache_key("/api/courses", {"b": 1, "a": 2, "c": None}) == (
        "/api/courses",
        (("a", 2), ("b", 1)),
    )


def test_repeated_query_is_served_from_cache(api, session):
    first = api.categories()
    second = api.categories()

    assert first == second
    assert gets(session) == ["/api/categories"]


def test_different_params_are_cached_separately(api, session, published_course):
    api.courses(is_published=True)
    api.courses(is_published=True)
    api.courses()

    assert gets(session) == ["/api/courses", "/api/courses"]


def test_mutation_invalidates_and_views_refetch(api, session, published_course):
    api.register(username="viewer", email="viewer@example.com", password="secret123")

    assert api.my_enrollments() == []
    api.my_enrollments()
    assert gets(session).count("/api/my-enrollments") == 1

    api.enroll(published_course["id"])

    enrollments = api.my_enrollments()
    assert [e["course_id"] for e in enrollments] == [published_course["id"]]
    assert gets(session).count("/api/my-enrollments") == 2


def test_mutation_leaves_unrelated_queries_cached(api, session, published_course):
    api.register(username="viewer", email="viewer@example.com", password="secret123")
    api.categories()

    api.add_to_wishlist(published_course["id"])
    api.categories()

    assert gets(session).count("/api/categories") == 1
    assert api.in_wishlist(published_course["id"]) is True


def test_errors_carry_server_message(api, published_course):
    api.register(username="viewer", email="viewer@example.com", password="secret123")
    api.enroll(published_course["id"])

    with pytest.raises(ApiError) as excinfo:
        api.enroll(published_course["id"])

    assert excinfo.value.status_code == 400
    assert excinfo.value.message == "Already enrolled in this course"


def test_failed_mutation_keeps_cache(api, session, published_course):
    api.courses()

    with pytest.raises(ApiError):
        api.enroll(published_course["id"])

    api.courses()
    assert gets(session).count("/api/courses") == 1


def test_role_gate(api):
    gate = RoleGate(api, ["admin"])

    denied = gate.check()
    assert isinstance(denied, AccessDenied)
    assert denied.current_role is None

    api.register(username="viewer", email="viewer@example.com", password="secret123")
    denied = gate.check()
    assert denied.current_role == "student"
    assert denied.required_roles == ("admin",)

    assert RoleGate(api, ["student", "instructor"]).check() is None


def test_admin_dashboard_flow(api, instructor, make_course):
    course = make_course(instructor[1], status="pending")
    api.login(settings.admin_default_username, settings.admin_default_password)

    assert RoleGate(api, ["admin"]).check() is None
    assert api.admin_stats()["courses_by_status"] == {"pending": 1}

    api.approve_course(course["id"])

    assert api.admin_stats()["courses_by_status"] == {"published": 1}
    assert [c["id"] for c in api.courses(is_published=True)] == [course["id"]]
