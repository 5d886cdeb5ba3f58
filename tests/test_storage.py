"""
Repository contract, run against both backends.
"""

from datetime import datetime, timezone

import pytest

from app.core.exceptions import DuplicateEntry
from app.storage import base
from app.storage.memory import MemStorage
from app.storage.sql import SqlStorage


@pytest.fixture(params=["memory", "sqlite"])
def store(request):
    if request.param == "memory":
        storage = MemStorage()
    else:
        storage = SqlStorage("sqlite://", create=True)
    yield storage
    storage.close()


def course_data(title, **overrides):
    data = {
        "title": title,
        "slug": title.lower().replace(" ", "-"),
        "description": f"About {title}",
        "price": 10.0,
        "level": "beginner",
        "category_id": "cat-1",
        "instructor_id": "inst-1",
    }
    data.update(overrides)
    return data


def test_create_generates_id_and_timestamps(store):
    course = store.courses.create(course_data("Algebra", id="ignored"))

    assert course.id != "ignored"
    assert course.created_at is not None
    assert course.updated_at is not None
    assert store.courses.get(course.id).title == "Algebra"


def test_get_missing_returns_none(store):
    assert store.courses.get("missing") is None


def test_update_is_partial_and_keeps_created_at(store):
    course = store.courses.create(course_data("Algebra", tags=["math"]))

    updated = store.courses.update(
        course.id, {"price": 25.0, "id": "other", "created_at": None}
    )

    assert updated.id == course.id
    assert updated.price == 25.0
    assert updated.tags == ["math"]
    assert store.courses.get(course.id).price == 25.0


def test_update_missing_returns_none(store):
    assert store.courses.update("missing", {"price": 1.0}) is None


def test_delete(store):
    course = store.courses.create(course_data("Algebra"))

    assert store.courses.delete(course.id) is True
    assert store.courses.delete(course.id) is False
    assert store.courses.get(course.id) is None


def test_list_filters_search_and_pagination(store):
    store.courses.create(course_data("Algebra", level="advanced"))
    store.courses.create(course_data("Geometry", description="Shapes and angles"))
    store.courses.create(course_data("Calculus", level="advanced", category_id="cat-2"))

    titles = lambda records: [r.title for r in records]  # noqa: E731

    assert titles(store.courses.list()) == ["Algebra", "Geometry", "Calculus"]
    assert titles(store.courses.list(filters={"level": "advanced"})) == ["Algebra", "Calculus"]
    assert titles(
        store.courses.list(filters={"level": "advanced", "category_id": "cat-2"})
    ) == ["Calculus"]
    assert titles(store.courses.list(filters={"level": None})) == [
        "Algebra",
        "Geometry",
        "Calculus",
    ]
    assert titles(store.courses.list(search="ANGLES")) == ["Geometry"]
    assert titles(store.courses.list(offset=1, limit=1)) == ["Geometry"]
    assert store.courses.count({"level": "advanced"}) == 2


def test_search_treats_wildcards_literally(store):
    store.courses.create(course_data("100% Python"))
    store.courses.create(course_data("Python basics"))

    assert [c.title for c in store.courses.list(search="100%")] == ["100% Python"]


def test_unknown_filter_field_is_an_error(store):
    with pytest.raises(ValueError):
        store.courses.list(filters={"colour": "red"})


def test_lessons_are_ordered_by_order_index(store):
    for title, index in [("C", 3), ("A", 1), ("B", 2)]:
        store.lessons.create({"title": title, "order_index": index, "course_id": "c1"})

    assert [lesson.title for lesson in store.lessons.list(filters={"course_id": "c1"})] == [
        "A",
        "B",
        "C",
    ]


def test_blog_posts_are_newest_first(store):
    for title in ["Old", "New"]:
        store.blog_posts.create(
            {"title": title, "slug": title.lower(), "content": "...", "author_id": "a1"}
        )

    assert [p.title for p in store.blog_posts.list()] == ["New", "Old"]


def test_find(store):
    store.users.create(
        {"username": "alice", "email": "alice@example.com", "password": "hash"}
    )

    assert store.users.find(username="alice").email == "alice@example.com"
    assert store.users.find(username="bob") is None


def test_enrollment_uses_enrolled_at(store):
    enrollment = store.enrollments.create({"user_id": "u1", "course_id": "c1"})

    assert enrollment.enrolled_at is not None
    assert enrollment.status == "active"
    assert store.enrollments.count({"user_id": "u1"}) == 1


def test_sql_unique_constraint_surfaces_as_duplicate_entry():
    storage = SqlStorage("sqlite://", create=True)
    try:
        storage.wishlist.create({"user_id": "u1", "course_id": "c1"})
        with pytest.raises(DuplicateEntry):
            storage.wishlist.create({"user_id": "u1", "course_id": "c1"})
    finally:
        storage.close()


def test_equal_timestamps_order_the_same_on_both_backends(store, monkeypatch):
    frozen = datetime(2024, 1, 1, tzinfo=timezone.utc)
    monkeypatch.setattr(base, "utcnow", lambda: frozen)

    posts = [
        store.blog_posts.create(
            {"title": title, "slug": title.lower(), "content": "...", "author_id": "a1"}
        )
        for title in ["One", "Two", "Three"]
    ]

    expected = sorted((p.id for p in posts), reverse=True)
    assert [p.id for p in store.blog_posts.list()] == expected
