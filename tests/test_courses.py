import pytest


def test_instructor_creates_draft_course(client, instructor, make_course):
    user, headers = instructor

    course = make_course(headers)

    assert course["instructor_id"] == user["id"]
    assert course["status"] == "draft"
    assert course["is_published"] is False
    assert course["slug"] == "python-for-beginners"
    assert course["lessons_count"] == 0


def test_slugs_are_unique(instructor, make_course):
    first = make_course(instructor[1])
    second = make_course(instructor[1])

    assert first["slug"] == "python-for-beginners"
    assert second["slug"] == "python-for-beginners-2"


def test_persian_title_gets_transliterated_slug(instructor, make_course):
    first = make_course(instructor[1], title="برنامه نویسی")
    second = make_course(instructor[1], title="برنامه نویسی")

    assert first["slug"].isascii()
    assert first["slug"] not in ("", "untitled")
    assert second["slug"] == f"{first['slug']}-2"


def test_explicit_duplicate_slug_is_rejected(client, instructor, make_course, category_id):
    make_course(instructor[1], slug="intro")

    response = client.post(
        "/api/courses",
        json={
            "title": "Another",
            "description": "Another course",
            "price": 10,
            "level": "advanced",
            "category_id": category_id,
            "slug": "intro",
        },
        headers=instructor[1],
    )
    assert response.status_code == 400


def test_missing_price_fails_validation_and_is_not_persisted(
    client, storage, instructor, category_id
):
    response = client.post(
        "/api/courses",
        json={
            "title": "Free lunch",
            "description": "No price given",
            "level": "beginner",
            "category_id": category_id,
        },
        headers=instructor[1],
    )

    assert response.status_code == 400
    body = response.json()
    assert body["message"] == "Validation error"
    assert any(detail["loc"][-1] == "price" for detail in body["details"])
    assert storage.courses.count() == 0


def test_unknown_category_is_rejected(client, instructor):
    response = client.post(
        "/api/courses",
        json={
            "title": "Orphan",
            "description": "No category",
            "price": 5,
            "level": "beginner",
            "category_id": "missing",
        },
        headers=instructor[1],
    )
    assert response.status_code == 404
    assert response.json() == {"message": "Category not found"}


def test_students_cannot_create_courses(client, student, category_id):
    response = client.post(
        "/api/courses",
        json={
            "title": "Nope",
            "description": "Students do not teach",
            "price": 5,
            "level": "beginner",
            "category_id": category_id,
        },
        headers=student[1],
    )
    assert response.status_code == 403


def test_unauthenticated_mutation_is_rejected(client, category_id):
    response = client.post(
        "/api/courses",
        json={
            "title": "Anonymous",
            "description": "No session",
            "price": 5,
            "level": "beginner",
            "category_id": category_id,
        },
    )
    assert response.status_code == 401
    assert response.json() == {"message": "Not authenticated"}


def test_other_instructor_cannot_update_or_delete(
    client, instructor, other_instructor, make_course
):
    course = make_course(instructor[1])

    response = client.put(
        f"/api/courses/{course['id']}", json={"title": "Hijacked"}, headers=other_instructor[1]
    )
    assert response.status_code == 403

    response = client.delete(f"/api/courses/{course['id']}", headers=other_instructor[1])
    assert response.status_code == 403

    assert client.get(f"/api/courses/{course['id']}").json()["title"] == course["title"]


def test_owner_and_admin_can_update(client, admin, instructor, make_course):
    course = make_course(instructor[1])

    response = client.put(
        f"/api/courses/{course['id']}", json={"price": 19.5}, headers=instructor[1]
    )
    assert response.status_code == 200
    assert response.json()["price"] == 19.5

    response = client.put(
        f"/api/courses/{course['id']}", json={"is_featured": True}, headers=admin[1]
    )
    assert response.status_code == 200
    assert response.json()["is_featured"] is True


def test_owner_deletes_course(client, instructor, make_course):
    course = make_course(instructor[1])

    response = client.delete(f"/api/courses/{course['id']}", headers=instructor[1])
    assert response.status_code == 204
    assert client.get(f"/api/courses/{course['id']}").status_code == 404


@pytest.mark.parametrize("flag", ["is_published", "is_featured"])
def test_instructor_cannot_set_admin_flags(client, instructor, make_course, flag):
    course = make_course(instructor[1])

    response = client.put(
        f"/api/courses/{course['id']}", json={flag: True}, headers=instructor[1]
    )
    assert response.status_code == 403


def test_instructor_submits_draft_for_review(client, instructor, make_course):
    course = make_course(instructor[1])

    response = client.put(
        f"/api/courses/{course['id']}", json={"status": "pending"}, headers=instructor[1]
    )
    assert response.status_code == 200
    assert response.json()["status"] == "pending"


def test_instructor_cannot_publish_own_course(client, instructor, make_course):
    course = make_course(instructor[1], status="pending")

    response = client.put(
        f"/api/courses/{course['id']}", json={"status": "published"}, headers=instructor[1]
    )
    assert response.status_code == 403


def test_invalid_status_transition(client, admin, instructor, make_course):
    course = make_course(instructor[1])

    response = client.put(
        f"/api/courses/{course['id']}", json={"status": "published"}, headers=admin[1]
    )
    assert response.status_code == 400
    assert response.json() == {"message": "Invalid status transition: draft -> published"}


def test_admin_publishing_sets_flag_and_date(client, admin, instructor, make_course):
    course = make_course(instructor[1], status="pending")

    response = client.put(
        f"/api/courses/{course['id']}", json={"status": "published"}, headers=admin[1]
    )
    body = response.json()
    assert body["status"] == "published"
    assert body["is_published"] is True
    assert body["published_at"] is not None


def test_filter_by_is_published(client, instructor, make_course, published_course):
    make_course(instructor[1], title="Still a draft")

    response = client.get("/api/courses", params={"is_published": "true"})
    courses = response.json()

    assert [c["id"] for c in courses] == [published_course["id"]]
    assert all(c["is_published"] for c in courses)


def test_category_and_level_filters_intersect(client, storage, instructor, make_course):
    business_id = storage.categories.find(slug="business").id
    wanted = make_course(instructor[1], title="Wanted", level="advanced")
    make_course(instructor[1], title="Wrong level", level="beginner")
    make_course(instructor[1], title="Wrong category", level="advanced", category_id=business_id)

    response = client.get(
        "/api/courses",
        params={"category_id": wanted["category_id"], "level": "advanced"},
    )

    assert [c["id"] for c in response.json()] == [wanted["id"]]


def test_search_and_pagination(client, instructor, make_course):
    for n in range(5):
        make_course(instructor[1], title=f"Data Science {n}")
    make_course(instructor[1], title="Cooking", description="Pasta and pizza")

    response = client.get("/api/courses", params={"search": "data science"})
    assert len(response.json()) == 5

    response = client.get("/api/courses", params={"search": "PIZZA"})
    assert [c["title"] for c in response.json()] == ["Cooking"]

    response = client.get("/api/courses", params={"offset": 1, "limit": 2})
    assert [c["title"] for c in response.json()] == ["Data Science 1", "Data Science 2"]


def test_course_detail_embeds_lessons_and_instructor(client, instructor, make_course):
    user, headers = instructor
    course = make_course(headers)
    for order_index, title in [(2, "Loops"), (0, "Setup"), (1, "Variables")]:
        response = client.post(
            f"/api/courses/{course['id']}/lessons",
            json={"title": title, "order_index": order_index},
            headers=headers,
        )
        assert response.status_code == 201

    detail = client.get(f"/api/courses/{course['id']}").json()

    assert [lesson["title"] for lesson in detail["lessons"]] == ["Setup", "Variables", "Loops"]
    assert detail["lessons_count"] == 3
    assert detail["instructor"]["id"] == user["id"]
    assert "email" not in detail["instructor"]
    assert detail["reviews"] == []


def test_missing_course_returns_404(client):
    response = client.get("/api/courses/does-not-exist")
    assert response.status_code == 404
    assert response.json() == {"message": "Course not found"}


@pytest.mark.parametrize(
    "status, is_published",
    [("draft", True), ("pending", True), ("rejected", True), ("published", False)],
)
def test_publish_flag_must_match_status(
    client, admin, instructor, make_course, status, is_published
):
    course = make_course(instructor[1], status="draft" if status == "draft" else "pending")
    moderation = {"published": "approve", "rejected": "reject"}
    if status in moderation:
        client.post(
            f"/api/admin/courses/{course['id']}/{moderation[status]}", headers=admin[1]
        )

    response = client.put(
        f"/api/courses/{course['id']}", json={"is_published": is_published}, headers=admin[1]
    )
    assert response.status_code == 400

    stored = client.get(f"/api/courses/{course['id']}").json()
    assert stored["status"] == status
    assert stored["is_published"] is (status == "published")


def test_admin_can_feature_published_course(client, admin, published_course):
    response = client.put(
        f"/api/courses/{published_course['id']}",
        json={"is_published": True, "is_featured": True},
        headers=admin[1],
    )
    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "published"
    assert body["is_published"] is True
    assert body["is_featured"] is True
