import pytest


@pytest.fixture
def course(instructor, make_course):
    return make_course(instructor[1])


def add_lesson(client, course_id, headers, title="Intro", order_index=0):
    return client.post(
        f"/api/courses/{course_id}/lessons",
        json={"title": title, "order_index": order_index, "is_free": True},
        headers=headers,
    )


def test_lessons_are_listed_by_order_index(client, instructor, course):
    add_lesson(client, course["id"], instructor[1], "Second", 5)
    add_lesson(client, course["id"], instructor[1], "First", 1)

    response = client.get(f"/api/courses/{course['id']}/lessons")

    assert [lesson["title"] for lesson in response.json()] == ["First", "Second"]


def test_only_course_owner_adds_lessons(client, other_instructor, course):
    response = add_lesson(client, course["id"], other_instructor[1])
    assert response.status_code == 403


def test_update_and_delete_lesson_maintain_counter(client, instructor, course):
    lesson = add_lesson(client, course["id"], instructor[1]).json()
    add_lesson(client, course["id"], instructor[1], "Other", 1)

    response = client.put(
        f"/api/lessons/{lesson['id']}", json={"title": "Renamed"}, headers=instructor[1]
    )
    assert response.status_code == 200
    assert response.json()["title"] == "Renamed"
    assert response.json()["is_free"] is True

    response = client.delete(f"/api/lessons/{lesson['id']}", headers=instructor[1])
    assert response.status_code == 204

    assert client.get(f"/api/courses/{course['id']}").json()["lessons_count"] == 1


def test_other_instructor_cannot_edit_lesson(client, instructor, other_instructor, course):
    lesson = add_lesson(client, course["id"], instructor[1]).json()

    response = client.put(
        f"/api/lessons/{lesson['id']}", json={"title": "Mine now"}, headers=other_instructor[1]
    )
    assert response.status_code == 403


def test_lesson_of_deleted_course_is_not_found(client, instructor, course):
    lesson = add_lesson(client, course["id"], instructor[1]).json()
    client.delete(f"/api/courses/{course['id']}", headers=instructor[1])

    response = client.put(
        f"/api/lessons/{lesson['id']}", json={"title": "Ghost"}, headers=instructor[1]
    )
    assert response.status_code == 404
    assert response.json() == {"message": "Course not found"}


def test_missing_lesson(client, instructor):
    response = client.delete("/api/lessons/nope", headers=instructor[1])
    assert response.status_code == 404
