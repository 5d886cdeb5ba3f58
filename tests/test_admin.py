def test_admin_endpoints_require_admin(client, student):
    assert client.get("/api/admin/stats").status_code == 401
    assert client.get("/api/admin/stats", headers=student[1]).status_code == 403


def test_approve_pending_course(client, admin, instructor, make_course):
    course = make_course(instructor[1], status="pending")

    response = client.post(f"/api/admin/courses/{course['id']}/approve", headers=admin[1])

    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "published"
    assert body["is_published"] is True

    listed = client.get("/api/courses", params={"is_published": "true"}).json()
    assert [c["id"] for c in listed] == [course["id"]]


def test_reject_pending_course(client, admin, instructor, make_course):
    course = make_course(instructor[1], status="pending")

    response = client.post(f"/api/admin/courses/{course['id']}/reject", headers=admin[1])

    assert response.json()["status"] == "rejected"
    assert response.json()["is_published"] is False


def test_only_pending_courses_are_moderated(client, admin, instructor, make_course):
    course = make_course(instructor[1])

    response = client.post(f"/api/admin/courses/{course['id']}/approve", headers=admin[1])

    assert response.status_code == 400
    assert client.get(f"/api/courses/{course['id']}").json()["status"] == "draft"


def test_instructor_cannot_approve(client, instructor, make_course):
    course = make_course(instructor[1], status="pending")

    response = client.post(
        f"/api/admin/courses/{course['id']}/approve", headers=instructor[1]
    )
    assert response.status_code == 403


def test_stats(client, admin, student, published_course):
    client.post(f"/api/courses/{published_course['id']}/enroll", headers=student[1])

    stats = client.get("/api/admin/stats", headers=admin[1]).json()

    assert stats["total_users"] == 3
    assert stats["total_courses"] == 1
    assert stats["total_enrollments"] == 1
    assert stats["total_revenue"] == 0
    assert stats["users_by_role"] == {"admin": 1, "instructor": 1, "student": 1}
    assert stats["courses_by_status"] == {"published": 1}


def test_list_users_hides_passwords(client, admin, student):
    users = client.get("/api/admin/users", headers=admin[1]).json()

    assert {u["username"] for u in users} == {"admin", "learner"}
    assert all("password" not in u for u in users)

    page = client.get("/api/admin/users", params={"offset": 1, "limit": 1}, headers=admin[1])
    assert [u["username"] for u in page.json()] == ["learner"]


def test_change_user_role(client, admin, student):
    user, headers = student

    response = client.put(
        f"/api/admin/users/{user['id']}", json={"role": "instructor"}, headers=admin[1]
    )
    assert response.json()["role"] == "instructor"

    # Role is read from the store, so the old token now carries instructor rights
    assert client.get("/api/user", headers=headers).json()["role"] == "instructor"


def test_admin_cannot_demote_self(client, admin):
    response = client.put(
        f"/api/admin/users/{admin[0]['id']}", json={"role": "student"}, headers=admin[1]
    )
    assert response.status_code == 400


def test_completed_payment_enrolls_payer(client, admin, student, published_course):
    response = client.post(
        f"/api/courses/{published_course['id']}/payments",
        json={"payment_method": "card"},
        headers=student[1],
    )
    assert response.status_code == 201
    payment = response.json()
    assert payment["status"] == "pending"
    assert payment["amount"] == published_course["price"]
    assert payment["currency"] == "USD"

    response = client.put(
        f"/api/admin/payments/{payment['id']}",
        json={"status": "completed", "transaction_id": "tx-1"},
        headers=admin[1],
    )
    assert response.json()["status"] == "completed"

    enrollments = client.get("/api/my-enrollments", headers=student[1]).json()
    assert [e["course_id"] for e in enrollments] == [published_course["id"]]

    stats = client.get("/api/admin/stats", headers=admin[1]).json()
    assert stats["total_revenue"] == published_course["price"]

    assert len(client.get("/api/my-payments", headers=student[1]).json()) == 1


def test_enrolled_user_cannot_pay_again(client, student, published_course):
    client.post(f"/api/courses/{published_course['id']}/enroll", headers=student[1])

    response = client.post(
        f"/api/courses/{published_course['id']}/payments", json={}, headers=student[1]
    )
    assert response.status_code == 400


def test_completing_payment_for_deleted_course_changes_nothing(
    client, admin, student, instructor, published_course
):
    payment = client.post(
        f"/api/courses/{published_course['id']}/payments", json={}, headers=student[1]
    ).json()
    client.delete(f"/api/courses/{published_course['id']}", headers=instructor[1])

    response = client.put(
        f"/api/admin/payments/{payment['id']}",
        json={"status": "completed"},
        headers=admin[1],
    )
    assert response.status_code == 404
    assert response.json() == {"message": "Course not found"}

    payments = client.get("/api/my-payments", headers=student[1]).json()
    assert [p["status"] for p in payments] == ["pending"]
    assert client.get("/api/my-enrollments", headers=student[1]).json() == []
