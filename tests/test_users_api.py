import uuid

from authuser.modules.user_management.domain.models.course import CourseSummary
from authuser.shared.core.pagination import Page, PageRequest
from authuser.shared.events.base import ActionType

from .conftest import registration_payload


async def _signup(client, username, email, full_name="Some User"):
    response = await client.post(
        "/auth/signup",
        json=registration_payload(username=username, email=email, fullName=full_name),
    )
    assert response.status_code == 201
    return response.json()


# =============================================================================
# LISTING
# =============================================================================

async def test_list_users_returns_page_with_self_links(client, registered_user):
    response = await client.get("/users")

    assert response.status_code == 200
    page = response.json()
    assert page["totalElements"] == 1
    assert page["number"] == 0
    assert page["size"] == 10
    user = page["content"][0]
    assert "password" not in user
    assert user["links"] == [
        {"rel": "self", "href": f"http://test/users/{registered_user['userId']}"}
    ]


async def test_list_users_filters_by_type_and_partial_email(client):
    await _signup(client, "alice", "alice@example.com")
    await _signup(client, "bobby", "bobby@other.org")
    carol = await _signup(client, "carol", "carol@example.com")
    await client.post("/instructors/subscription", json={"userId": carol["userId"]})

    by_email = await client.get("/users", params={"email": "EXAMPLE.com"})
    assert {u["username"] for u in by_email.json()["content"]} == {"alice", "carol"}

    instructors = await client.get("/users", params={"userType": "INSTRUCTOR"})
    assert [u["username"] for u in instructors.json()["content"]] == ["carol"]

    combined = await client.get("/users", params={"userType": "STUDENT", "email": "example"})
    assert [u["username"] for u in combined.json()["content"]] == ["alice"]


async def test_list_users_filters_by_full_name_and_status(client):
    await _signup(client, "alice", "alice@example.com", full_name="Alice Liddell")
    await _signup(client, "bobby", "bobby@example.com", full_name="Bob Builder")

    response = await client.get("/users", params={"fullName": "lidd", "userStatus": "ACTIVE"})
    assert [u["username"] for u in response.json()["content"]] == ["alice"]

    blocked = await client.get("/users", params={"userStatus": "BLOCKED"})
    assert blocked.json()["totalElements"] == 0
    assert blocked.json()["empty"] is True


async def test_list_users_paginates_and_sorts(client):
    for name in ("dave", "alice", "carol", "bobby"):
        await _signup(client, name, f"{name}@example.com")

    first = await client.get("/users", params={"page": 0, "size": 3, "sort": "username,asc"})
    second = await client.get("/users", params={"page": 1, "size": 3, "sort": "username,asc"})

    assert [u["username"] for u in first.json()["content"]] == ["alice", "bobby", "carol"]
    assert [u["username"] for u in second.json()["content"]] == ["dave"]
    assert first.json()["totalPages"] == 2
    assert first.json()["first"] is True
    assert second.json()["last"] is True

    descending = await client.get("/users", params={"sort": "username,desc"})
    assert descending.json()["content"][0]["username"] == "dave"


async def test_list_users_rejects_unknown_sort_field(client, registered_user):
    response = await client.get("/users", params={"sort": "password,asc"})

    assert response.status_code == 422
    assert response.json()["error"]["code"] == "VALIDATION_ERROR"


async def test_list_users_rejects_oversized_page(client):
    response = await client.get("/users", params={"size": 1000})
    assert response.status_code == 422


# =============================================================================
# SINGLE USER
# =============================================================================

async def test_get_one_user(client, registered_user):
    response = await client.get(f"/users/{registered_user['userId']}")

    assert response.status_code == 200
    assert response.json()["username"] == "alice"
    assert "password" not in response.json()


async def test_get_unknown_user_returns_not_found(client):
    response = await client.get(f"/users/{uuid.uuid4()}")

    assert response.status_code == 404
    assert response.json()["error"]["message"] == "User not found"


async def test_get_user_with_malformed_id_is_rejected(client):
    response = await client.get("/users/not-a-uuid")
    assert response.status_code == 422


async def test_update_user_changes_profile_only(client, publisher, registered_user):
    user_id = registered_user["userId"]
    response = await client.put(
        f"/users/{user_id}",
        json={
            "fullName": "Alice Kingsleigh",
            "phoneNumber": "111",
            "nationalId": "999",
            "username": "mallory",
            "userType": "ADMIN",
        },
    )

    assert response.status_code == 200
    body = response.json()
    assert body["fullName"] == "Alice Kingsleigh"
    assert body["phoneNumber"] == "111"
    assert body["nationalId"] == "999"
    assert body["username"] == "alice"
    assert body["userType"] == "STUDENT"
    assert body["creationDate"] == registered_user["creationDate"]
    assert body["lastUpdateDate"] > registered_user["lastUpdateDate"]

    assert publisher.actions == [ActionType.UPDATE]
    assert publisher.events[0][0]["fullName"] == "Alice Kingsleigh"


async def test_update_unknown_user_returns_not_found(client, publisher):
    response = await client.put(f"/users/{uuid.uuid4()}", json={"fullName": "Nobody"})

    assert response.status_code == 404
    assert publisher.events == []


async def test_change_password(client, publisher, registered_user):
    user_id = registered_user["userId"]
    response = await client.put(
        f"/users/{user_id}/password",
        json={"oldPassword": "secret123", "password": "newsecret"},
    )

    assert response.status_code == 200
    assert response.json() == {"message": "Password updated successfully"}
    assert publisher.events == []

    again = await client.put(
        f"/users/{user_id}/password",
        json={"oldPassword": "newsecret", "password": "another1"},
    )
    assert again.status_code == 200


async def test_change_password_with_wrong_old_password_conflicts(client, publisher, registered_user):
    user_id = registered_user["userId"]
    response = await client.put(
        f"/users/{user_id}/password",
        json={"oldPassword": "wrong-one", "password": "newsecret"},
    )

    assert response.status_code == 409
    assert response.json()["error"]["message"] == "Error: Mismatched old password"
    assert publisher.events == []

    unchanged = await client.get(f"/users/{user_id}")
    assert unchanged.json()["lastUpdateDate"] == registered_user["lastUpdateDate"]


async def test_update_image(client, publisher, registered_user):
    response = await client.put(
        f"/users/{registered_user['userId']}/image",
        json={"imageUrl": "https://cdn.example.com/alice.png"},
    )

    assert response.status_code == 200
    assert response.json()["imageUrl"] == "https://cdn.example.com/alice.png"
    assert publisher.actions == [ActionType.UPDATE]


async def test_update_image_rejects_blank_url(client, publisher, registered_user):
    response = await client.put(
        f"/users/{registered_user['userId']}/image",
        json={"imageUrl": "   "},
    )

    assert response.status_code == 422
    assert publisher.events == []


async def test_delete_user(client, publisher, registered_user):
    user_id = registered_user["userId"]
    response = await client.delete(f"/users/{user_id}")

    assert response.status_code == 200
    assert response.json() == {"message": "User deleted successfully"}
    assert publisher.actions == [ActionType.DELETE]
    assert publisher.events[0][0]["userId"] == user_id

    assert (await client.get(f"/users/{user_id}")).status_code == 404
    assert (await client.delete(f"/users/{user_id}")).status_code == 404
    assert publisher.actions == [ActionType.DELETE]


# =============================================================================
# COURSES OF A USER
# =============================================================================

async def test_user_courses_are_fetched_from_course_service(client, course_client, registered_user):
    user_id = uuid.UUID(registered_user["userId"])
    course = CourseSummary(
        course_id=uuid.uuid4(),
        name="Python 101",
        description="Intro",
        course_status="INPROGRESS",
        course_level="BEGINNER",
        user_instructor=uuid.uuid4(),
    )
    course_client.page = Page[CourseSummary].of([course], 1, PageRequest(sort="courseId,asc"))

    response = await client.get(f"/users/{user_id}/courses", params={"size": 5})

    assert response.status_code == 200
    assert response.json()["content"][0]["name"] == "Python 101"
    called_id, page_request = course_client.calls[0]
    assert called_id == user_id
    assert page_request.size == 5
    assert page_request.sort == "courseId,asc"


async def test_user_courses_empty_when_course_service_has_nothing(client, registered_user):
    response = await client.get(f"/users/{registered_user['userId']}/courses")

    assert response.status_code == 200
    assert response.json()["content"] == []
    assert response.json()["totalElements"] == 0


async def test_courses_of_unknown_user_returns_not_found(client, course_client):
    response = await client.get(f"/users/{uuid.uuid4()}/courses")

    assert response.status_code == 404
    assert course_client.calls == []
