import pytest

from roster.core.errors import ConsistencyError
from roster.models import Student
from roster.services.students import StudentService

JIM_BOB = {"id": 1, "name": "Jim Bob", "classId": 1, "teacherId": 1, "schoolId": 1}


def test_get_student_returns_record(client):
    response = client.get("/students/1")
    assert response.status_code == 200
    assert response.json() == JIM_BOB


def test_get_student_not_found(client):
    response = client.get("/students/999")
    assert response.status_code == 404


def test_list_students(client):
    response = client.get("/students")
    assert response.status_code == 200
    data = response.json()
    assert isinstance(data, list)
    assert {s["id"] for s in data} == {1, 2}
    assert JIM_BOB in data


def test_list_students_empty(client, seeded):
    session = seeded()
    session.query(Student).delete()
    session.commit()
    session.close()

    response = client.get("/students")
    assert response.status_code == 200
    assert response.json() == []


def test_create_student_returns_record_and_location(client):
    response = client.post("/students", json={"id": 3, "name": "John Doe", "classId": 1})

    assert response.status_code == 201
    assert response.json() == {"id": 3, "name": "John Doe", "classId": 1, "teacherId": 1, "schoolId": 1}
    assert response.headers["location"] == "/students/3"


def test_created_student_is_readable(client):
    created = client.post("/students", json={"id": 3, "name": "John Doe", "classId": 1}).json()

    response = client.get("/students/3")
    assert response.status_code == 200
    assert response.json() == created


def test_create_student_ignores_client_supplied_derived_ids(client):
    response = client.post(
        "/students",
        json={"id": 4, "name": "Ann Lee", "classId": 1, "teacherId": 42, "schoolId": 77},
    )
    assert response.status_code == 201
    assert response.json()["teacherId"] == 1
    assert response.json()["schoolId"] == 1


@pytest.mark.parametrize(
    "payload,expected",
    [
        ({"id": 1, "name": "John Doe", "classId": 1}, 409),  # id already exists
        ({"id": 3, "name": None, "classId": 1}, 400),        # null name
        ({"id": 3, "classId": 1}, 400),                      # absent name
        ({"id": 3, "name": "", "classId": 1}, 400),          # empty name
        ({"id": 3, "name": "John Doe", "classId": 2}, 404),  # class doesn't exist
        ({"id": 1, "name": "", "classId": 2}, 400),          # name checked before anything else
        ({"id": 1, "name": "John Doe", "classId": 2}, 404),  # class checked before duplicate key
    ],
)
def test_create_student_errors(client, payload, expected):
    response = client.post("/students", json=payload)
    assert response.status_code == expected


def test_create_failure_writes_nothing(client):
    client.post("/students", json={"id": 3, "name": "John Doe", "classId": 2})
    assert client.get("/students/3").status_code == 404


def test_create_student_malformed_body_is_bad_request(client):
    response = client.post("/students", json={"id": "three", "name": "John Doe", "classId": 1})
    assert response.status_code == 400


def test_create_student_accepts_any_key_casing(client):
    response = client.post("/students", json={"Id": 5, "NAME": "Case Test", "ClassId": 1})
    assert response.status_code == 201
    assert response.json()["name"] == "Case Test"
    assert response.json()["classId"] == 1


def test_update_student_name(client):
    response = client.put("/students/2", json={"id": 2, "name": "Jane Smith", "classId": 1})

    assert response.status_code == 204
    assert response.content == b""
    assert client.get("/students/2").json() == {
        "id": 2, "name": "Jane Smith", "classId": 1, "teacherId": 1, "schoolId": 1,
    }


def test_update_student_moves_class_and_rederives_chain(client, add_chain):
    add_chain(school_id=2, teacher_id=3, class_id=7)

    response = client.put("/students/2", json={"id": 2, "name": "Jane Doe", "classId": 7})

    assert response.status_code == 204
    assert client.get("/students/2").json() == {
        "id": 2, "name": "Jane Doe", "classId": 7, "teacherId": 3, "schoolId": 2,
    }


def test_update_student_resolves_class_by_class_id(client, add_chain):
    # Class 1 exists, class 2 does not: a lookup keyed on the student id (1)
    # would wrongly succeed here.
    response = client.put("/students/1", json={"id": 1, "name": "Jim Bob", "classId": 2})
    assert response.status_code == 404

    # Class 5 exists, class 2 does not: a lookup keyed on the student id (2)
    # would wrongly fail here.
    add_chain(school_id=3, teacher_id=4, class_id=5)
    response = client.put("/students/2", json={"id": 2, "name": "Jane Doe", "classId": 5})
    assert response.status_code == 204
    assert client.get("/students/2").json()["classId"] == 5


@pytest.mark.parametrize(
    "url_id,payload,expected",
    [
        (1, {"id": 2, "name": "Jim Bob", "classId": 1}, 400),    # id mismatch
        (1, {"id": 1, "name": "", "classId": 1}, 400),           # empty name
        (1, {"id": 1, "classId": 1}, 400),                       # absent name
        (1, {"name": "Jim Bob", "classId": 1}, 400),             # absent id
        (999, {"id": 999, "name": "Nobody", "classId": 1}, 404), # no such student
        (1, {"id": 1, "name": "Jim Bob", "classId": 2}, 404),    # no such class
    ],
)
def test_update_student_errors(client, url_id, payload, expected):
    response = client.put(f"/students/{url_id}", json=payload)
    assert response.status_code == expected


def test_failed_update_leaves_student_unchanged(client):
    client.put("/students/1", json={"id": 1, "name": "Renamed", "classId": 2})
    assert client.get("/students/1").json() == JIM_BOB


def test_delete_student_returns_deleted_record(client):
    response = client.delete("/students/1")

    assert response.status_code == 200
    assert response.json() == JIM_BOB
    assert client.get("/students/1").status_code == 404


def test_delete_student_not_found(client):
    response = client.delete("/students/999")
    assert response.status_code == 404


def test_delete_twice(client):
    assert client.delete("/students/2").status_code == 200
    assert client.delete("/students/2").status_code == 404


@pytest.mark.parametrize("method", ["get", "delete"])
def test_out_of_range_path_id_is_bad_request(client, method):
    response = getattr(client, method)(f"/students/{2**64}")
    assert response.status_code == 400


@pytest.mark.parametrize(
    "payload",
    [
        {"id": 2**31, "name": "Too Big", "classId": 1},
        {"id": 2**64, "name": "Way Too Big", "classId": 1},
        {"id": -2**31 - 1, "name": "Too Small", "classId": 1},
        {"id": 3, "name": "Big Class", "classId": 2**31},
    ],
)
def test_create_student_out_of_range_keys_are_bad_request(client, payload):
    response = client.post("/students", json=payload)
    assert response.status_code == 400
    assert {s["id"] for s in client.get("/students").json()} == {1, 2}


def test_update_student_out_of_range_id_is_bad_request(client):
    response = client.put(f"/students/{2**31}", json={"id": 2**31, "name": "Too Big", "classId": 1})
    assert response.status_code == 400


def test_largest_key_is_accepted(client):
    response = client.post("/students", json={"id": 2**31 - 1, "name": "Max Key", "classId": 1})
    assert response.status_code == 201
    assert client.get(f"/students/{2**31 - 1}").json()["name"] == "Max Key"


def test_broken_relationship_chain_is_server_error(client, monkeypatch):
    def broken_chain(db, student):
        raise ConsistencyError(f"Class {student.class_id} references missing teacher 1")

    monkeypatch.setattr("roster.services.students.to_transfer_record", broken_chain)

    response = client.get("/students/1")
    assert response.status_code == 500
    assert "missing teacher" not in response.text


def test_unexpected_store_error_detail_is_generic(client, monkeypatch):
    def store_down(self, student_id):
        raise RuntimeError("sqlite3.OperationalError: no such table: students")

    monkeypatch.setattr(StudentService, "get_student", store_down)

    response = client.get("/students/1")
    assert response.status_code == 500
    assert response.json() == {"detail": "Failed to get student 1"}
