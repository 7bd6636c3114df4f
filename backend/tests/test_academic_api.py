from __future__ import annotations

from datetime import date

from sqlalchemy import select

from models import AcademicSession
from models.associations import batch_program, program_semester_sections

API = "/api/v1/academic"

BATCH = {
    "program_id": 1,
    "name": "Batch 2024",
    "code": "B2024",
    "academic_year": 2024,
    "start_date": "2024-01-01",
    "end_date": "2024-12-31",
    "status": "active",
}


def test_create_batch_then_duplicate(client, seed):
    seed.program()

    created = client.post(f"{API}/batches/", json=BATCH)
    assert created.status_code == 201
    body = created.json()
    assert body["success"] is True
    assert body["message"] == "Batch created successfully"
    assert body["data"]["code"] == "B2024"
    assert body["data"]["start_date"] == "2024-01-01"

    again = client.post(f"{API}/batches/", json=BATCH)
    assert again.status_code == 422
    assert again.json() == {
        "success": False,
        "message": "Validation failed",
        "errors": {
            "name": ["This batch name is already registered."],
            "code": ["This batch code is already registered."],
        },
    }


def test_patch_without_required_fields(client, seed):
    batch = seed.batch()
    resp = client.patch(f"{API}/batches/{batch.id}", json={"max_students": 40})
    assert resp.status_code == 200
    assert resp.json()["data"]["max_students"] == 40
    assert resp.json()["data"]["name"] == batch.name


def test_put_checks_what_is_sent(client, seed):
    batch = seed.batch()
    resp = client.put(f"{API}/batches/{batch.id}", json={"end_date": "2022-01-01"})
    assert resp.status_code == 422
    assert resp.json()["errors"] == {"end_date": ["The end date must be after the start date."]}


def test_missing_record_is_404(client, schema):
    assert client.get(f"{API}/batches/42").json() == {"detail": "BATCH_NOT_FOUND"}
    assert client.patch(f"{API}/faculties/42", json={}).status_code == 404


def test_batch_programs_pivot_is_synced(client, db, seed):
    program = seed.program()
    payload = dict(BATCH, programs=[program.id])
    created = client.post(f"{API}/batches/", json=payload).json()["data"]

    rows = db.execute(select(batch_program.c.program_id).where(batch_program.c.batch_id == created["id"])).all()
    assert [r[0] for r in rows] == [program.id]

    client.patch(f"{API}/batches/{created['id']}", json={"programs": []})
    rows = db.execute(select(batch_program).where(batch_program.c.batch_id == created["id"])).all()
    assert rows == []


def test_section_links_programs_to_semesters(client, db, seed):
    batch = seed.batch()
    semester = seed.semester()
    resp = client.post(
        f"{API}/sections/",
        json={"batch_id": batch.id, "name": "Section A", "programs": [batch.program_id], "semesters": [semester.id]},
    )
    assert resp.status_code == 201
    section_id = resp.json()["data"]["id"]
    t = program_semester_sections
    rows = db.execute(select(t.c.program_id, t.c.semester_id).where(t.c.section_id == section_id)).all()
    assert [tuple(r) for r in rows] == [(batch.program_id, semester.id)]

    dup = client.post(f"{API}/sections/", json={"batch_id": batch.id, "name": "Section A"})
    assert dup.status_code == 422
    assert list(dup.json()["errors"]) == ["name"]


def test_enroll_subject_combination(client, seed):
    program = seed.program()
    semester = seed.semester()
    section = seed.section(seed.batch(program=program))
    subject = seed.subject()
    payload = {
        "program_id": program.id,
        "semester_id": semester.id,
        "section_id": section.id,
        "subjects": [subject.id],
    }
    first = client.post(f"{API}/enroll-subjects/", json=payload)
    assert first.status_code == 201

    second = client.post(f"{API}/enroll-subjects/", json=payload)
    assert second.status_code == 422
    assert "combination" in second.json()["errors"]

    same = client.put(f"{API}/enroll-subjects/{first.json()['data']['id']}", json=payload)
    assert same.status_code == 200


def test_faculty_slug_and_form_payload(client, schema):
    resp = client.post(f"{API}/faculties/", data={"name": "Faculty of Arts", "code": "FOA", "sort_order": "3"})
    assert resp.status_code == 201
    data = resp.json()["data"]
    assert data["slug"] == "faculty-of-arts"
    assert data["sort_order"] == 3
    assert data["status"] == "active"


def test_invalid_json_body(client, schema):
    resp = client.post(
        f"{API}/faculties/",
        content=b"{not json",
        headers={"content-type": "application/json"},
    )
    assert resp.status_code == 400
    assert resp.json() == {"detail": "INVALID_JSON"}


def test_list_search_filter_and_pagination(client, seed):
    arts = seed.faculty(name="Arts", code="ART", status="inactive")
    seed.faculty(name="Science", code="SCI")
    seed.faculty(name="Applied Arts", code="AAR")

    page = client.get(f"{API}/faculties/", params={"per_page": 2}).json()
    assert page["meta"] == {"current_page": 1, "last_page": 2, "per_page": 2, "total": 3, "from": 1, "to": 2}

    found = client.get(f"{API}/faculties/", params={"search": "arts"}).json()
    assert {f["code"] for f in found["data"]} == {"ART", "AAR"}

    inactive = client.get(f"{API}/faculties/", params={"status": "inactive"}).json()
    assert [f["id"] for f in inactive["data"]] == [arts.id]


def test_soft_delete_hides_record(client, seed):
    faculty = seed.faculty(name="Arts", code="ART")
    assert client.delete(f"{API}/faculties/{faculty.id}").status_code == 200
    assert client.get(f"{API}/faculties/{faculty.id}").status_code == 404
    assert client.get(f"{API}/faculties/").json()["meta"]["total"] == 0


def test_bulk_status_and_delete(client, seed):
    a = seed.faculty(name="Arts", code="ART")
    b = seed.faculty(name="Science", code="SCI")

    resp = client.post(f"{API}/faculties/bulk-status", json={"ids": [a.id, b.id], "status": "inactive"})
    assert resp.status_code == 200
    assert resp.json()["data"] == {"affected": 2}
    assert client.get(f"{API}/faculties/{a.id}").json()["data"]["status"] == "inactive"

    bad = client.post(f"{API}/faculties/bulk-status", json={"ids": [a.id, 999], "status": "gone"})
    assert bad.status_code == 422
    assert set(bad.json()["errors"]) == {"ids.1", "status"}

    empty = client.request("DELETE", f"{API}/faculties/bulk-delete", json={"ids": []})
    assert empty.json()["errors"] == {"ids": ["Please select at least one record."]}

    deleted = client.request("DELETE", f"{API}/faculties/bulk-delete", json={"ids": [a.id]})
    assert deleted.json()["data"] == {"affected": 1}
    assert client.get(f"{API}/faculties/").json()["meta"]["total"] == 1


def test_set_current_session(client, db, seed):
    first = seed.session(is_current=True)
    second = seed.session(name="2025/2026", code="S2025")

    resp = client.post(f"{API}/academic-sessions/{second.id}/set-current")
    assert resp.status_code == 200
    assert resp.json()["data"]["is_current"] is True

    db.expire_all()
    assert db.get(AcademicSession, first.id).is_current is False
    assert client.post(f"{API}/academic-sessions/999/set-current").status_code == 404


def test_creating_current_semester_clears_the_previous_one(client, seed):
    old = seed.semester(is_current=True)
    resp = client.post(
        f"{API}/semesters/",
        json={
            "name": "Semester 2",
            "academic_year": 2024,
            "start_date": "2024-07-01",
            "end_date": "2024-12-20",
            "is_current": True,
        },
    )
    assert resp.status_code == 201
    assert client.get(f"{API}/semesters/{old.id}").json()["data"]["is_current"] is False


def test_soft_deleted_batch_values_can_be_reused(client, seed):
    seed.program()
    batch_id = client.post(f"{API}/batches/", json=BATCH).json()["data"]["id"]
    assert client.delete(f"{API}/batches/{batch_id}").status_code == 200

    resp = client.post(f"{API}/batches/", json=BATCH)
    assert resp.status_code == 201
    assert resp.json()["data"]["id"] != batch_id

    again = client.post(f"{API}/batches/", json=BATCH)
    assert again.status_code == 422
    assert set(again.json()["errors"]) == {"name", "code"}


def test_soft_deleted_section_name_can_be_reused_in_its_batch(client, seed):
    section = seed.section(seed.batch(), name="Section A")
    assert client.delete(f"{API}/sections/{section.id}").status_code == 200

    resp = client.post(f"{API}/sections/", json={"batch_id": section.batch_id, "name": "Section A"})
    assert resp.status_code == 201


def test_patching_start_date_past_stored_end_date_is_a_validation_error(client, seed):
    batch = seed.batch(start_date=date(2023, 1, 1), end_date=date(2023, 12, 31))
    resp = client.patch(f"{API}/batches/{batch.id}", json={"start_date": "2024-06-01"})
    assert resp.status_code == 422
    assert resp.json()["errors"] == {"end_date": ["The end date must be after the start date."]}


def test_faculty_names_with_the_same_slug(client, schema):
    first = client.post(f"{API}/faculties/", json={"name": "Computer Science", "code": "CSF"})
    assert first.status_code == 201

    resp = client.post(f"{API}/faculties/", json={"name": "Computer-Science", "code": "CSX"})
    assert resp.status_code == 422
    assert resp.json()["errors"] == {"name": ["A record with a similar faculty name already exists."]}
