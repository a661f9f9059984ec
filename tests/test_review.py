def test_admin_approves_with_trimmed_notes(client, student_headers, admin_headers, make_submission):
    sub = make_submission(student_headers)

    r = client.post(
        f"/admin/submissions/{sub['id']}/approve",
        headers=admin_headers,
        json={"notes": "  Ready for the expo  "},
    )
    assert r.status_code == 200, r.text
    body = r.json()
    assert body["status"] == "approved"
    assert body["admin_notes"] == "Ready for the expo"
    assert body["owner_full_name"] == "Maya Putri"


def test_admin_rejects_without_body(client, student_headers, admin_headers, make_submission):
    sub = make_submission(student_headers)

    r = client.post(f"/admin/submissions/{sub['id']}/reject", headers=admin_headers)
    assert r.status_code == 200, r.text
    assert r.json()["status"] == "rejected"
    assert r.json()["admin_notes"] is None


def test_blank_notes_are_stored_as_null(client, student_headers, admin_headers, make_submission):
    sub = make_submission(student_headers)

    r = client.post(f"/admin/submissions/{sub['id']}/reject", headers=admin_headers, json={"notes": "   "})
    assert r.json()["admin_notes"] is None


def test_reviewed_submission_cannot_be_reviewed_again(client, student_headers, admin_headers, make_submission):
    sub = make_submission(student_headers)
    client.post(f"/admin/submissions/{sub['id']}/approve", headers=admin_headers)

    r = client.post(f"/admin/submissions/{sub['id']}/reject", headers=admin_headers)
    assert r.status_code == 409
    assert r.json()["detail"] == "Submission has already been approved"


def test_student_cannot_review(client, student_headers, make_submission):
    sub = make_submission(student_headers)

    r = client.post(f"/admin/submissions/{sub['id']}/approve", headers=student_headers)
    assert r.status_code == 403
    assert r.json()["detail"] == "Admin role required"


def test_review_unknown_submission(client, admin_headers):
    r = client.post("/admin/submissions/9999/approve", headers=admin_headers)
    assert r.status_code == 404


def test_stats_count_each_status(client, student_headers, other_student_headers, admin_headers, make_submission):
    a = make_submission(student_headers)
    b = make_submission(student_headers)
    make_submission(other_student_headers)
    client.post(f"/admin/submissions/{a['id']}/approve", headers=admin_headers)
    client.post(f"/admin/submissions/{b['id']}/reject", headers=admin_headers)

    r = client.get("/admin/submissions/stats", headers=admin_headers)
    assert r.status_code == 200
    assert r.json() == {"total": 3, "pending": 1, "approved": 1, "rejected": 1}


def test_stats_require_admin(client, student_headers):
    assert client.get("/admin/submissions/stats", headers=student_headers).status_code == 403


def test_review_queue_filters_by_status_and_program(
    client, student_headers, other_student_headers, admin_headers, make_submission
):
    ti = make_submission(student_headers, program_study="Teknik Informatika")
    make_submission(other_student_headers, program_study="Sistem Informasi")
    client.post(f"/admin/submissions/{ti['id']}/approve", headers=admin_headers)

    r = client.get("/admin/submissions", headers=admin_headers, params={"status": "approved"})
    assert [s["id"] for s in r.json()["items"]] == [ti["id"]]

    r = client.get("/admin/submissions", headers=admin_headers, params={"program": "Sistem Informasi"})
    body = r.json()
    assert body["total"] == 1
    assert body["items"][0]["program_study"] == "Sistem Informasi"

    r = client.get(
        "/admin/submissions",
        headers=admin_headers,
        params={"status": "approved", "program": "Sistem Informasi"},
    )
    assert r.json()["items"] == []


def test_review_queue_searches_owner_name(client, student_headers, other_student_headers, admin_headers, make_submission):
    mine = make_submission(student_headers)
    make_submission(other_student_headers)

    r = client.get("/admin/submissions", headers=admin_headers, params={"search": "MAYA"})
    assert [s["id"] for s in r.json()["items"]] == [mine["id"]]


def test_review_queue_sorts_and_reports_next_direction(client, student_headers, admin_headers, make_submission):
    for name in ("beta", "Alpha", "gamma"):
        make_submission(student_headers, project_name=name)

    r = client.get(
        "/admin/submissions",
        headers=admin_headers,
        params={"sort": "project_name", "direction": "desc"},
    )
    assert r.status_code == 200
    body = r.json()
    assert [s["project_name"] for s in body["items"]] == ["gamma", "beta", "Alpha"]
    assert body["next_sort"]["project_name"] == "asc"
    assert body["next_sort"]["course"] == "asc"


def test_review_queue_rejects_unknown_sort_field(client, admin_headers):
    r = client.get("/admin/submissions", headers=admin_headers, params={"sort": "hashed_password"})
    assert r.status_code == 400


def test_review_queue_requires_admin(client, student_headers):
    assert client.get("/admin/submissions", headers=student_headers).status_code == 403
