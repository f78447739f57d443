from __future__ import annotations

import io
import json


def test_requires_login(client):
    resp = client.get("/api/entries?month=2024-06")
    assert resp.status_code == 401
    assert resp.get_json()["success"] is False


def test_login_with_wrong_password(client):
    resp = client.post("/api/login", json={"username": "mojca", "password": "nope"})
    assert resp.status_code == 401


def test_login_me_logout(client, login):
    login()
    me = client.get("/api/me").get_json()
    assert me["user"]["username"] == "mojca"
    assert me["user"]["is_admin"] is False

    client.post("/api/logout")
    assert client.get("/api/me").status_code == 401


def test_add_and_remove_shift(client, login):
    login()
    resp = client.post("/api/entries/2024-06-02/shifts", json={"startTime": "22:00", "endTime": "06:00"})
    assert resp.status_code == 201
    entry = resp.get_json()["entry"]
    assert entry["hours"] == 8.0
    assert entry["hours_display"] == "8,0"

    shift_id = entry["shifts"][0]["id"]
    resp = client.delete(f"/api/entries/2024-06-02/shifts/{shift_id}")
    assert resp.status_code == 200
    assert resp.get_json()["entry"] is None
    assert client.get("/api/entries/2024-06-02").get_json()["entry"] is None


def test_invalid_input_returns_400(client, login):
    login()
    assert client.post("/api/entries/2024-06-02/shifts", json={"startTime": "x", "endTime": "06:00"}).status_code == 400
    assert client.post("/api/entries/2024-13-02/shifts", json={"startTime": "08:00", "endTime": "09:00"}).status_code == 400
    assert client.get("/api/entries?month=June").status_code == 400
    assert client.post("/api/entries/2024-06-01/shifts", json={"startTime": 800, "endTime": "16:00"}).status_code == 400
    assert client.post("/api/entries/2024-06-01/shifts", json={"startTime": "08:00", "endTime": None}).status_code == 400
    assert client.post("/api/entries/2024-06-01/shifts", json=["08:00", "16:00"]).status_code == 400
    assert client.put("/api/entries/2024-06-01/comment", json={"comment": 5}).status_code == 400
    assert client.put("/api/entries/2024-06-01/comment", json=["doctor"]).status_code == 400
    assert client.put("/api/me/hourly-rate", json=[10]).status_code == 400
    assert client.get("/api/entries/2024-06-01").get_json()["entry"] is None


def test_non_object_bodies_on_user_endpoints(client, login):
    assert client.post("/api/login", json=["mojca", "mojca123"]).status_code == 400
    assert client.post("/api/login", json={"username": 5, "password": "mojca123"}).status_code == 401

    login("admin", "admin123")
    assert client.post("/api/admin/users", json=["keli"]).status_code == 400
    resp = client.post("/api/admin/users", json={"username": 7, "email": "keli@example.com", "password": 123456})
    assert resp.status_code == 400


def test_month_entries_and_comment(client, login):
    login()
    client.post("/api/entries/2024-06-01/shifts", json={"startTime": "08:00", "endTime": "16:00"})
    client.put("/api/entries/2024-06-03/comment", json={"comment": "doctor"})
    client.post("/api/entries/2024-07-01/shifts", json={"startTime": "08:00", "endTime": "16:00"})

    data = client.get("/api/entries?month=2024-06").get_json()

    assert data["month"] == "2024-06"
    assert [e["date"] for e in data["entries"]] == ["2024-06-01", "2024-06-03"]
    assert data["entries"][1]["comment"] == "doctor"


def test_summary_and_csv(client, login):
    login()
    client.post("/api/entries/2024-06-01/shifts", json={"startTime": "08:00", "endTime": "16:00"})
    client.post("/api/entries/2024-06-02/shifts", json={"startTime": "22:00", "endTime": "06:00"})
    client.put("/api/me/hourly-rate", json={"hourly_rate": 10})

    summary = client.get("/api/summary?month=2024-06").get_json()["summary"]
    assert summary["total_hours"] == 16
    assert summary["total_amount"] == 160.0
    assert summary["total_amount_display"] == "160,00 €"
    assert len(summary["days"]) == 30

    resp = client.get("/api/summary.csv?month=2024-06")
    assert resp.status_code == 200
    assert resp.mimetype == "text/csv"
    assert "summary_2024-06.csv" in resp.headers["Content-Disposition"]
    lines = resp.data.decode("utf-8-sig").splitlines()
    assert lines[0] == "Date;Hours;Comment;Amount"
    assert lines[-1] == "Total;16,0;;160,00"


def test_statistics(client, login):
    login()
    client.post("/api/entries/2024-05-31/shifts", json={"startTime": "08:00", "endTime": "12:00"})
    client.post("/api/entries/2024-06-01/shifts", json={"startTime": "08:00", "endTime": "16:00"})

    body = client.get("/api/statistics").get_json()
    months = body["months"]

    assert [m["month"] for m in months] == ["2024-05", "2024-06"]
    assert months[0]["earnings"] == 36.0

    totals = body["totals"]
    assert totals["hours"] == 12.0
    assert totals["earnings"] == 108.0
    assert totals["earnings_display"] == "108,00 €"


def test_backup_download_and_upload(client, login):
    login()
    client.post("/api/entries/2024-06-01/shifts", json={"startTime": "08:00", "endTime": "16:00"})

    resp = client.get("/api/backup")
    assert resp.status_code == 200
    backup = json.loads(resp.data)
    assert backup["username"] == "mojca"

    backup["entries"].append({"date": "2024-06-05", "shifts": [{"id": "z", "startTime": "09:00", "endTime": "10:00"}]})
    upload = {"file": (io.BytesIO(json.dumps(backup).encode("utf-8")), "backup.json")}
    resp = client.post("/api/backup", data=upload, content_type="multipart/form-data")

    assert resp.status_code == 200
    assert resp.get_json()["imported"] == 2
    assert client.get("/api/entries/2024-06-05").get_json()["entry"]["hours"] == 1.0


def test_backup_upload_rejects_bad_file(client, login):
    login()
    resp = client.post("/api/backup", json={"entries": []})
    assert resp.status_code == 400
    assert resp.get_json()["message"] == "Invalid backup file format"


def test_admin_endpoints(client, login):
    login()
    assert client.get("/api/admin/users").status_code == 403
    client.post("/api/logout")

    login("admin", "admin123")
    resp = client.post(
        "/api/admin/users",
        json={"username": "keli", "email": "keli@example.com", "password": "kelimuca"},
    )
    assert resp.status_code == 201

    users = client.get("/api/admin/users").get_json()["users"]
    assert {u["username"] for u in users} == {"admin", "mojca", "keli"}


def test_storage_failure_returns_stored_entries(client, login, entries_repo):
    login()
    client.post("/api/entries/2024-06-01/shifts", json={"startTime": "08:00", "endTime": "16:00"})
    entries_repo.fail_writes = True

    resp = client.post("/api/entries/2024-06-01/shifts", json={"startTime": "18:00", "endTime": "20:00"})

    assert resp.status_code == 503
    body = resp.get_json()
    assert len(body["entries"]) == 1
    assert len(body["entries"][0]["shifts"]) == 1
