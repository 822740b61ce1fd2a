from fastapi.testclient import TestClient

from agency.main import app


def _make_client() -> TestClient:
    return TestClient(app)


BOOKINGS = [
    {
        "id": "bk-1",
        "clientId": "cl-1",
        "showId": "sh-1",
        "status": "final_paid",
        "revenue": 500,
        "datesNeeded": [
            {"date": "2025-03-02", "staffCount": 2, "staffIds": ["jane"]},
            {"date": "2025-03-01", "staffCount": 2, "staffIds": ["jane", "bob"]},
        ],
    },
    {
        "id": "bk-2",
        "clientId": "cl-2",
        "showId": "sh-1",
        "status": "pending",
        "paymentStatus": "unpaid",
        "datesNeeded": [
            {"date": "2025-03-03", "staffCount": 1, "staffIds": ["jane"]},
        ],
    },
    {
        "id": "bk-3",
        "clientId": "cl-1",
        "showId": "sh-2",
        "status": "cancelled",
        "datesNeeded": [
            {"date": "2025-04-01", "staffCount": 4, "staffIds": ["bob"]},
        ],
    },
]

STAFF = [
    {"id": "jane", "name": "Jane", "payRate": 20},
    {"id": "bob", "firstName": "Bob", "lastName": "Stone", "payRate": "18"},
]


def test_health() -> None:
    with _make_client() as client:
        resp = client.get("/health")
        assert resp.status_code == 200
        assert resp.json() == {"status": "ok"}


def test_booking_summary() -> None:
    with _make_client() as client:
        resp = client.post("/bookings/summary", json=BOOKINGS[0])
        assert resp.status_code == 200
        data = resp.json()

        assert data["booking_id"] == "bk-1"
        assert data["payment_status"] == "paid"
        assert data["payment_label"] is None
        assert data["date_range"] == {"first_date": "2025-03-01", "last_date": "2025-03-02"}

        staffing = data["staffing"]
        assert staffing["active_date_count"] == 2
        assert staffing["total_staff_days_needed"] == 4
        assert staffing["total_staff_days_assigned"] == 3
        assert staffing["staffing_status"] == "unfilled"
        assert staffing["unfilled_by_date"] == {"2025-03-02": 1}


def test_booking_summary_without_dates() -> None:
    with _make_client() as client:
        resp = client.post("/bookings/summary", json={"id": "bk-x", "status": "pending"})
        assert resp.status_code == 200
        data = resp.json()

        assert data["staffing"]["staffing_status"] == "unfilled"
        assert data["date_range"] is None
        assert data["payment_status"] == "pending"


def test_booking_summary_rejects_invalid_body() -> None:
    with _make_client() as client:
        resp = client.post("/bookings/summary", json={"datesNeeded": [{"staffCount": "many"}]})
        assert resp.status_code == 422


def test_booking_search() -> None:
    with _make_client() as client:
        resp = client.post("/bookings/search", json={"bookings": BOOKINGS, "staffId": "bob"})
        assert resp.status_code == 200
        assert [b["id"] for b in resp.json()] == ["bk-1", "bk-3"]

        resp = client.post("/bookings/search", json={"bookings": BOOKINGS, "status": "PENDING"})
        assert [b["id"] for b in resp.json()] == ["bk-2"]


def test_show_payroll() -> None:
    with _make_client() as client:
        resp = client.post(
            "/shows/sh-1/payroll",
            json={"bookings": BOOKINGS, "staff": STAFF, "hoursPerDay": 9},
        )
        assert resp.status_code == 200
        data = resp.json()

        assert data["show_id"] == "sh-1"
        assert [e["name"] for e in data["entries"]] == ["Bob Stone", "Jane"]
        jane = data["entries"][1]
        assert jane["days_worked"] == 3
        assert jane["total_owed"] == 540
        assert data["grand_total"] == 540 + 9 * 18


def test_show_payroll_with_oversized_pay_rate() -> None:
    staff = [{"id": "jane", "name": "Jane", "payRate": 10**400}]
    with _make_client() as client:
        resp = client.post(
            "/shows/sh-1/payroll",
            json={"bookings": BOOKINGS, "staff": staff, "hoursPerDay": 9},
        )
        assert resp.status_code == 200
        data = resp.json()

        jane = next(e for e in data["entries"] if e["staff_id"] == "jane")
        assert jane["rate"] == 0
        assert jane["total_owed"] == 0


def test_show_payroll_rejects_non_positive_hours() -> None:
    with _make_client() as client:
        resp = client.post(
            "/shows/sh-1/payroll",
            json={"bookings": BOOKINGS, "staff": STAFF, "hoursPerDay": 0},
        )
        assert resp.status_code == 422


def test_dashboard_stats() -> None:
    with _make_client() as client:
        resp = client.post("/dashboard/stats", json={"bookings": BOOKINGS})
        assert resp.status_code == 200
        data = resp.json()

        assert data["active_bookings"] == 2
        assert data["total_active_dates"] == 3
        assert data["total_staff_days"] == 5
        assert data["total_assigned_slots"] == 4
        assert data["utilization_percentage"] == 80
        assert data["unique_staff_assigned"] == 2
        assert data["total_revenue"] == 500


def test_staff_history() -> None:
    with _make_client() as client:
        resp = client.post("/staff/jane/history", json={"bookings": BOOKINGS})
        assert resp.status_code == 200
        data = resp.json()

        assert [(h["booking_id"], h["days_worked"]) for h in data] == [("bk-1", 2), ("bk-2", 1)]
