from agency.services.booking_queries import (
    bookings_for_show,
    search_bookings,
    staff_booking_history,
)

BOOKINGS = [
    {
        "id": "bk-1",
        "clientId": "cl-1",
        "showId": "sh-1",
        "status": "Confirmed",
        "datesNeeded": [
            {"date": "2025-03-01", "staffCount": 2, "staffIds": ["a", "b"]},
            {"date": "2025-03-02", "staffCount": 2, "staffIds": ["a"]},
        ],
    },
    {
        "id": "bk-2",
        "clientId": "cl-2",
        "showId": "sh-1",
        "status": "pending",
        "datesNeeded": [
            {"date": "2025-03-02", "staffCount": 1, "staffIds": ["b"]},
        ],
    },
    {
        "id": "bk-3",
        "clientId": "cl-1",
        "showId": "sh-2",
        "status": "cancelled",
        "datesNeeded": None,
    },
]


def _ids(bookings) -> list[str]:
    return [b["id"] for b in bookings]


def test_no_criteria_returns_everything() -> None:
    assert _ids(search_bookings(BOOKINGS)) == ["bk-1", "bk-2", "bk-3"]


def test_search_by_each_criterion() -> None:
    assert _ids(search_bookings(BOOKINGS, client_id="cl-1")) == ["bk-1", "bk-3"]
    assert _ids(search_bookings(BOOKINGS, show_id="sh-1")) == ["bk-1", "bk-2"]
    assert _ids(search_bookings(BOOKINGS, staff_id="b")) == ["bk-1", "bk-2"]
    assert _ids(search_bookings(BOOKINGS, status="confirmed")) == ["bk-1"]
    assert _ids(search_bookings(BOOKINGS, date="2025-03-02")) == ["bk-1", "bk-2"]


def test_criteria_combine() -> None:
    assert _ids(search_bookings(BOOKINGS, show_id="sh-1", staff_id="a")) == ["bk-1"]
    assert search_bookings(BOOKINGS, client_id="cl-2", date="2025-03-01") == []


def test_bookings_for_show() -> None:
    assert _ids(bookings_for_show(BOOKINGS, "sh-2")) == ["bk-3"]
    assert bookings_for_show(BOOKINGS, "") == []


def test_staff_booking_history() -> None:
    history = staff_booking_history(BOOKINGS, "a")

    assert len(history) == 1
    assert history[0].booking_id == "bk-1"
    assert history[0].days_worked == 2

    history = staff_booking_history(BOOKINGS, "b")
    assert [(h.booking_id, h.days_worked) for h in history] == [("bk-1", 1), ("bk-2", 1)]

    assert staff_booking_history(BOOKINGS, "nobody") == []
