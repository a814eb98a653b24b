from datetime import date

from binvalet.persistence.memory import MemStorage
from binvalet.services.dashboard import conversations, daily_summary, reply_to_message, search_messages

MONDAY = date(2026, 10, 19)


def test_daily_summary_counts_todays_work():
    storage = MemStorage(seed=True, today=MONDAY)
    storage.update_route(2, {"status": "completed"})
    storage.update_bin_cleaning_appointment(1, {"status": "completed"})

    summary = daily_summary(storage, today=MONDAY)

    assert summary.weekday == "monday"
    assert [route.name for route in summary.todays_routes] == ["Route A - North Side", "Route B - South Side"]
    assert summary.completed_routes == 1
    assert [message.customer_name for message in summary.unread_messages] == ["John Smith"]
    assert len(summary.todays_cleanings) == 1
    assert summary.todays_revenue_cents == 3500
    assert summary.todays_bin_count == 2


def test_daily_summary_other_day():
    storage = MemStorage(seed=True, today=MONDAY)
    summary = daily_summary(storage, today=date(2026, 10, 20))

    assert summary.weekday == "tuesday"
    assert [route.name for route in summary.todays_routes] == ["Route C - Downtown"]
    assert summary.todays_revenue_cents == 0
    assert summary.todays_bin_count == 1


def test_search_messages_is_case_insensitive():
    storage = MemStorage(seed=True)
    messages = storage.list_messages()

    assert [message.customer_name for message in search_messages(messages, "SARAH")] == ["Sarah Johnson"]
    assert [message.customer_name for message in search_messages(messages, "guests")] == ["John Smith"]
    assert search_messages(messages, None) == messages


def test_reply_marks_original_read_and_threads_conversation():
    storage = MemStorage(seed=True)
    reply = reply_to_message(storage, 1, "Will do, see you at 7.")

    assert reply.customer_id == 1
    assert reply.is_from_customer is False
    assert storage.get_message(1).is_read is True

    threads = conversations(storage.list_messages())
    assert threads[0].customer_name == "John Smith"
    assert [message.id for message in threads[0].messages] == [1, reply.id]
    assert threads[0].unread_count == 0
    assert threads[0].latest.id == reply.id


def test_sample_appointments_use_business_timezone(monkeypatch):
    from binvalet.config import local_today, settings

    monkeypatch.setattr(settings, "timezone_name", "Pacific/Kiritimati")
    storage = MemStorage(seed=True)
    summary = daily_summary(storage)

    assert summary.today == local_today()
    assert [item.customer_name for item in summary.todays_cleanings] == ["John Smith"]
