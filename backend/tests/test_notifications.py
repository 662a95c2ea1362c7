import pytest

from institute_admin.errors import NotFoundError, ValidationError
from institute_admin.services import notification_service


def test_builders_and_read_flags(db):
    notification_service.create_batch_completion_notification(db, "WDB1", "WDB1")
    notification_service.create_batch_warning_notification(db, "DMB2", "DMB2", 5)

    items = notification_service.get_notifications(db)
    assert {n.noti_type for n in items} == {"batch-completion", "batch-warning"}
    warning = next(n for n in items if n.noti_type == "batch-warning")
    assert warning.title == "Batch Ending Soon"
    assert warning.message == 'Batch "DMB2" will end in 5 days. Prepare for batch completion.'

    notification_service.mark_read(db, warning.id)
    unread = notification_service.get_notifications(db, unread_only=True)
    assert [n.noti_type for n in unread] == ["batch-completion"]

    assert notification_service.mark_all_read(db) == 1
    assert notification_service.get_notifications(db, unread_only=True) == []


def test_unknown_type_is_rejected(db):
    with pytest.raises(ValidationError):
        notification_service.add_notification(db, "sms", "nope")


def test_mark_read_missing(db):
    with pytest.raises(NotFoundError):
        notification_service.mark_read(db, 12345)


def test_notification_api(client, db):
    notification_service.create_batch_completion_notification(db, "WDB1", "WDB1")
    listed = client.get("/api/notifications")
    assert listed.status_code == 200
    noti_id = listed.json()[0]["id"]

    read = client.patch(f"/api/notifications/{noti_id}/read")
    assert read.status_code == 200
    assert read.json()["is_read"] is True

    assert client.patch("/api/notifications/999/read").status_code == 404

    cleared = client.delete("/api/notifications")
    assert cleared.json()["deleted"] == 1
    assert client.get("/api/notifications").json() == []
