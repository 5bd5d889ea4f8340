import pytest

from app.core.errors import FormatValidationError, MissingFieldError, ReservedFieldError
from app.schemas.users import UserInDb, UserRecord


def test_record_keeps_phone_and_other_fields():
    record = UserRecord(phone="+11234567890", name="Asha", college="IIT")
    assert record.phone == "+11234567890"
    assert record.extra_fields() == {"name": "Asha", "college": "IIT"}


def test_record_without_phone():
    with pytest.raises(MissingFieldError):
        UserRecord(name="Asha")


def test_record_with_empty_phone():
    with pytest.raises(MissingFieldError):
        UserRecord(phone="")


def test_record_with_bad_phone():
    with pytest.raises(FormatValidationError) as exc_info:
        UserRecord(phone="12345")
    assert exc_info.value.message == "12345 is not a valid phone number!"


def test_user_in_db_still_validates_phone():
    with pytest.raises(FormatValidationError):
        UserInDb(phone="abc", user_id="1", created_at="now")


@pytest.mark.parametrize("field", ["user_id", "created_at"])
def test_record_rejects_store_assigned_fields(field):
    with pytest.raises(ReservedFieldError) as exc_info:
        UserRecord(phone="1234567890", **{field: "client-chosen"})
    assert exc_info.value.field == field


def test_user_in_db_accepts_store_assigned_fields():
    user = UserInDb(phone="1234567890", user_id="abc", created_at="2026-01-01")
    assert user.extra_fields() == {}
