# internal
from app.schemas.phone import validate_phone
from app.schemas.users import UserInDb, UserRecord
from app.services.user_store import UserStore

async def create_user(store: UserStore, **fields) -> UserInDb:
    """
    Creates a user record.
    The phone is validated here, before the store is touched. MissingFieldError or FormatValidationError
    come out of building the record, DuplicateKeyError comes out of the store.
    Returns the stored user
    """
    record = UserRecord(**fields)
    return await store.insert(record)

async def find_user_by_phone(store: UserStore, phone: str) -> UserInDb | None:
    """Looks a user up by phone, malformed phones raise instead of returning None"""
    return await store.get_by_phone(validate_phone(phone))
