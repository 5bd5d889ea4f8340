from pydantic import BaseModel, ConfigDict, Field, model_validator

# internal
from app.core.errors import ReservedFieldError
from app.schemas.phone import Phone

# set by the store on insert, never by callers
RESERVED_FIELDS = ("user_id", "created_at")

class UserRecord(BaseModel):
    """
    A user record keyed by phone number.
    Only phone is defined, any other fields are kept as they are given.
    """
    model_config = ConfigDict(extra="allow")

    # default is validated so a missing phone raises MissingFieldError instead of a pydantic error
    phone: Phone = Field(default=None, validate_default=True)

    @model_validator(mode="after")
    def reject_reserved_fields(self):
        for field in RESERVED_FIELDS:
            if field in (self.model_extra or {}):
                raise ReservedFieldError(field)
        return self

    def extra_fields(self) -> dict:
        """Everything on the record besides phone"""
        return dict(self.model_extra or {})

class UserInDb(UserRecord):
    """A stored user record, with the id and timestamp its store assigned"""
    user_id: str
    created_at: str
