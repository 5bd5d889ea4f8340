"""
Errors raised while creating user records.

Validation errors come out of the phone validator before anything is written.
DuplicateKeyError only ever comes out of a UserStore.
"""


class UserRecordError(Exception):
    """Base error for anything that goes wrong creating a user record"""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(UserRecordError):
    """The candidate value was rejected by a field validator"""


class MissingFieldError(ValidationError):
    """A required field was absent or empty"""

    def __init__(self, field: str = "phone", message: str = "Please provide your phone number"):
        super().__init__(message)
        self.field = field


class FormatValidationError(ValidationError):
    """The value was present but did not match the required format"""

    def __init__(self, value):
        super().__init__(f"{value} is not a valid phone number!")
        self.value = value


class DuplicateKeyError(UserRecordError):
    """The store already holds a record with this value for a unique field"""

    def __init__(self, field: str, value: str):
        super().__init__(f"A user with this {field} already exists.")
        self.field = field
        self.value = value


class ReservedFieldError(ValidationError):
    """The caller tried to set a field only the store may assign"""

    def __init__(self, field: str):
        super().__init__(f"{field} is assigned by the store and cannot be provided")
        self.field = field
