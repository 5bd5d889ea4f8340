"""
THIS PAGE DOCUMENTS THE USER STORES

General rule of thumb, all raw cypher queries get put in here.
A store owns the uniqueness of phone, callers never check for an existing user before inserting.
"""
# external
import datetime
import logging
import threading
import uuid
from typing import Dict, Optional, Protocol
from neo4j import Session
from neo4j.exceptions import ConstraintError
# internal
from app.core.errors import DuplicateKeyError
from app.schemas.users import UserInDb, UserRecord

logger = logging.getLogger(__name__)

class UserStore(Protocol):
    """What a storage collaborator has to provide for user records"""

    def ensure_constraints(self) -> None: ...

    async def insert(self, record: UserRecord) -> UserInDb: ...

    async def get_by_phone(self, phone: str) -> Optional[UserInDb]: ...


class Neo4jUserStore:
    """User records as :User nodes. Uniqueness of phone is a database constraint."""

    def __init__(self, session: Session):
        self.session = session

    def ensure_constraints(self) -> None:
        """Creates the phone uniqueness constraint if it isn't there yet"""
        query = """
        CREATE CONSTRAINT user_phone_unique IF NOT EXISTS
        FOR (u:User) REQUIRE u.phone IS UNIQUE
        """
        self.session.run(query).consume()

    async def insert(self, record: UserRecord) -> UserInDb:
        """
        Writes the record as a :User node, letting Neo4j assign user_id.
        A phone that is already taken trips the unique constraint and comes back as DuplicateKeyError.
        """
        query = """
        CREATE (u:User {
            user_id: randomUUID(),
            phone: $phone,
            created_at: $created_at
        })
        SET u += $extra
        RETURN u
        """
        params = {
            "phone": record.phone,
            "created_at": str(datetime.datetime.now()),
            "extra": record.extra_fields(),
        }
        try:
            result = self.session.run(query, **params)
            db_record = result.single()
        except ConstraintError as e:
            # only the phone constraint maps to a duplicate phone
            if "phone" not in str(e):
                raise
            logger.warning("rejected duplicate phone %s", record.phone)
            raise DuplicateKeyError(field="phone", value=record.phone) from e

        if db_record is None:
            raise RuntimeError(f"CREATE returned no node for phone {record.phone}")

        created_user = UserInDb(**dict(db_record["u"]))
        logger.info("created user %s", created_user.user_id)
        return created_user

    async def get_by_phone(self, phone: str) -> Optional[UserInDb]:
        """Returns the :User node with this phone, or None"""
        query = """
        MATCH (u:User {phone: $phone})
        RETURN u
        """
        result = self.session.run(query, phone=str(phone))
        db_record = result.single()

        if db_record is None:
            return None

        return UserInDb(**dict(db_record["u"]))


class InMemoryUserStore:
    """Keeps user records in a dict keyed by phone. Used for tests and running without a database."""

    def __init__(self):
        self._users: Dict[str, UserInDb] = {}
        self._lock = threading.Lock()

    def ensure_constraints(self) -> None:
        # the dict key is the constraint
        return None

    async def insert(self, record: UserRecord) -> UserInDb:
        """Same contract as Neo4jUserStore.insert"""
        with self._lock:
            if record.phone in self._users:
                logger.warning("rejected duplicate phone %s", record.phone)
                raise DuplicateKeyError(field="phone", value=record.phone)
            created_user = UserInDb(
                user_id=str(uuid.uuid4()),
                phone=record.phone,
                created_at=str(datetime.datetime.now()),
                **record.extra_fields(),
            )
            self._users[record.phone] = created_user
        logger.info("created user %s", created_user.user_id)
        return created_user

    async def get_by_phone(self, phone: str) -> Optional[UserInDb]:
        return self._users.get(str(phone))
