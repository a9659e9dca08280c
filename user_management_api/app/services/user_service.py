"""
Business logic for users.

The ``UserService`` keeps users in a process‑wide list and provides
the CRUD and search operations used by the API.  Lookups are linear
scans, and callers only ever receive copies of the stored models.
Nothing is persisted and no locking is done, so the store is lost on
restart and is not safe under concurrent writers.
"""

import logging
from typing import List, Optional

from ..schemas.user import UserBase, UserCreate, UserRead, UserUpdate


logger = logging.getLogger(__name__)

# Demo records loaded by ``UserService.reset(seed=True)``.
SEED_USERS = [
    {"name": "John Doe", "email": "john@example.com", "age": 30},
    {"name": "Jane Smith", "email": "jane@example.com", "age": 25},
    {"name": "Bob Wilson", "email": "bob@example.com", "age": 35},
]

MIN_AGE = 1
MAX_AGE = 150


class UserService:
    """Сервис для работы с пользователями.

    Users are kept in insertion order.  Identifiers come from a
    counter that only ever grows, so an id is never handed out twice,
    even after the user holding it has been deleted.
    """

    _users: List[UserRead] = []
    _next_id: int = 1

    @classmethod
    def reset(cls, seed: bool = True) -> None:
        """Drop every user and restart the id counter.

        With ``seed`` the store is filled with the demo users (ids 1-3)
        and the next id is 4.
        """
        cls._users = []
        cls._next_id = 1
        if seed:
            for record in SEED_USERS:
                cls._append(UserCreate(**record))
        logger.debug("User store reset with %d users", len(cls._users))

    @staticmethod
    def validate_user(data: UserBase) -> None:
        """Check a user payload, raising ``ValueError`` on the first problem."""
        if not data.name.strip():
            raise ValueError("name is required")
        if not data.email.strip():
            raise ValueError("email is required")
        if "@" not in data.email:
            raise ValueError("invalid email format")
        if data.age < MIN_AGE or data.age > MAX_AGE:
            raise ValueError("age must be a positive integer (1-150)")

    @classmethod
    async def list_users(cls) -> List[UserRead]:
        """Return copies of all users in insertion order."""
        return [user.model_copy() for user in cls._users]

    @classmethod
    async def get_user(cls, user_id: int) -> Optional[UserRead]:
        """Return a copy of the user with ``user_id`` or ``None`` if there is none."""
        index = cls._find_index(user_id)
        if index is None:
            return None
        return cls._users[index].model_copy()

    @classmethod
    async def create_user(cls, data: UserCreate) -> UserRead:
        """Validate ``data`` and store it under a fresh id.

        Raises ``ValueError`` if the payload is invalid; the store is
        left untouched in that case.
        """
        try:
            cls.validate_user(data)
        except ValueError as e:
            logger.warning("Rejected new user: %s", e)
            raise
        user = cls._append(data)
        logger.info("Created user %s (%s)", user.id, user.email)
        return user.model_copy()

    @classmethod
    async def update_user(cls, user_id: int, data: UserUpdate) -> Optional[UserRead]:
        """Replace the name, email and age of an existing user.

        Returns ``None`` if the user does not exist; existence is
        checked before the payload is validated.  Raises ``ValueError``
        for an invalid payload.  The id and list position are kept.
        """
        index = cls._find_index(user_id)
        if index is None:
            return None
        try:
            cls.validate_user(data)
        except ValueError as e:
            logger.warning("Rejected update of user %s: %s", user_id, e)
            raise
        user = cls._users[index]
        user.name = data.name
        user.email = data.email
        user.age = data.age
        logger.info("Updated user %s", user_id)
        return user.model_copy()

    @classmethod
    async def delete_user(cls, user_id: int) -> bool:
        """Remove a user.  Returns ``False`` if no such user exists."""
        index = cls._find_index(user_id)
        if index is None:
            return False
        del cls._users[index]
        logger.info("Deleted user %s", user_id)
        return True

    @classmethod
    async def search_users(cls, name: str) -> List[UserRead]:
        """Return users whose name contains ``name``, ignoring case."""
        needle = name.lower()
        return [user.model_copy() for user in cls._users if needle in user.name.lower()]

    @classmethod
    def _find_index(cls, user_id: int) -> Optional[int]:
        for index, user in enumerate(cls._users):
            if user.id == user_id:
                return index
        return None

    @classmethod
    def _append(cls, data: UserBase) -> UserRead:
        user = UserRead(id=cls._next_id, name=data.name, email=data.email, age=data.age)
        cls._users.append(user)
        cls._next_id += 1
        return user
