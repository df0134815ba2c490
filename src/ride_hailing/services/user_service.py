"""User record operations."""

from ride_hailing.entities import USER_ID_PREFIX, User, new_id
from ride_hailing.protocols import DocumentStore
from ride_hailing.repositories import user_from_document, user_to_document
from ride_hailing.repositories.documents import FIELD_TRAVEL, FIELD_TRAVELING
from ride_hailing.results import Result

from .base import RecordService


class UserService(RecordService[User]):
    entity_name = "user"
    not_found_message = "User not found"

    def __init__(self, store: DocumentStore) -> None:
        super().__init__(store, user_to_document, user_from_document)

    def create(self, name: str) -> Result[User]:
        user = User(id=new_id(USER_ID_PREFIX), name=name)
        return self._insert(user)

    def update_travel(self, user_id: str, traveling: bool, travel: str | None) -> Result[User]:
        return self._update(
            user_id,
            {
                FIELD_TRAVELING: traveling,
                FIELD_TRAVEL: travel,
            },
        )
