# bookit/repository.py

import logging
from typing import Any, Dict, Generic, List, Optional, Tuple, Type, TypeVar

from pydantic import ValidationError as PydanticValidationError

from bookit.data import KEYS
from bookit.schemas import AuthSession, Booking, CamelModel, Service, User, utcnow
from bookit.store import KeyValueStore

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=CamelModel)


class Collection(Generic[T]):
    """One JSON list of records stored under a fixed key.

    Records that fail validation are hidden from reads but written back
    untouched, so a single bad entry never costs the valid ones.
    """

    def __init__(self, store: KeyValueStore, key: str, model: Type[T]):
        self.store = store
        self.key = key
        self.model = model

    def _load(self) -> Tuple[List[T], List[Any]]:
        raw = self.store.get(self.key)
        if not isinstance(raw, list):
            return [], []
        items, rejected = [], []
        for entry in raw:
            try:
                items.append(self.model.model_validate(entry))
            except PydanticValidationError:
                rejected.append(entry)
        if rejected:
            logger.warning("Skipping %d malformed record(s) in %r", len(rejected), self.key)
        return items, rejected

    def _write(self, items: List[T], rejected: List[Any]) -> None:
        self.store.set(self.key, [item.dump() for item in items] + rejected)

    def list(self) -> List[T]:
        return self._load()[0]

    def list_by(self, field: str, value: Any) -> List[T]:
        return [item for item in self.list() if getattr(item, field, None) == value]

    def get_by_id(self, item_id: str) -> Optional[T]:
        for item in self.list():
            if item.id == item_id:
                return item
        return None

    def create(self, entity: T) -> T:
        items, rejected = self._load()
        items.append(entity)
        self._write(items, rejected)
        return entity

    def update(self, item_id: str, fields: Dict[str, Any]) -> Optional[T]:
        items, rejected = self._load()
        updated = None
        for i, item in enumerate(items):
            if item.id != item_id:
                continue
            merged = {**item.model_dump(), **fields, "updated_at": utcnow()}
            updated = self.model.model_validate(merged)
            items[i] = updated
        if updated is not None:
            self._write(items, rejected)
        return updated

    def delete(self, item_id: str) -> bool:
        items, rejected = self._load()
        kept = [item for item in items if item.id != item_id]
        if len(kept) == len(items):
            return False
        self._write(kept, rejected)
        return True

    def delete_where(self, field: str, value: Any) -> int:
        items, rejected = self._load()
        kept = [item for item in items if getattr(item, field, None) != value]
        # unreadable records that still name the value go too
        alias = self.model.model_fields[field].alias or field
        kept_rejected = [
            entry for entry in rejected
            if not (isinstance(entry, dict) and entry.get(alias) == value)
        ]
        removed = len(items) - len(kept) + len(rejected) - len(kept_rejected)
        rejected = kept_rejected
        if removed:
            self._write(kept, rejected)
        return removed


class Repository:
    def __init__(self, store: KeyValueStore):
        self.store = store
        self.users: Collection[User] = Collection(store, KEYS["users"], User)
        self.services: Collection[Service] = Collection(store, KEYS["services"], Service)
        self.bookings: Collection[Booking] = Collection(store, KEYS["bookings"], Booking)

    # ---- users ----

    def get_users(self) -> List[User]:
        return self.users.list()

    def save_user(self, user: User) -> User:
        return self.users.create(user)

    def find_user_by_email(self, email: str) -> Optional[User]:
        wanted = email.lower()
        for user in self.users.list():
            if user.email.lower() == wanted:
                return user
        return None

    # ---- session ----

    def get_auth(self) -> Optional[AuthSession]:
        raw = self.store.get(KEYS["auth"])
        if not raw:
            return None
        try:
            return AuthSession.model_validate(raw)
        except PydanticValidationError:
            logger.warning("Stored session is malformed; ignoring it")
            return None

    def save_auth(self, auth: AuthSession) -> None:
        self.store.set(KEYS["auth"], auth.dump())

    def clear_auth(self) -> None:
        self.store.remove(KEYS["auth"])

    # ---- services ----

    def get_services(self) -> List[Service]:
        return self.services.list()

    def get_service_by_id(self, service_id: str) -> Optional[Service]:
        return self.services.get_by_id(service_id)

    def get_services_by_owner(self, owner_id: str) -> List[Service]:
        return self.services.list_by("owner_id", owner_id)

    def save_service(self, service: Service) -> Service:
        return self.services.create(service)

    def update_service(self, service_id: str, fields: Dict[str, Any]) -> Optional[Service]:
        return self.services.update(service_id, fields)

    def delete_service(self, service_id: str) -> bool:
        # bookings go with their service; none may outlive it
        removed = self.services.delete(service_id)
        dropped = self.bookings.delete_where("service_id", service_id)
        logger.info("Deleted service %s and %d booking(s)", service_id, dropped)
        return removed

    # ---- bookings ----

    def get_bookings(self) -> List[Booking]:
        return self.bookings.list()

    def get_booking_by_id(self, booking_id: str) -> Optional[Booking]:
        return self.bookings.get_by_id(booking_id)

    def get_bookings_by_user(self, user_id: str) -> List[Booking]:
        return self.bookings.list_by("user_id", user_id)

    def get_bookings_by_owner(self, owner_id: str) -> List[Booking]:
        service_ids = {s.id for s in self.get_services_by_owner(owner_id)}
        return [b for b in self.bookings.list() if b.service_id in service_ids]

    def save_booking(self, booking: Booking) -> Booking:
        return self.bookings.create(booking)

    def update_booking(self, booking_id: str, fields: Dict[str, Any]) -> Optional[Booking]:
        return self.bookings.update(booking_id, fields)

    def delete_booking(self, booking_id: str) -> bool:
        return self.bookings.delete(booking_id)
