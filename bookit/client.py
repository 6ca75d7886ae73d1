# bookit/client.py

import logging
import re
from datetime import date
from typing import Callable, Dict, List, Optional

from bookit.api_client import ApiClient
from bookit.availability import Slot, compute_availability, is_within_window
from bookit.data import LOGIN_VIEW, TIME_SLOTS
from bookit.errors import AuthError, BookItError, ConflictError, NotFoundError, ValidationError
from bookit.gate import Permit, SessionGate, home_view
from bookit.repository import Repository
from bookit.schemas import (
    AuthSession, Booking, BookingStatus, PublicUser, Service, User, UserRole,
)

logger = logging.getLogger(__name__)

EMAIL_RE = re.compile(r"\S+@\S+\.\S+")
MIN_PASSWORD_LENGTH = 6


def format_duration(minutes: int) -> str:
    if minutes < 60:
        return f"{minutes}m"
    hours, rest = divmod(minutes, 60)
    return f"{hours}h {rest}m" if rest else f"{hours}h"


def _matches(service: Service, query: str) -> bool:
    q = query.lower()
    return q in service.name.lower() or q in (service.description or "").lower()


def validate_signup(name: str, email: str, password: str, role: str) -> Dict[str, str]:
    errs = {}
    if not (name or "").strip():
        errs["name"] = "Name is required"
    if not email:
        errs["email"] = "Email is required"
    elif not EMAIL_RE.search(email):
        errs["email"] = "Invalid email format"
    if not password:
        errs["password"] = "Password is required"
    elif len(password) < MIN_PASSWORD_LENGTH:
        errs["password"] = f"Password must be at least {MIN_PASSWORD_LENGTH} characters"
    if role not in (UserRole.owner.value, UserRole.user.value):
        errs["role"] = "Role must be owner or user"
    return errs


def validate_login(email: str, password: str) -> Dict[str, str]:
    errs = {}
    if not email:
        errs["email"] = "Email is required"
    elif not EMAIL_RE.search(email):
        errs["email"] = "Invalid email format"
    if not password:
        errs["password"] = "Password is required"
    return errs


def validate_service(name, description, duration, price) -> Dict[str, str]:
    errs = {}
    if not (name or "").strip():
        errs["name"] = "Service name is required"
    if not (description or "").strip():
        errs["description"] = "Description is required"
    try:
        if isinstance(duration, bool) or int(duration) != float(duration) or int(duration) < 1:
            raise ValueError(duration)
    except (TypeError, ValueError):
        errs["duration"] = "Enter a valid duration in minutes"
    if price is None or price == "":
        errs["price"] = "Price is required"
    else:
        try:
            if isinstance(price, bool) or float(price) < 0:
                raise ValueError(price)
        except (TypeError, ValueError):
            errs["price"] = "Enter a valid price"
    return errs


class BookingClient:
    """Runs every workflow against the local store, which is the system of record.

    The token endpoint only supplies tokens and ids.  Delete and cancel
    complete locally even when the endpoint cannot be reached.
    """

    def __init__(self, repository: Repository, api: ApiClient,
                 today: Callable[[], date] = date.today):
        self.repository = repository
        self.api = api
        self.gate = SessionGate(repository)
        self.today = today

    # ---- session ----

    @property
    def session(self) -> Optional[AuthSession]:
        return self.gate.current

    def home(self) -> str:
        auth = self.gate.current
        return home_view(auth.user.role) if auth else LOGIN_VIEW

    def _require(self, role: UserRole) -> AuthSession:
        decision = self.gate.authorize(role)
        if not isinstance(decision, Permit):
            raise AuthError(f"{role.value} access required", redirect=decision.view)
        return self.gate.current

    def _call(self, fn, *args):
        try:
            return fn(*args)
        except AuthError:
            # a rejected token forces a fresh login
            self.gate.end()
            raise

    def signup(self, name: str, email: str, password: str, role: str = "user") -> AuthSession:
        email = (email or "").strip()
        errs = validate_signup(name, email, password, role)
        if errs:
            raise ValidationError(errs)
        if self.repository.find_user_by_email(email) is not None:
            raise ValidationError({"email": "This email is already registered. Please log in."})

        name = name.strip()
        email = email.lower()
        data = self.api.signup(name, email, password, role)

        user = User(
            id=data["user"]["id"],
            name=name,
            email=email,
            password=password,
            role=role,
        )
        self.repository.save_user(user)
        logger.info("Registered %s as %s", user.id, role)
        public = PublicUser(id=user.id, name=user.name, email=user.email, role=user.role)
        return self.gate.start(public, data["token"])

    def login(self, email: str, password: str) -> AuthSession:
        email = (email or "").strip()
        errs = validate_login(email, password)
        if errs:
            raise ValidationError(errs)

        stored = self.repository.find_user_by_email(email)
        if stored is None or stored.password != password:
            raise AuthError("Invalid email or password.")

        data = self.api.login(stored.id, stored.name, stored.email, stored.role.value)
        public = PublicUser.model_validate(data["user"])
        return self.gate.start(public, data["token"])

    def logout(self) -> None:
        self.gate.end()

    # ---- services (owner) ----

    def _owned_service(self, owner_id: str, service_id: str) -> Service:
        service = self.repository.get_service_by_id(service_id)
        if service is None or service.owner_id != owner_id:
            raise NotFoundError(f"Service {service_id} not found")
        return service

    def add_service(self, name: str, description: str, duration, price) -> Service:
        auth = self._require(UserRole.owner)
        errs = validate_service(name, description, duration, price)
        if errs:
            raise ValidationError(errs)

        payload = {
            "name": name.strip(),
            "description": description.strip(),
            "duration": int(duration),
            "price": float(price),
        }
        data = self._call(self.api.create_service, auth.token, payload)

        service = Service(
            id=data["id"],
            owner_id=auth.user.id,
            owner_name=auth.user.name,
            **payload,
        )
        self.repository.save_service(service)
        logger.info("Owner %s added service %s", auth.user.id, service.id)
        return service

    def update_service(self, service_id: str, name: str, description: str, duration, price) -> Service:
        auth = self._require(UserRole.owner)
        self._owned_service(auth.user.id, service_id)
        errs = validate_service(name, description, duration, price)
        if errs:
            raise ValidationError(errs)

        payload = {
            "name": name.strip(),
            "description": description.strip(),
            "duration": int(duration),
            "price": float(price),
        }
        self._call(self.api.update_service, auth.token, service_id, payload)
        return self.repository.update_service(service_id, payload)

    def delete_service(self, service_id: str) -> None:
        auth = self._require(UserRole.owner)
        self._owned_service(auth.user.id, service_id)
        try:
            self.api.delete_service(auth.token, service_id)
        except BookItError as exc:
            logger.warning("Ignoring failed delete notification for %s: %s", service_id, exc)
        self.repository.delete_service(service_id)

    def my_services(self, query: str = "") -> List[Service]:
        auth = self._require(UserRole.owner)
        return [s for s in self.repository.get_services_by_owner(auth.user.id) if _matches(s, query)]

    def owner_bookings(self) -> List[Booking]:
        auth = self._require(UserRole.owner)
        return self.repository.get_bookings_by_owner(auth.user.id)

    def owner_stats(self) -> Dict[str, float]:
        auth = self._require(UserRole.owner)
        services = self.repository.get_services_by_owner(auth.user.id)
        bookings = self.repository.get_bookings_by_owner(auth.user.id)
        prices = {s.id: s.price for s in self.repository.get_services()}
        confirmed = [b for b in bookings if b.status == BookingStatus.confirmed]
        return {
            "services": len(services),
            "bookings": len(bookings),
            "confirmed": len(confirmed),
            "revenue": sum(prices.get(b.service_id, 0) for b in confirmed),
        }

    # ---- browsing and booking (user) ----

    def browse_services(self, query: str = "") -> List[Service]:
        return [s for s in self.repository.get_services() if _matches(s, query)]

    def get_service(self, service_id: str) -> Service:
        service = self.repository.get_service_by_id(service_id)
        if service is None:
            raise NotFoundError(f"Service {service_id} not found")
        return service

    def slots(self, service_id: str, on_date: Optional[date]) -> List[Slot]:
        self.get_service(service_id)
        return compute_availability(service_id, on_date, self.repository.get_bookings())

    def book(self, service_id: str, on_date: Optional[date], time: Optional[str]) -> Booking:
        auth = self._require(UserRole.user)
        service = self.get_service(service_id)

        if on_date is None:
            raise ValidationError({"date": "Please select a date."})
        if not time:
            raise ValidationError({"time": "Please select a time slot."})
        if not is_within_window(on_date, self.today()):
            raise ValidationError({"date": "Date is outside the bookable range."})
        if time not in TIME_SLOTS:
            raise ValidationError({"time": "Unknown time slot."})

        offered = {s.label for s in self.slots(service.id, on_date) if s.bookable}
        if time not in offered:
            raise ConflictError(f"{time} on {on_date.isoformat()} is already booked")

        data = self._call(self.api.create_booking, auth.token, service.id, on_date, time)

        booking = Booking(
            id=data["id"],
            service_id=service.id,
            user_id=auth.user.id,
            user_name=auth.user.name,
            user_email=auth.user.email,
            date=on_date,
            time=time,
            status=BookingStatus.confirmed,
        )
        self.repository.save_booking(booking)
        logger.info("User %s booked %s at %s %s", auth.user.id, service.id, on_date, time)
        return booking

    def cancel_booking(self, booking_id: str) -> Booking:
        auth = self._require(UserRole.user)
        booking = self.repository.get_booking_by_id(booking_id)
        if booking is None or booking.user_id != auth.user.id:
            raise NotFoundError(f"Booking {booking_id} not found")
        if booking.status != BookingStatus.confirmed:
            raise ConflictError("Booking already cancelled")

        try:
            self.api.cancel_booking(auth.token, booking_id)
        except BookItError as exc:
            logger.warning("Ignoring failed cancel notification for %s: %s", booking_id, exc)
        return self.repository.update_booking(booking_id, {"status": BookingStatus.cancelled})

    def my_bookings(self) -> List[Booking]:
        auth = self._require(UserRole.user)
        return self.repository.get_bookings_by_user(auth.user.id)

    def user_stats(self) -> Dict[str, int]:
        bookings = self.my_bookings()
        return {
            "total": len(bookings),
            "confirmed": sum(1 for b in bookings if b.status == BookingStatus.confirmed),
            "cancelled": sum(1 for b in bookings if b.status == BookingStatus.cancelled),
        }
