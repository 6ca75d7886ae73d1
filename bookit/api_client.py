# bookit/api_client.py

import logging
from datetime import date
from typing import Any, Dict, Optional

import requests

from bookit.config import settings
from bookit.data import LOGIN_VIEW
from bookit.errors import AuthError, BookItError, TransportError, ValidationError

logger = logging.getLogger(__name__)


class ApiClient:
    """Calls the token endpoint once per operation, without retries."""

    def __init__(self, base_url: Optional[str] = None, session=None, timeout: Optional[float] = None):
        self.base_url = (base_url or settings.api_base_url).rstrip("/")
        # anything with requests-style get/post/put/delete works here
        self.session = session if session is not None else requests.Session()
        self.timeout = timeout

    def _request(self, method: str, path: str, token: Optional[str] = None,
                 body: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        headers = {}
        if token:
            headers["Authorization"] = f"Bearer {token}"
        kwargs: Dict[str, Any] = {"headers": headers}
        if body is not None:
            kwargs["json"] = body
        if self.timeout is not None:
            kwargs["timeout"] = self.timeout

        try:
            response = getattr(self.session, method)(f"{self.base_url}{path}", **kwargs)
        except requests.RequestException as exc:
            logger.warning("%s %s failed: %s", method.upper(), path, exc)
            raise TransportError(f"Could not reach the server: {exc}") from exc

        try:
            data = response.json()
        except ValueError:
            data = {}
        if not isinstance(data, dict):
            data = {}

        status = response.status_code
        if status == 400:
            raise ValidationError({"form": data.get("error") or "Invalid request"})
        if status == 401:
            raise AuthError(data.get("error") or "Not authenticated", redirect=LOGIN_VIEW)
        if status >= 400:
            raise BookItError(data.get("error") or f"Request failed ({status})")
        return data

    # ---- auth ----

    def signup(self, name: str, email: str, password: str, role: str) -> Dict[str, Any]:
        return self._request("post", "/signup", body={
            "name": name, "email": email, "password": password, "role": role,
        })

    def login(self, user_id: str, name: str, email: str, role: str) -> Dict[str, Any]:
        return self._request("post", "/login", body={
            "id": user_id, "name": name, "email": email, "role": role,
        })

    # ---- services ----

    def create_service(self, token: str, payload: Dict[str, Any]) -> Dict[str, Any]:
        return self._request("post", "/services", token=token, body=payload)

    def update_service(self, token: str, service_id: str, payload: Dict[str, Any]) -> Dict[str, Any]:
        return self._request("put", f"/services/{service_id}", token=token, body=payload)

    def delete_service(self, token: str, service_id: str) -> Dict[str, Any]:
        return self._request("delete", f"/services/{service_id}", token=token)

    # ---- bookings ----

    def create_booking(self, token: str, service_id: str, on_date: date, time: str) -> Dict[str, Any]:
        return self._request("post", "/bookings", token=token, body={
            "serviceId": service_id, "date": on_date.isoformat(), "time": time,
        })

    def cancel_booking(self, token: str, booking_id: str) -> Dict[str, Any]:
        return self._request("delete", f"/bookings/{booking_id}", token=token)
