"""
HTTP client facade over the ticketing API.

One method per endpoint. The bearer token obtained from ``signup``/``signin``
is remembered and sent on later calls; without one, the public anon key is
sent instead.
"""

from __future__ import annotations

import copy
import logging
from typing import Any, Dict, List, Optional

import httpx

logger = logging.getLogger(__name__)

EMPTY_ANALYTICS: Dict[str, Any] = {
    "totalEvents": 0,
    "totalBookings": 0,
    "totalSubmissions": 0,
    "totalUsers": 0,
    "totalRevenue": 0,
    "totalTickets": 0,
    "categoryStats": {},
    "cityStats": {},
    "submissionStats": {},
    "recentBookings": [],
}


class ApiClientError(Exception):
    """Raised for non-2xx responses; carries the server's message verbatim"""

    def __init__(self, status_code: int, message: str, error_code: Optional[str] = None):
        super().__init__(message)
        self.status_code = status_code
        self.message = message
        self.error_code = error_code


class TicketingApiClient:
    def __init__(
        self,
        base_url: str = "http://localhost:8000",
        anon_key: str = "public-anon-key",
        http: Optional[httpx.Client] = None,
        timeout: float = 10.0,
    ):
        self.anon_key = anon_key
        self.token: Optional[str] = None
        self._owns_http = http is None
        self._http = http or httpx.Client(base_url=base_url, timeout=timeout)

    def close(self) -> None:
        """Close the HTTP client, unless it was passed in by the caller"""
        if self._owns_http:
            self._http.close()

    def __enter__(self) -> "TicketingApiClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    # -------- plumbing --------

    def _headers(self) -> Dict[str, str]:
        return {
            "Content-Type": "application/json",
            "Authorization": f"Bearer {self.token or self.anon_key}",
        }

    def _request(
        self,
        method: str,
        path: str,
        json: Optional[Dict[str, Any]] = None,
        params: Optional[Dict[str, Any]] = None,
    ) -> Dict[str, Any]:
        response = self._http.request(method, path, json=json, params=params, headers=self._headers())
        try:
            data = response.json()
        except ValueError:
            data = {}

        if response.is_error:
            message = data.get("error") or data.get("detail") or f"Request failed with status {response.status_code}"
            logger.debug("%s %s failed: %s", method, path, message)
            raise ApiClientError(response.status_code, message, data.get("error_code"))
        return data

    def _remember_session(self, data: Dict[str, Any]) -> Dict[str, Any]:
        self.token = data.get("session", {}).get("access_token")
        return data

    # -------- auth --------

    def signup(self, email: str, password: str, name: str = "", category: str = "") -> Dict[str, Any]:
        data = self._request("POST", "/auth/signup", json={
            "email": email, "password": password, "name": name, "category": category,
        })
        return self._remember_session(data)

    def signin(self, email: str, password: str, is_admin: bool = False) -> Dict[str, Any]:
        data = self._request("POST", "/auth/signin", json={
            "email": email, "password": password, "isAdmin": is_admin,
        })
        return self._remember_session(data)

    def get_session(self) -> Dict[str, Any]:
        return self._request("GET", "/auth/session")

    def signout(self) -> Dict[str, Any]:
        data = self._request("POST", "/auth/signout")
        self.token = None
        return data

    # -------- events --------

    def get_events(self, city: Optional[str] = None, category: Optional[str] = None) -> List[Dict[str, Any]]:
        params = {k: v for k, v in (("city", city), ("category", category)) if v}
        return self._request("GET", "/events", params=params or None)["events"]

    def get_event(self, event_id: str) -> Dict[str, Any]:
        return self._request("GET", f"/events/{event_id}")["event"]

    def create_event(self, event: Dict[str, Any]) -> Dict[str, Any]:
        return self._request("POST", "/events", json=event)["event"]

    def update_event(self, event_id: str, updates: Dict[str, Any]) -> Dict[str, Any]:
        return self._request("PUT", f"/events/{event_id}", json=updates)["event"]

    def delete_event(self, event_id: str) -> Dict[str, Any]:
        return self._request("DELETE", f"/events/{event_id}")

    # -------- bookings --------

    def get_user_bookings(self, user_id: str) -> List[Dict[str, Any]]:
        return self._request("GET", f"/bookings/user/{user_id}")["bookings"]

    def get_all_bookings(self) -> List[Dict[str, Any]]:
        return self._request("GET", "/bookings")["bookings"]

    def get_event_bookings(self, event_id: str) -> List[Dict[str, Any]]:
        return self._request("GET", f"/bookings/event/{event_id}")["bookings"]

    def create_booking(self, booking: Dict[str, Any]) -> Dict[str, Any]:
        return self._request("POST", "/bookings", json=booking)["booking"]

    def update_booking_status(self, booking_id: str, status: str) -> Dict[str, Any]:
        return self._request("PUT", f"/bookings/{booking_id}", json={"status": status})["booking"]

    # -------- submissions --------

    def get_user_submissions(self, user_id: str) -> List[Dict[str, Any]]:
        return self._request("GET", f"/submissions/user/{user_id}")["submissions"]

    def get_all_submissions(self) -> List[Dict[str, Any]]:
        return self._request("GET", "/submissions")["submissions"]

    def get_event_submissions(self, event_id: str) -> List[Dict[str, Any]]:
        return self._request("GET", f"/submissions/event/{event_id}")["submissions"]

    def create_submission(self, submission: Dict[str, Any]) -> Dict[str, Any]:
        return self._request("POST", "/submissions", json=submission)["submission"]

    def update_submission_status(self, submission_id: str, status: str) -> Dict[str, Any]:
        return self._request("PUT", f"/submissions/{submission_id}", json={"status": status})["submission"]

    # -------- users --------

    def get_all_users(self) -> List[Dict[str, Any]]:
        return self._request("GET", "/users")["users"]

    def update_user_profile(self, user_id: str, updates: Dict[str, Any]) -> Dict[str, Any]:
        return self._request("PUT", f"/users/{user_id}", json=updates)["user"]

    # -------- analytics / maintenance --------

    def get_analytics(self) -> Dict[str, Any]:
        return self._request("GET", "/analytics")

    def get_analytics_or_default(self) -> Dict[str, Any]:
        """Analytics, or a zeroed payload when the call fails"""
        try:
            return self.get_analytics()
        except (ApiClientError, httpx.HTTPError) as exc:
            logger.warning("Analytics unavailable, using empty stats: %s", exc)
            return copy.deepcopy(EMPTY_ANALYTICS)

    def initialize_data(self) -> Dict[str, Any]:
        return self._request("POST", "/init")

    def health(self) -> Dict[str, Any]:
        return self._request("GET", "/health")
