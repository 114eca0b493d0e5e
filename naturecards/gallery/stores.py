"""Adapters for the user document store.

Both stores answer the same three calls: ``get_user``, ``find_by_username`` and
``put_user``. Reads return the raw document as a dict (or ``None`` when it does
not exist); normalisation happens in the gallery services.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, cast
from urllib.parse import quote

import httpx
from firebase_admin import firestore
from google.api_core.exceptions import GoogleAPIError

from naturecards.core.constants import (
    DEFAULT_BACKEND_URL,
    FIND_USERNAME_PATH,
    GALLERY_FETCH_PATH,
    GALLERY_UPDATE_PATH,
    HTTP_TIMEOUT_SECONDS,
    USER_ID,
    USER_USERNAME,
    USERS_COLLECTION,
)
from naturecards.errors import NetworkError, NotFoundError, ValidationError

from .documents import to_wire

if TYPE_CHECKING:
    from google.cloud.firestore_v1.base_document import DocumentSnapshot
    from google.cloud.firestore_v1.client import Client

    from .models import UserDocument


class FirestoreUserStore:
    """User documents kept in the Firestore ``users`` collection."""

    def __init__(self, db: Client | None = None) -> None:
        self._db = db

    @property
    def db(self) -> Client:
        if self._db is None:
            self._db = firestore.client()
        return self._db

    def get_user(self, user_id: str) -> dict[str, Any] | None:
        try:
            user_doc = cast(
                "DocumentSnapshot",
                self.db.collection(USERS_COLLECTION).document(user_id).get(),
            )
        except GoogleAPIError as e:
            raise NetworkError(f"Could not read user {user_id}: {e}") from e
        if not user_doc.exists:
            return None
        data = user_doc.to_dict()
        if data is None:
            return None
        return {**data, "id": user_doc.id}

    def find_by_username(self, username: str) -> dict[str, Any] | None:
        query = (
            self.db.collection(USERS_COLLECTION)
            .where(filter=firestore.FieldFilter(USER_USERNAME, "==", username))
            .limit(1)
        )
        try:
            docs = list(query.stream())
        except GoogleAPIError as e:
            raise NetworkError(f"Could not look up username {username}: {e}") from e
        if not docs:
            return None
        data = docs[0].to_dict() or {}
        return {**data, "id": docs[0].id}

    def put_user(self, doc: UserDocument) -> None:
        data = {k: v for k, v in doc.items() if k != USER_ID}
        try:
            self.db.collection(USERS_COLLECTION).document(doc["id"]).set(data)
        except GoogleAPIError as e:
            raise NetworkError(f"Could not write user {doc['id']}: {e}") from e


class HttpUserStore:
    """User documents served by the NatureCards REST backend."""

    def __init__(
        self,
        base_url: str = DEFAULT_BACKEND_URL,
        timeout: float = HTTP_TIMEOUT_SECONDS,
        fetch_path: str = GALLERY_FETCH_PATH,
        update_path: str = GALLERY_UPDATE_PATH,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self.fetch_path = fetch_path
        self.update_path = update_path
        self.client = httpx.Client(
            base_url=base_url, timeout=timeout, transport=transport
        )

    def close(self) -> None:
        self.client.close()

    def _request(self, method: str, url: str, **kwargs: Any) -> httpx.Response:
        try:
            return self.client.request(method, url, **kwargs)
        except httpx.TimeoutException as e:
            raise NetworkError(f"{method} {url} timed out.") from e
        except httpx.HTTPError as e:
            raise NetworkError(f"{method} {url} failed: {e}") from e

    @staticmethod
    def _json(response: httpx.Response) -> dict[str, Any]:
        try:
            data = response.json()
        except ValueError as e:
            raise NetworkError(
                f"{response.request.url} returned a body that is not JSON."
            ) from e
        if not isinstance(data, dict):
            raise NetworkError(f"{response.request.url} did not return a document.")
        return data

    def _read(self, url: str) -> dict[str, Any] | None:
        response = self._request("GET", url)
        if response.status_code == 404:
            return None
        if response.is_error:
            raise NetworkError(f"GET {url} answered {response.status_code}.")
        return self._json(response)

    def get_user(self, user_id: str) -> dict[str, Any] | None:
        return self._read(self.fetch_path.format(user_id=quote(user_id, safe="")))

    def find_by_username(self, username: str) -> dict[str, Any] | None:
        return self._read(FIND_USERNAME_PATH.format(username=quote(username, safe="")))

    def put_user(self, doc: UserDocument) -> None:
        url = self.update_path.format(user_id=quote(doc["id"], safe=""))
        response = self._request("PUT", url, json=to_wire(doc))
        if response.status_code in (400, 422):
            raise ValidationError(
                f"Backend rejected user {doc['id']}: {response.text or response.status_code}"
            )
        if response.status_code == 404:
            raise NotFoundError(f"User {doc['id']} does not exist.")
        if response.is_error:
            raise NetworkError(f"PUT {url} answered {response.status_code}.")


def build_user_store(config: Any) -> FirestoreUserStore | HttpUserStore:
    """Create the store selected by ``USER_STORE_BACKEND``."""
    backend = (config.get("USER_STORE_BACKEND") or "http").lower()
    if backend == "firestore":
        return FirestoreUserStore()
    if backend == "http":
        return HttpUserStore(
            base_url=config.get("BACKEND_URL") or DEFAULT_BACKEND_URL,
            timeout=float(config.get("HTTP_TIMEOUT") or HTTP_TIMEOUT_SECONDS),
            fetch_path=config.get("GALLERY_FETCH_PATH") or GALLERY_FETCH_PATH,
            update_path=config.get("GALLERY_UPDATE_PATH") or GALLERY_UPDATE_PATH,
        )
    raise ValueError(f"Unknown USER_STORE_BACKEND: {backend}")
