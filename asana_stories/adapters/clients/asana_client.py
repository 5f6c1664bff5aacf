"""Asana REST client.

This module provides the shared HTTP client the resource bindings call into.
"""

from __future__ import annotations

from typing import Any
from typing import Dict
from typing import List
from typing import Optional
from typing import Tuple

import requests
from pydantic import BaseModel

from asana_stories import LOGGER
from asana_stories import __version__
from asana_stories.entities.pagination import NextPage
from asana_stories.entities.pagination import Options
from asana_stories.settings.asana_settings import AsanaConnectionSettings
from asana_stories.use_cases.interfaces.asana_client_interface import (
    AsanaClientInterface,
)
from asana_stories.utils.exceptions import AsanaAPIError
from asana_stories.utils.exceptions import EmptyResponseError
from asana_stories.utils.exceptions import MissingTokenError
from asana_stories.utils.exceptions import error_for_status


class AsanaClient(AsanaClientInterface):
    """Client for the Asana REST API.

    Every call is a single request: no retries, no caching, no pagination
    beyond handing back the ``next_page`` cursor. Error responses are raised as
    ``AsanaAPIError`` subclasses; transport failures raise whatever
    ``requests`` raised.
    """

    def __init__(
        self,
        settings: AsanaConnectionSettings,
        session: Optional[requests.Session] = None,
    ):
        """Initialize the client.

        Args:
            settings: Connection settings; ``token`` is required.
            session: Optional pre-built session, mainly for tests.

        Raises:
            MissingTokenError: If the settings carry no token.
        """
        if not settings.token:
            raise MissingTokenError()
        self.settings = settings
        self.base_url = settings.api_root
        self.session = session or requests.Session()
        self.session.headers.update(
            {
                "Authorization": f"Bearer {settings.token}",
                "Accept": "application/json",
                "User-Agent": f"{settings.user_agent}/{__version__}",
            }
        )

    def __enter__(self) -> "AsanaClient":
        return self

    def __exit__(self, exc_type, exc_value, traceback) -> None:
        self.close()

    def close(self) -> None:
        self.session.close()

    def get(
        self,
        path: str,
        query: Optional[Dict[str, Any]] = None,
        *options: Options,
    ) -> Tuple[Any, Optional[NextPage]]:
        payload = self._request("GET", path, query=query, options=options)
        return payload.get("data"), NextPage.from_raw(payload.get("next_page"))

    def post(self, path: str, body: Any = None, *options: Options) -> Any:
        payload = self._request("POST", path, body=body, options=options)
        return self._written_resource("POST", path, payload)

    def put(self, path: str, body: Any = None, *options: Options) -> Any:
        payload = self._request("PUT", path, body=body, options=options)
        return self._written_resource("PUT", path, payload)

    def url_for(self, path: str) -> str:
        return f"{self.base_url}/{path.lstrip('/')}"

    def _request(
        self,
        method: str,
        path: str,
        query: Optional[Dict[str, Any]] = None,
        body: Any = None,
        options: Tuple[Options, ...] = (),
    ) -> Dict[str, Any]:
        url = self.url_for(path)
        params = dict(query or {})
        params.update(Options.merge(*options))
        json_body = None if body is None else {"data": self._serialize(body)}

        LOGGER.debug(f"{method} {url} params={params}")
        response = self.session.request(
            method,
            url,
            params=params or None,
            json=json_body,
            timeout=self.settings.timeout,
        )
        self._log_deprecations(response)

        if response.status_code >= 400:
            raise self._error_from_response(response)
        if not response.content:
            return {}
        return response.json()

    @staticmethod
    def _written_resource(method: str, path: str, payload: Dict[str, Any]) -> Any:
        # A write answers with the resource it created or changed.
        data = payload.get("data")
        if not data:
            LOGGER.error(f"Asana request {method} {path} succeeded without a resource")
            raise EmptyResponseError(f"{method} {path} returned no data")
        return data

    @staticmethod
    def _serialize(body: Any) -> Any:
        if hasattr(body, "to_payload"):
            return body.to_payload()
        if isinstance(body, BaseModel):
            return body.model_dump(mode="json", by_alias=True, exclude_none=True)
        return body

    @staticmethod
    def _error_from_response(response: requests.Response) -> AsanaAPIError:
        errors: List[Dict[str, Any]]
        try:
            decoded = response.json()
            errors = (decoded.get("errors") or []) if isinstance(decoded, dict) else []
        except ValueError:
            errors = [{"message": response.text or response.reason or ""}]
        error = error_for_status(response.status_code, errors, response.headers)
        LOGGER.error(
            f"Asana request {response.request.method} {response.url} failed: {error}",
        )
        return error

    @staticmethod
    def _log_deprecations(response: requests.Response) -> None:
        for change in response.headers.get("Asana-Change", "").split(","):
            if change.strip():
                LOGGER.warning(f"Asana API change affects this request: {change.strip()}")
