"""
Async client for the locize translation store.

This module provides an httpx based client for listing a project's
languages, downloading a namespace per language and submitting missing
translations, with error mapping to StoreError.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Mapping
from typing import TYPE_CHECKING, Literal, TypeAlias, cast

import httpx

from ..config.schema import LocizeConfig
from ..reconciliation.types import Key, Language
from ..utils.core.exceptions import StoreError
from ..utils.core.version import get_version

if TYPE_CHECKING:
    from types import TracebackType

APIResponseDict: TypeAlias = dict[str, object]
HTTPMethod: TypeAlias = Literal["GET", "POST"]

logger = logging.getLogger(__name__)


def parse_languages(payload: Mapping[str, object]) -> dict[str, Language]:
    """
    Convert the locize ``/languages`` payload into ordered Language records.

    Args:
        payload: Mapping of language code to its metadata object

    Returns:
        Ordered mapping of language code to Language, in payload order
    """
    languages: dict[str, Language] = {}
    for code, raw in payload.items():
        metadata = cast(APIResponseDict, raw) if isinstance(raw, dict) else {}
        name = metadata.get("name")
        languages[code] = Language(
            code=code,
            name=name if isinstance(name, str) and name else code,
            metadata=metadata,
        )
    return languages


class LocizeClient:
    """Async locize API client. Use as an async context manager."""

    def __init__(self, config: LocizeConfig, api_key: str | None = None) -> None:
        """Initialize the client from the locize configuration section."""
        self.config: LocizeConfig = config
        self.api_key: str | None = api_key or config.api_key
        self._client: httpx.AsyncClient | None = None

    async def __aenter__(self) -> LocizeClient:
        """Enter async context and initialize HTTP client."""
        self._client = httpx.AsyncClient(
            base_url=self.config.base_url,
            headers={"User-Agent": f"locize-sync/{get_version()}"},
            timeout=self.config.timeout,
        )
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        """Exit async context and cleanup HTTP client."""
        if self._client is not None:
            await self._client.aclose()
            self._client = None

    def _auth_headers(self) -> dict[str, str]:
        if not self.api_key:
            raise StoreError(
                "An API key is required for this operation",
                user_message="Set LOCIZE_API_KEY or locize.api_key in the configuration",
                recoverable=False,
            )
        return {"Authorization": f"Bearer {self.api_key}"}

    def _resource_path(self, prefix: str, language: str) -> str:
        parts = [self.config.project_id, self.config.version, language, self.config.namespace]
        if prefix:
            parts.insert(0, prefix)
        return "/" + "/".join(parts)

    async def _make_request(
        self,
        method: HTTPMethod,
        path: str,
        *,
        json: Mapping[str, object] | None = None,
        headers: Mapping[str, str] | None = None,
        retries: int = 0,
    ) -> APIResponseDict:
        """
        Make an HTTP request to the locize API.

        Timeouts are retried ``retries`` times with exponential backoff;
        every other failure is raised immediately.

        Raises:
            RuntimeError: If the client is used outside its async context
            StoreError: If the request fails or the body is not a JSON object
        """
        if self._client is None:
            raise RuntimeError("LocizeClient not initialized. Use as async context manager.")

        for attempt in range(retries + 1):
            try:
                response = await self._client.request(
                    method, path, json=json, headers=dict(headers or {})
                )
                _ = response.raise_for_status()
            except httpx.TimeoutException as e:
                if attempt < retries:
                    wait_time = 2.0**attempt
                    logger.warning(
                        "Request timeout (attempt %d/%d), retrying in %.1fs...",
                        attempt + 1,
                        retries + 1,
                        wait_time,
                    )
                    await asyncio.sleep(wait_time)
                    continue
                raise StoreError(f"Request to {path} timed out: {e}") from e
            except httpx.HTTPStatusError as e:
                error_msg = f"HTTP {e.response.status_code}: {e.response.text}"
                raise StoreError(error_msg, e.response.status_code) from e
            except httpx.RequestError as e:
                raise StoreError(f"Request failed: {e}") from e

            if not response.content:
                return {}
            try:
                payload = response.json()  # pyright: ignore[reportAny]
            except ValueError as e:
                raise StoreError(f"Invalid JSON from {path}: {e}") from e
            if not isinstance(payload, dict):
                raise StoreError(
                    f"Invalid response format from {path}: expected object, got {type(payload).__name__}"  # pyright: ignore[reportAny]
                )
            return cast(APIResponseDict, payload)

        raise StoreError(f"Request to {path} failed")

    async def fetch_available_languages(self) -> dict[str, Language]:
        """Fetch the project's languages, in the order the store lists them."""
        payload = await self._make_request(
            "GET",
            f"/languages/{self.config.project_id}",
            retries=self.config.max_retries,
        )
        languages = parse_languages(payload)
        logger.debug(f"Fetched {len(languages)} language(s) from locize")
        return languages

    async def fetch_namespace_resources(self, language: str) -> APIResponseDict:
        """Fetch the raw, unflattened namespace for ``language``."""
        if self.config.private:
            path = self._resource_path("private", language)
            headers = self._auth_headers()
        else:
            path = self._resource_path("", language)
            headers = None

        return await self._make_request(
            "GET", path, headers=headers, retries=self.config.max_retries
        )

    async def add_missing_translations(
        self, language: str, translations: Mapping[Key, str]
    ) -> None:
        """
        Submit flat ``key -> value`` translations for ``language``.

        Sent once; a failure is raised to the caller as StoreError.
        """
        path = self._resource_path(self.config.write_mode, language)
        _ = await self._make_request(
            "POST", path, json=dict(translations), headers=self._auth_headers()
        )
        logger.debug(f"Submitted {len(translations)} key(s) to {path}")
