"""HTTP client for the puzzle service.

Calls are blocking; the UI runs them on a worker thread
(:mod:`sudokudj.ui.remote_session`).
"""

from __future__ import annotations

import logging
from typing import Any
from urllib.parse import quote

import requests

_LOGGER = logging.getLogger(__name__)

_COLLECTION = "/sudoku"


class PuzzleServiceError(Exception):
    """Raised when a request fails or the service answers with garbage."""

    def __init__(self, message: str, *, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class PuzzleServiceClient:
    """Thin wrapper over the service routes; returns decoded JSON bodies."""

    __slots__ = ("_base_url", "_timeout", "_session")

    def __init__(
        self,
        base_url: str,
        *,
        timeout: float = 10.0,
        session: requests.Session | None = None,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._session = session or requests.Session()
        self._session.headers.update({"Accept": "application/json"})

    @property
    def base_url(self) -> str:
        return self._base_url

    # ── Operations ───────────────────────────────────────────────────────

    def list_puzzles(self) -> Any:
        return self._request("GET", _COLLECTION)

    def create_puzzle(self, difficulty: int) -> Any:
        return self._request("POST", _COLLECTION, params={"difficulty": difficulty})

    def get_puzzle(self, puzzle_id: str) -> Any:
        return self._request("GET", self._puzzle_path(puzzle_id))

    def save_puzzle(self, puzzle_id: str, body: dict[str, Any]) -> Any:
        return self._request("PUT", self._puzzle_path(puzzle_id), json=body)

    def check_puzzle(self, puzzle_id: str | None, body: dict[str, Any]) -> Any:
        return self._request("POST", self._puzzle_path(puzzle_id), json=body)

    def delete_puzzle(self, puzzle_id: str) -> Any:
        return self._request("DELETE", self._puzzle_path(puzzle_id))

    def close(self) -> None:
        self._session.close()

    # ── Internal ─────────────────────────────────────────────────────────

    @staticmethod
    def _puzzle_path(puzzle_id: str | None) -> str:
        return f"{_COLLECTION}/{quote(puzzle_id or '', safe='')}"

    def _request(self, method: str, path: str, **kwargs: Any) -> Any:
        url = f"{self._base_url}{path}"
        _LOGGER.debug("%s %s", method, url)
        try:
            response = self._session.request(
                method, url, timeout=self._timeout, **kwargs
            )
            response.raise_for_status()
        except requests.HTTPError as exc:
            status = exc.response.status_code if exc.response is not None else None
            raise PuzzleServiceError(
                f"{method} {path} failed with HTTP {status}", status_code=status
            ) from exc
        except requests.RequestException as exc:
            raise PuzzleServiceError(f"{method} {path} failed: {exc}") from exc

        if not response.content:
            return None
        try:
            payload = response.json()
        except ValueError as exc:
            raise PuzzleServiceError(
                f"{method} {path} returned a non-JSON body",
                status_code=response.status_code,
            ) from exc
        _LOGGER.debug("%s %s -> %s", method, path, type(payload).__name__)
        return payload
