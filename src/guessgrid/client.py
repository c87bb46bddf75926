# Copyright (c) Meta Platforms, Inc. and affiliates.
# All rights reserved.
#
# This source code is licensed under the BSD-style license found in the
# LICENSE file in the root directory of this source tree.

"""
Async HTTP client for the grading service.

Talks to a single server exposing: POST /newgame, POST /guess

Example:
    >>> async with GradingClient("http://localhost:3000/api/v1") as client:
    ...     game = await client.new_game()
    ...     grades = await client.grade(game.id, "crane")
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Type, TypeVar

import httpx
from pydantic import BaseModel, ValidationError

from .client_types import ErrorResponse, GuessArgs, GuessResult, NewGameResult
from .config import GuessGridConfig
from .errors import GradingServiceError, GradingTimeoutError, MalformedResponseError
from .models import Grade

logger = logging.getLogger(__name__)

FALLBACK_ERROR_MESSAGE = "failed to submit guess"

ModelT = TypeVar("ModelT", bound=BaseModel)


class GradingClient:
    """
    Client for the new-game and grading endpoints.

    Every failure surfaces as a GradingServiceError subclass so callers only
    need one except clause. POST requests are never retried: a guess that
    reached the server may already have been recorded.
    """

    def __init__(
        self,
        base_url: str,
        request_timeout_s: float = 15.0,
        default_headers: Optional[Dict[str, str]] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self._base = base_url.rstrip("/")
        self._timeout = float(request_timeout_s)
        self._http = httpx.AsyncClient(
            base_url=self._base,
            timeout=self._timeout,
            headers={"Content-Type": "application/json", **(default_headers or {})},
            transport=transport,
        )

    @classmethod
    def from_config(
        cls, config: GuessGridConfig, transport: Optional[httpx.AsyncBaseTransport] = None
    ) -> "GradingClient":
        return cls(
            base_url=config.backend_url,
            request_timeout_s=config.request_timeout_s,
            transport=transport,
        )

    @property
    def base_url(self) -> str:
        return self._base

    async def new_game(self, user: Optional[str] = None) -> NewGameResult:
        """
        Start a game on the server.

        Args:
            user: Optional user whose library seeds the target words.

        Returns:
            The game id and its word lengths.
        """
        params = {"user": user} if user else None
        payload = await self._post("/newgame", params=params)
        return self._parse(NewGameResult, payload)

    async def grade(self, game_id: str, guess: str) -> List[Grade]:
        """
        Submit a guess and return its flat, left-to-right grade list.

        Word boundaries are not part of the response; the caller splits the
        list using its own word lengths.
        """
        body = GuessArgs(id=game_id, guess=guess).model_dump()
        payload = await self._post("/guess", json=body)
        return self._parse(GuessResult, payload).grade

    async def close(self) -> None:
        """Release the connection pool."""
        await self._http.aclose()

    async def __aenter__(self) -> "GradingClient":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.close()

    async def _post(self, path: str, **kwargs: Any) -> Any:
        logger.info("POST %s%s", self._base, path)
        try:
            r = await self._http.post(path, **kwargs)
        except httpx.TimeoutException as e:
            raise GradingTimeoutError(
                f"grading service did not respond within {self._timeout:g}s"
            ) from e
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            raise GradingServiceError(f"could not reach grading service: {e}") from e

        if r.is_error:
            raise GradingServiceError(self._error_message(r), status_code=r.status_code)
        try:
            return r.json()
        except ValueError as e:
            raise MalformedResponseError(
                f"malformed grading response: {e}", status_code=r.status_code
            ) from e

    @staticmethod
    def _error_message(r: httpx.Response) -> str:
        try:
            message = ErrorResponse.model_validate(r.json()).message
        except (ValueError, ValidationError):
            message = None
        logger.warning("Grading service returned %d: %s", r.status_code, message)
        return message or FALLBACK_ERROR_MESSAGE

    @staticmethod
    def _parse(model: Type[ModelT], payload: Any) -> ModelT:
        try:
            return model.model_validate(payload)
        except ValidationError as e:
            raise MalformedResponseError(
                f"malformed grading response: {e.error_count()} invalid field(s)"
            ) from e
