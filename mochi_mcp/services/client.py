"""HTTP-клиент Mochi API."""

from __future__ import annotations

import base64
from collections.abc import Mapping
from typing import Any, Dict, Optional
from urllib.parse import quote

import httpx

from ..config import DEFAULT_BASE_URL, DEFAULT_TIMEOUT
from ..errors import RemoteApiError, RemoteTimeoutError, SchemaViolation
from ..log import get_logger
from ..schemas import (
    Card,
    CreateCardArgs,
    ListCardsArgs,
    ListCardsResponse,
    ListDecksArgs,
    ListDecksResponse,
    ListTemplatesArgs,
    ListTemplatesResponse,
    Template,
    UpdateCardArgs,
    parse_response,
)

logger = get_logger("mochi_mcp.client")


def basic_auth_header(token: str) -> str:
    """``Basic base64("<token>:")``: токен в роли логина, пустой пароль."""

    encoded = base64.b64encode(f"{token}:".encode("utf-8")).decode("ascii")
    return f"Basic {encoded}"


def _path_segment(value: str) -> str:
    return quote(value, safe="")


def error_from_response(response: httpx.Response) -> RemoteApiError:
    """Строит ``RemoteApiError`` из ответа с кодом вне 2xx."""

    try:
        body = response.json()
    except ValueError:
        body = None

    if isinstance(body, list) and body:
        errors: Any = [str(item) for item in body]
    elif isinstance(body, Mapping) and body:
        errors = dict(body)
    else:
        errors = response.text.strip() or response.reason_phrase or f"HTTP {response.status_code}"
    return RemoteApiError(errors, response.status_code)


class MochiClient:
    """Аутентифицированный доступ к Mochi API.

    Экземпляр создаётся один раз при старте и не меняется; на каждый
    вызов открывается свой ``httpx.AsyncClient``. Повторов нет: ошибка
    сразу уходит вызывающему.
    """

    def __init__(
        self,
        token: str,
        *,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        if not isinstance(token, str) or not token.strip():
            raise ValueError("token must be a non-empty string")
        if timeout <= 0:
            raise ValueError("timeout must be positive")

        self.base_url = base_url if base_url.endswith("/") else f"{base_url}/"
        self.timeout = float(timeout)
        self._transport = transport
        self._headers = {
            "Authorization": basic_auth_header(token.strip()),
            "Content-Type": "application/json",
            "Accept": "application/json",
        }

    @property
    def headers(self) -> Dict[str, str]:
        return dict(self._headers)

    async def _request(
        self,
        method: str,
        path: str,
        *,
        params: Optional[Mapping[str, Any]] = None,
        json: Optional[Mapping[str, Any]] = None,
    ) -> Any:
        log = logger.bind(method=method, path=path)
        try:
            async with httpx.AsyncClient(
                base_url=self.base_url,
                headers=self._headers,
                timeout=self.timeout,
                transport=self._transport,
            ) as client:
                response = await client.request(
                    method, path, params=dict(params) if params else None, json=json
                )
        except httpx.TimeoutException as exc:
            log.warning("mochi_request_timeout", timeout=self.timeout)
            raise RemoteTimeoutError(self.timeout) from exc

        log.debug("mochi_response", status=response.status_code)
        if not response.is_success:
            error = error_from_response(response)
            log.warning(
                "mochi_request_failed", status=response.status_code, error=error.message
            )
            raise error

        try:
            return response.json()
        except ValueError as exc:
            raise SchemaViolation(["response body is not valid JSON"]) from exc

    async def create_card(self, args: CreateCardArgs) -> Card:
        data = await self._request("POST", "cards", json=args.to_wire())
        return parse_response(Card, data)

    async def update_card(self, args: UpdateCardArgs) -> Card:
        data = await self._request(
            "POST", f"cards/{_path_segment(args.card_id)}", json=args.body()
        )
        return parse_response(Card, data)

    async def get_card(self, card_id: str) -> Card:
        data = await self._request("GET", f"cards/{_path_segment(card_id)}")
        return parse_response(Card, data)

    async def list_cards(self, args: Optional[ListCardsArgs] = None) -> ListCardsResponse:
        params = args.query() if args is not None else None
        data = await self._request("GET", "cards", params=params)
        return parse_response(ListCardsResponse, data)

    async def list_decks(self, args: Optional[ListDecksArgs] = None) -> ListDecksResponse:
        """Список колод без архивных, порядок остальных сохраняется."""

        params = args.query() if args is not None else None
        data = await self._request("GET", "decks", params=params)
        return parse_response(ListDecksResponse, data).without_archived()

    async def list_templates(
        self, args: Optional[ListTemplatesArgs] = None
    ) -> ListTemplatesResponse:
        params = args.query() if args is not None else None
        data = await self._request("GET", "templates", params=params)
        return parse_response(ListTemplatesResponse, data)

    async def get_template(self, template_id: str) -> Template:
        data = await self._request("GET", f"templates/{_path_segment(template_id)}")
        return parse_response(Template, data)


__all__ = ["MochiClient", "basic_auth_header", "error_from_response", "httpx"]
