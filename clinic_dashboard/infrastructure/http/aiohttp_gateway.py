import asyncio
import logging
from typing import Any, Dict, List, Optional

import aiohttp
from pydantic import ValidationError

from ...application.ports.resource_gateway import RequestContext, ResourceGateway
from ...config import Settings, settings as default_settings
from ...exceptions import GatewayFailure, ValidationFailure, normalize_errors
from ...resources import ResourceDefinition
from ...schemas.common.common import Entity, MutationResult

logger = logging.getLogger(__name__)

MUTATING_METHODS = {"POST", "PUT", "PATCH", "DELETE"}


def create_client_session(s: Settings = None) -> aiohttp.ClientSession:
    s = s or default_settings
    return aiohttp.ClientSession(timeout=aiohttp.ClientTimeout(total=s.REQUEST_TIMEOUT_SECONDS))


def _mutation_result(body: Dict[str, Any]) -> MutationResult:
    data = body.get("data")
    return MutationResult(message=body.get("message"), data=data if isinstance(data, dict) else None)


class AiohttpResourceGateway(ResourceGateway):
    """Talks to one resource's JSON endpoints over a caller-owned aiohttp session.

    Each call is exactly one request. Failures surface as GatewayFailure, or
    ValidationFailure when the server rejected the submitted fields.
    """

    def __init__(self, session: aiohttp.ClientSession, context: RequestContext, definition: ResourceDefinition, base_url: Optional[str] = None, csrf_header: Optional[str] = None):
        self.session = session
        self.context = context
        self.definition = definition
        self.base_url = (base_url or default_settings.API_BASE_URL).rstrip("/")
        self.csrf_header = csrf_header or default_settings.CSRF_HEADER

    @classmethod
    def from_settings(cls, context: RequestContext, definition: ResourceDefinition, s: Settings = None) -> "AiohttpResourceGateway":
        """Gateway on a fresh session using the configured base URL and timeout; the caller closes `gateway.session`"""
        s = s or default_settings
        return cls(create_client_session(s), context, definition, base_url=s.API_BASE_URL, csrf_header=s.CSRF_HEADER)

    def _url(self, path: str) -> str:
        return f"{self.base_url}/{path.lstrip('/')}"

    def _headers(self, method: str) -> Dict[str, str]:
        headers = {
            "Accept": "application/json",
            "X-Requested-With": "XMLHttpRequest",
        }
        if method in MUTATING_METHODS:
            headers[self.csrf_header] = self.context.csrf_token
        return headers

    async def _request(self, method: str, path: str, json: Optional[Dict[str, Any]] = None, params: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        url = self._url(path)
        try:
            async with self.session.request(method, url, json=json, params=params, headers=self._headers(method)) as response:
                status = response.status
                try:
                    payload = await response.json(content_type=None)
                except ValueError:
                    payload = None
        except asyncio.TimeoutError:
            logger.warning(f"{method} {url} timed out")
            raise GatewayFailure("Request timed out")
        except aiohttp.ClientError as e:
            logger.warning(f"{method} {url} failed: {e}")
            raise GatewayFailure("Network error")

        if not isinstance(payload, dict):
            logger.error(f"{method} {url} returned a non-JSON body (status {status})")
            raise GatewayFailure("Unexpected response from server", status)

        if payload.get("success") is False:
            message = payload.get("message") or "Request failed"
            errors = payload.get("errors")
            if isinstance(errors, dict):
                errors = normalize_errors(errors)
                if errors:
                    logger.info(f"{method} {url} rejected: {sorted(errors)}")
                    raise ValidationFailure(errors, message, status)
            logger.warning(f"{method} {url} failed with status {status}: {message}")
            raise GatewayFailure(message, status)

        if status >= 400:
            logger.warning(f"{method} {url} failed with status {status}")
            raise GatewayFailure(payload.get("message") or f"Request failed with status {status}", status)

        return payload

    async def list(self) -> List[Entity]:
        payload = await self._request("GET", self.definition.path)
        rows = payload.get(self.definition.list_key)
        data = payload.get("data")
        if rows is None and isinstance(data, dict):
            # some endpoints wrap collections in the standard data envelope
            rows = data.get(self.definition.list_key)
        if not isinstance(rows, list):
            raise GatewayFailure(f"Response did not include {self.definition.plural}")
        try:
            return [self.definition.entity.model_validate(row) for row in rows]
        except ValidationError as e:
            logger.error(f"Malformed {self.definition.label} in list response: {e}")
            raise GatewayFailure(f"Received malformed {self.definition.plural}")

    async def create(self, payload: Dict[str, Any]) -> MutationResult:
        body = await self._request("POST", self.definition.path, json=payload)
        return _mutation_result(body)

    async def update(self, entity_id: int, payload: Dict[str, Any]) -> MutationResult:
        body = await self._request("PUT", self.definition.item_path(entity_id), json=payload)
        return _mutation_result(body)

    async def delete(self, entity_id: int) -> MutationResult:
        body = await self._request("DELETE", self.definition.item_path(entity_id))
        return MutationResult(message=body.get("message"))

    async def fetch(self, path: str, params: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        clean = {k: str(v) for k, v in (params or {}).items() if v is not None}
        return await self._request("GET", path, params=clean or None)
