from dataclasses import dataclass
from html.parser import HTMLParser
from typing import Any, Dict, List, Mapping, Optional, Protocol

from ...schemas.common.common import Entity, MutationResult


@dataclass(frozen=True)
class CurrentUser:
    id: int
    name: str
    role: str
    email: Optional[str] = None


class _MetaCollector(HTMLParser):
    def __init__(self) -> None:
        super().__init__()
        self.meta: Dict[str, str] = {}

    def handle_starttag(self, tag, attrs):
        if tag != "meta":
            return
        values = dict(attrs)
        name = values.get("name")
        if name and values.get("content") is not None:
            self.meta[name] = values["content"]


@dataclass(frozen=True)
class RequestContext:
    """Ambient request state handed to the gateway explicitly.

    The CSRF token is rendered by the server into the page shell as
    `<meta name="csrf-token" content="...">` and must accompany every
    mutating request.
    """
    csrf_token: str
    user: Optional[CurrentUser] = None

    @classmethod
    def from_meta(cls, meta: Mapping[str, str], meta_name: str = "csrf-token", user: Optional[CurrentUser] = None) -> "RequestContext":
        return cls(csrf_token=meta.get(meta_name, ""), user=user)

    @classmethod
    def from_html(cls, html: str, meta_name: str = "csrf-token", user: Optional[CurrentUser] = None) -> "RequestContext":
        parser = _MetaCollector()
        parser.feed(html)
        parser.close()
        return cls.from_meta(parser.meta, meta_name=meta_name, user=user)


class ResourceGateway(Protocol):
    async def list(self) -> List[Entity]:
        ...

    async def create(self, payload: Dict[str, Any]) -> MutationResult:
        ...

    async def update(self, entity_id: int, payload: Dict[str, Any]) -> MutationResult:
        ...

    async def delete(self, entity_id: int) -> MutationResult:
        ...

    async def fetch(self, path: str, params: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        ...
