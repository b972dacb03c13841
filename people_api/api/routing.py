"""
Path matching for the people endpoints.

A request path is either the collection path, the collection path plus
one identifier segment, or something else. Identifier segments must have
the 8-4-4-4-12 hexadecimal shape; anything else falls through to the
fallback page.

Importing this module registers the `person_id` URL convertor with
Starlette, so `{person_id:person_id}` in a route only matches
well-shaped identifiers.
"""
import re
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from starlette.convertors import Convertor, register_url_convertor


PERSON_ID_PATTERN = (
    "[0-9a-fA-F]{8}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{12}"
)
_PERSON_ID_RE = re.compile(f"^{PERSON_ID_PATTERN}$")


def is_person_id(segment: str) -> bool:
    """Check whether a path segment has the identifier shape."""
    return bool(_PERSON_ID_RE.match(segment))


class PersonIdConvertor(Convertor):
    """Starlette convertor that only matches identifier-shaped segments."""
    regex = PERSON_ID_PATTERN

    def convert(self, value: str) -> str:
        return value

    def to_string(self, value: str) -> str:
        return str(value)


register_url_convertor("person_id", PersonIdConvertor())

# Item route path, relative to the collection path
ITEM_PATH = "/{person_id:person_id}"


class RouteKind(str, Enum):
    """Shape of a request path relative to the collection path."""
    COLLECTION = "collection"
    ITEM = "item"
    OTHER = "other"


class RouteAction(str, Enum):
    """Handler selected for a method + path pair."""
    LIST = "list"
    GET = "get"
    CREATE = "create"
    UPDATE = "update"
    DELETE = "delete"
    FALLBACK = "fallback"


@dataclass(frozen=True)
class RouteMatch:
    """Result of matching a path: its kind and, for items, the id."""
    kind: RouteKind
    person_id: Optional[str] = None


def match_route(path: str, collection_path: str) -> RouteMatch:
    """
    Classify a request path.

    Args:
        path: Request path, e.g. "/api/users/2e752824-1657-4c7f-844b-6ec2e168e99c"
        collection_path: The collection endpoint, e.g. "/api/users"

    Returns:
        RouteMatch with kind COLLECTION, ITEM (with person_id) or OTHER
    """
    if path == collection_path:
        return RouteMatch(RouteKind.COLLECTION)

    prefix = collection_path + "/"
    if path.startswith(prefix):
        segment = path[len(prefix):]
        if "/" not in segment and is_person_id(segment):
            return RouteMatch(RouteKind.ITEM, segment)

    return RouteMatch(RouteKind.OTHER)


# (kind, method) -> action; every other pair goes to the fallback page
_ACTIONS = {
    (RouteKind.COLLECTION, "GET"): RouteAction.LIST,
    (RouteKind.ITEM, "GET"): RouteAction.GET,
    (RouteKind.COLLECTION, "POST"): RouteAction.CREATE,
    (RouteKind.COLLECTION, "PUT"): RouteAction.UPDATE,
    (RouteKind.ITEM, "DELETE"): RouteAction.DELETE,
}


def resolve_action(method: str, path: str, collection_path: str) -> RouteAction:
    """Select the handler for a request, falling back to the static page."""
    match = match_route(path, collection_path)
    return _ACTIONS.get((match.kind, method.upper()), RouteAction.FALLBACK)
