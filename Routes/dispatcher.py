import json
import logging
from decimal import Decimal
from typing import Mapping
from pydantic import ValidationError
from Models.DynamoModel import json_default
from Models.Errors import ItemsApiError, MalformedInputError, UnsupportedRouteError
from Models.Item import Item
from Models.Response import Response
from Models.RouteKey import RouteKey
from DB.DB import ItemStore, get_item_store

logger = logging.getLogger(__name__)


def parse_route_key(route_key: str) -> RouteKey:
    try:
        return RouteKey(route_key)
    except ValueError:
        raise UnsupportedRouteError(route_key)


def parse_item(body: str | bytes | None) -> Item:
    if body is None:
        raise MalformedInputError("Request body is required")
    try:
        # DynamoDB rejects floats, numbers have to arrive as Decimal
        payload = json.loads(body, parse_float=Decimal)
    except UnicodeDecodeError as e:
        raise MalformedInputError(f"Invalid JSON body: not valid UTF-8 ({e.reason} at byte {e.start})")
    except json.JSONDecodeError as e:
        raise MalformedInputError(f"Invalid JSON body: {e}")
    try:
        return Item.model_validate(payload)
    except ValidationError as e:
        raise MalformedInputError(f"Invalid item: {e}")


def path_id(path_params: Mapping | None) -> str:
    item_id = (path_params or {}).get("id")
    if item_id is None:
        raise MalformedInputError("Missing path parameter 'id'")
    return item_id


def dispatch(route_key: RouteKey, path_params: Mapping | None, body: str | bytes | None, store: ItemStore):
    if route_key is RouteKey.DELETE_ITEM:
        item_id = path_id(path_params)
        store.delete(item_id)
        return f"Deleted item {item_id}"
    elif route_key is RouteKey.GET_ITEM:
        item = store.get(path_id(path_params))
        return item.to_dynamodb_item() if item else None
    elif route_key is RouteKey.GET_ITEMS:
        return [item.to_dynamodb_item() for item in store.scan_all()]
    elif route_key is RouteKey.PUT_ITEM:
        item = parse_item(body)
        store.put(item)
        return f"Put item {item.id}"
    raise UnsupportedRouteError(route_key.value)


def handle(route_key: str, path_params: Mapping | None, body: str | bytes | None, store: ItemStore | None = None) -> Response:
    """Run one request against the store and wrap the outcome in a Response.

    Never raises for a known failure kind: unsupported routes, malformed
    bodies and store errors all come back as a 400 carrying the message.
    """
    logger.info("Handling %s", route_key)
    try:
        key = parse_route_key(route_key)
        result = dispatch(key, path_params, body, store if store is not None else get_item_store())
        status_code = 200
    except ItemsApiError as e:
        logger.warning("%s failed: %s", route_key, e.message)
        result = e.message
        status_code = e.status_code
    except Exception as e:
        logger.exception("Unexpected failure handling %s", route_key)
        result = str(e)
        status_code = 400
    return Response(statusCode=status_code, body=json.dumps(result, default=json_default))
