from enum import Enum

class RouteKey(str, Enum):
    GET_ITEM = "GET /items/{id}"
    GET_ITEMS = "GET /items"
    PUT_ITEM = "PUT /items"
    DELETE_ITEM = "DELETE /items/{id}"
