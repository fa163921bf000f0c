from fastapi import APIRouter, Request
from fastapi import Response as HTTPResponse
from Models.Response import Response
from Models.RouteKey import RouteKey
from Routes.dispatcher import handle

router = APIRouter()

ALL_METHODS = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]

def to_http_response(response: Response) -> HTTPResponse:
    return HTTPResponse(content=response.body, status_code=response.statusCode, headers=response.headers)

async def read_body(request: Request) -> bytes | None:
    raw = await request.body()
    return raw or None

# GET /items/{id} : a single item, or null when it does not exist
@router.get("/items/{id}")
def get_item(id: str):
    return to_http_response(handle(RouteKey.GET_ITEM.value, {"id": id}, None))

# GET /items : every stored item, unordered
@router.get("/items")
def get_items():
    return to_http_response(handle(RouteKey.GET_ITEMS.value, {}, None))

# PUT /items : create or overwrite the item named by the body's id
@router.put("/items")
async def put_item(request: Request):
    body = await read_body(request)
    return to_http_response(handle(RouteKey.PUT_ITEM.value, {}, body))

# DELETE /items/{id} : succeeds whether or not the item exists
@router.delete("/items/{id}")
def delete_item(id: str):
    return to_http_response(handle(RouteKey.DELETE_ITEM.value, {"id": id}, None))

# Anything else is answered by the dispatcher as an unsupported route
@router.api_route("/{path:path}", methods=ALL_METHODS, include_in_schema=False)
async def unsupported_route(request: Request):
    body = await read_body(request)
    route_key = f"{request.method} {request.url.path}"
    return to_http_response(handle(route_key, dict(request.path_params), body))
