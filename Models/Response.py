from pydantic import BaseModel, Field

JSON_HEADERS = {"Content-Type": "application/json"}

class Response(BaseModel):
    statusCode: int
    body: str
    headers: dict[str, str] = Field(default_factory=lambda: dict(JSON_HEADERS))
