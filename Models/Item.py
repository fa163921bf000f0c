from typing import Any
from Models.DynamoModel import DynamoModel

class Item(DynamoModel):
    id: str
    # stored as given, the table only constrains the key
    name: Any = None
    price: Any = None
