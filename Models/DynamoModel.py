from decimal import Decimal
from pydantic import BaseModel, ConfigDict

class DynamoModel(BaseModel):
    # unknown attributes in a payload are dropped
    model_config = ConfigDict(extra='ignore')

    def to_dynamodb_item(self) -> dict:
        # absent fields are left off the record instead of being written as NULL
        return self.model_dump(exclude_none=True)

    @classmethod
    def from_dynamodb_item(cls, dynamodb_item: dict | None):
        if dynamodb_item is None:
            return None
        # records are trusted as stored, only the known attributes are kept
        return cls.model_construct(**{k: v for k, v in dynamodb_item.items() if k in cls.model_fields})

def json_default(value):
    # boto3 hands DynamoDB numbers back as Decimal and string/number sets as set
    if isinstance(value, Decimal):
        return int(value) if value == value.to_integral_value() else float(value)
    if isinstance(value, (set, frozenset)):
        return sorted(value, key=str)
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")
