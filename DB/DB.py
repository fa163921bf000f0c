import os
import logging
from decimal import DecimalException
from functools import lru_cache
import boto3
from botocore.exceptions import BotoCoreError, ClientError
from dotenv import load_dotenv
from Models.Errors import MalformedInputError, StoreError
from Models.Item import Item

dotenv_path = os.path.join(os.path.dirname(__file__), '..', '.env')

load_dotenv(dotenv_path)

logger = logging.getLogger(__name__)

class Config:
    TABLE_NAME = os.getenv('ITEMS_TABLE_NAME', 'http-crud-tutorial-items')
    DB_REGION_NAME = os.getenv('AWS_DEFAULT_REGION')
    DB_ACCESS_KEY_ID = os.getenv('AWS_ACCESS_KEY_ID')
    DB_SECRET_ACCESS_KEY = os.getenv('AWS_SECRET_ACCESS_KEY')
    DB_ENDPOINT_URL = os.getenv('DYNAMODB_ENDPOINT_URL') or None


def _store_error(operation: str, e: Exception) -> StoreError:
    if isinstance(e, ClientError):
        message = e.response.get('Error', {}).get('Message') or str(e)
    else:
        message = str(e)
    logger.error("DynamoDB %s failed: %s", operation, message)
    return StoreError(operation, message)


class ItemStore:
    """Items kept in a single DynamoDB table keyed by ``id``."""

    def __init__(self, table):
        self.table = table

    def get(self, item_id: str) -> Item | None:
        try:
            record = self.table.get_item(Key={'id': item_id}).get('Item')
        except (ClientError, BotoCoreError) as e:
            raise _store_error('get', e) from e
        return Item.from_dynamodb_item(record)

    def put(self, item: Item) -> None:
        try:
            self.table.put_item(Item=item.to_dynamodb_item())
        except (ClientError, BotoCoreError) as e:
            raise _store_error('put', e) from e
        except (DecimalException, TypeError) as e:
            # boto3 refuses floats and numbers beyond 38 significant digits
            raise MalformedInputError(f"Item {item.id} cannot be stored: {e!r}") from e

    def delete(self, item_id: str) -> None:
        try:
            self.table.delete_item(Key={'id': item_id})
        except (ClientError, BotoCoreError) as e:
            raise _store_error('delete', e) from e

    def scan_all(self) -> list[Item]:
        # drains every page, callers never see LastEvaluatedKey
        items = []
        scan_args = {}
        try:
            while True:
                response = self.table.scan(**scan_args)
                items.extend(Item.from_dynamodb_item(record) for record in response.get('Items', []))
                last_key = response.get('LastEvaluatedKey')
                if not last_key:
                    break
                scan_args['ExclusiveStartKey'] = last_key
        except (ClientError, BotoCoreError) as e:
            raise _store_error('scan', e) from e
        return items


def get_ddb_instance():
    return boto3.resource('dynamodb',
                          region_name=Config.DB_REGION_NAME,
                          aws_access_key_id=Config.DB_ACCESS_KEY_ID,
                          aws_secret_access_key=Config.DB_SECRET_ACCESS_KEY,
                          endpoint_url=Config.DB_ENDPOINT_URL).Table(Config.TABLE_NAME)


@lru_cache(maxsize=None)
def get_item_store() -> ItemStore:
    # built on first use and shared by every invocation in the process
    return ItemStore(get_ddb_instance())
