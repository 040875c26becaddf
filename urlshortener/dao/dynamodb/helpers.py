import functools
from typing import TypeVar, Any
from collections.abc import Callable

from botocore.exceptions import BotoCoreError, ClientError

from urlshortener.dao.exceptions import DataStoreError


__all__ = ['CONDITIONAL_CHECK_FAILED', 'client_error_code']

F = TypeVar('F', bound=Callable[..., Any])

CONDITIONAL_CHECK_FAILED = 'ConditionalCheckFailedException'


def client_error_code(error: ClientError) -> str | None:
    return error.response.get('Error', {}).get('Code')


def handle_dynamodb_error(method: F) -> F:
    """Wrap DynamoDB-interacting DAO methods to handle AWS errors

    Conditional check failures are translated by the DAO methods themselves.
    Anything else reaching this wrapper (throttling, missing table, network
    failures, credentials) means the store is unavailable.

    Args:
        method (Callable[..., Any]):
            DAO method performing DynamoDB operations which may raise
            botocore.exceptions.ClientError or botocore.exceptions.BotoCoreError.

    Returns:
        Callable[..., Any]:
            Wrapped method which raises DataStoreError on DynamoDB failures.
    """

    @functools.wraps(method)
    def wrapper(self, *args, **kwargs):
        try:
            return method(self, *args, **kwargs)
        except ClientError as e:
            code = client_error_code(e)
            raise DataStoreError(f'DynamoDB request to table {self.table_name} failed ({code}).') from e
        except BotoCoreError as e:
            raise DataStoreError(f"Can't reach DynamoDB table {self.table_name}.") from e

    return wrapper
