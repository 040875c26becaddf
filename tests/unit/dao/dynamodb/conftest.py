from unittest.mock import MagicMock

import pytest
from botocore.exceptions import ClientError


@pytest.fixture
def dynamodb_client() -> MagicMock:
    return MagicMock()


@pytest.fixture
def conditional_check_failed() -> ClientError:
    return ClientError(
        {'Error': {'Code': 'ConditionalCheckFailedException', 'Message': 'The conditional request failed'}},
        'PutItem',
    )


@pytest.fixture
def throttled() -> ClientError:
    return ClientError(
        {'Error': {'Code': 'ProvisionedThroughputExceededException', 'Message': 'Rate exceeded'}},
        'UpdateItem',
    )
