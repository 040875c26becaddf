"""Data Access Object (DAO) implementation for managing shortened URLs in DynamoDB

Table layout (hash key `Id`):

    {"Id": {"S": "abcde"}, "LongUrl": {"S": "https://example.com"}, "HitCount": {"N": "0"}}

Both writes are conditional and evaluated by DynamoDB:
    - insert:    PutItem    + attribute_not_exists(Id)
    - increment: UpdateItem + attribute_exists(Id), `ADD HitCount :delta`

Example:
    >>> dao = ShortURLDynamoDBDAO(dynamodb_table_name='UrlShortenerTable')
    >>> dao.insert(ShortURLModel(target='https://example.com/page', shortcode='abcde'))
    <ShortURLDynamoDBDAO>
    >>> dao.hit('abcde')
    1
"""

from beartype import beartype
from botocore.exceptions import ClientError

from urlshortener.models import ShortURLModel
from urlshortener.dao.base import ShortURLBaseDAO
from urlshortener.dao.base.short_url_base_dao import HITS_FIELD
from urlshortener.dao.dynamodb.mixins import DynamoDBClientMixin
from urlshortener.dao.dynamodb.helpers import CONDITIONAL_CHECK_FAILED, client_error_code, handle_dynamodb_error
from urlshortener.dao.exceptions import ShortURLAlreadyExistsError, ShortURLNotFoundError


ID_ATTRIBUTE = 'Id'
TARGET_ATTRIBUTE = 'LongUrl'
HITS_ATTRIBUTE = 'HitCount'

# Model field -> DynamoDB attribute
ATTRIBUTES = {HITS_FIELD: HITS_ATTRIBUTE}


class ShortURLDynamoDBDAO(DynamoDBClientMixin, ShortURLBaseDAO):
    """DynamoDB-based Data Access Object (DAO) for managing short URL mappings

    Methods:
        insert(short_url: ShortURLModel, **kwargs) -> ShortURLDynamoDBDAO:
            Conditionally put a new item. Raises ShortURLAlreadyExistsError if `Id` exists.

        get(shortcode: str, **kwargs) -> ShortURLModel:
            Strongly consistent point lookup. Raises ShortURLNotFoundError if absent.

        increment(shortcode: str, field: str = 'hits', delta: int = 1, **kwargs) -> int:
            Server-side `ADD` on the hit counter. Raises ShortURLNotFoundError if absent.

    All methods raise DataStoreError on any other DynamoDB failure.
    """

    def _key(self, shortcode: str) -> dict:
        return {ID_ATTRIBUTE: {'S': shortcode}}

    @handle_dynamodb_error
    @beartype
    def insert(self, short_url: ShortURLModel, **kwargs) -> 'ShortURLDynamoDBDAO':
        item = {
            ID_ATTRIBUTE: {'S': short_url.shortcode},
            TARGET_ATTRIBUTE: {'S': short_url.target},
            HITS_ATTRIBUTE: {'N': str(short_url.hits)},
        }
        try:
            self.dynamodb.put_item(
                TableName=self.table_name,
                Item=item,
                ConditionExpression='attribute_not_exists(#id)',
                ExpressionAttributeNames={'#id': ID_ATTRIBUTE},
            )
        except ClientError as e:
            if client_error_code(e) == CONDITIONAL_CHECK_FAILED:
                raise ShortURLAlreadyExistsError(f"Short URL with code '{short_url.shortcode}' already exists.") from e
            raise
        return self

    @handle_dynamodb_error
    @beartype
    def get(self, shortcode: str, **kwargs) -> ShortURLModel:
        response = self.dynamodb.get_item(
            TableName=self.table_name,
            Key=self._key(shortcode),
            ConsistentRead=True,
        )

        item = response.get('Item')
        if not item:
            raise ShortURLNotFoundError(f"Short URL with code '{shortcode}' not found.")

        return ShortURLModel(
            target=item[TARGET_ATTRIBUTE]['S'],
            shortcode=shortcode,
            hits=int(item.get(HITS_ATTRIBUTE, {}).get('N', 0)),
        )

    @handle_dynamodb_error
    @beartype
    def increment(self, shortcode: str, field: str = HITS_FIELD, delta: int = 1, **kwargs) -> int:
        """Atomically increment a short URL's hit counter

        NOTE: `SET HitCount = :value` computed by the caller would lose updates
              when two redirects read the same counter value. `ADD` is applied
              by DynamoDB against the currently stored value.
        """
        self._validate_increment(field, delta)
        attribute = ATTRIBUTES[field]

        try:
            response = self.dynamodb.update_item(
                TableName=self.table_name,
                Key=self._key(shortcode),
                UpdateExpression='ADD #field :delta',
                ConditionExpression='attribute_exists(#id)',
                ExpressionAttributeNames={'#id': ID_ATTRIBUTE, '#field': attribute},
                ExpressionAttributeValues={':delta': {'N': str(delta)}},
                ReturnValues='UPDATED_NEW',
            )
        except ClientError as e:
            if client_error_code(e) == CONDITIONAL_CHECK_FAILED:
                raise ShortURLNotFoundError(f"Short URL with code '{shortcode}' not found.") from e
            raise

        return int(response['Attributes'][attribute]['N'])
