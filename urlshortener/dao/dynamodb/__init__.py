from urlshortener.dao.dynamodb.mixins import DynamoDBClientMixin
from urlshortener.dao.dynamodb.short_url_dynamodb_dao import ShortURLDynamoDBDAO


__all__ = [
    'DynamoDBClientMixin',
    'ShortURLDynamoDBDAO',
]
