import base64
import binascii
import json
import logging

from urlshortener.types import LambdaEvent, LambdaContext, LambdaResponse
from urlshortener.dao.factory import build_short_url_dao
from urlshortener.dao.exceptions import DataStoreError
from urlshortener.exceptions import ConfigurationError, IdentifierCollisionError, InvalidInputError
from urlshortener.services import URLShortener
from urlshortener.utils import load_config, base_url
from urlshortener.utils.helpers import guarantee_500_response
from urlshortener.lambdas.responses import response_200_text, response_400, response_500, response_503
from urlshortener.lambdas.shorten_url.constants import (
    INVALID_INPUT,
    IDENTIFIER_COLLISION,
    STORE_UNAVAILABLE,
    CONFIGURATION_ERROR,
    SHORTEN_SUCCESS,
)


logger = logging.getLogger(__name__)


def _request_body(event: LambdaEvent) -> str:
    body = event.get('body') or '{}'
    if event.get('isBase64Encoded'):
        body = base64.b64decode(body, validate=True).decode('utf-8')
    return body


@guarantee_500_response
def lambda_handler(event: LambdaEvent, context: LambdaContext) -> LambdaResponse:
    """Handle incoming API Gateway requests to shorten URLs

    This Lambda handler follows this procedure to shorten URLs:
    - Step 1: Load the application's config
    - Step 2: Extract original URL from request body
    - Step 3: Generate a shortcode and store the record (via URLShortener)
    - Step 4: Respond to user with the short URL

    HTTP responses:
        200: Successful URL shortening
            body (text/plain): newly generated short url
        400: Bad client request
            message: invalid JSON or missing/empty 'url'
        500: Internal server error
            message: configuration failure or shortcode collision (retry the request)
        503: Service unavailable
            message: the record store could not be reached (retry later)

    Args:
        event (LambdaEvent):
            API Gateway event payload in Lambda Proxy format.
        context (LambdaContext):
            AWS Lambda context object containing runtime information.

    Returns:
        LambdaResponse:
            JSON-serializable response following API Gateway Lambda Proxy output format.

    Example:
        >>> event = {'body': '{"url": "https://example.com/page"}'}
        >>> response = lambda_handler(event, None)
        >>> response['statusCode']
        200
        >>> response['body']
        'https://sho.rt/abcde'
    """
    # 1- Get application's config
    try:
        service_config = load_config('shorten_url')
    except ConfigurationError:
        logger.exception(
            'Failed to load AppConfig for shorten URL function. Responding with 500.',
            extra={'event': CONFIGURATION_ERROR},
        )
        return response_500()

    # 2- Extract original URL from request body
    try:
        request_body = json.loads(_request_body(event))
    except (json.JSONDecodeError, binascii.Error, UnicodeDecodeError):
        logger.info('Invalid JSON body. Responding with 400.', extra={'event': INVALID_INPUT})
        return response_400(message='invalid JSON body', error_code=INVALID_INPUT)

    target_url = request_body.get('url') if isinstance(request_body, dict) else None

    # 3- Generate shortcode and store short URL record
    try:
        shortener = URLShortener(service_config, build_short_url_dao(service_config))
        short_url = shortener.shorten(target_url, base_url=base_url(event))
    except InvalidInputError:
        logger.info("Missing 'url' in JSON body. Responding with 400.", extra={'event': INVALID_INPUT})
        return response_400(message="missing 'url' in JSON body", error_code=INVALID_INPUT)
    except ConfigurationError:
        logger.exception('Invalid record store configuration. Responding with 500.', extra={'event': CONFIGURATION_ERROR})
        return response_500()
    except IdentifierCollisionError:
        logger.warning('Shortcode collision. Responding with 500.', extra={'event': IDENTIFIER_COLLISION})
        return response_500(
            message='generated short url already exists, please try again',
            error_code=IDENTIFIER_COLLISION,
        )
    except DataStoreError:
        logger.exception('Record store unavailable. Responding with 503.', extra={'event': STORE_UNAVAILABLE})
        return response_503(message='record store unavailable', error_code=STORE_UNAVAILABLE)

    # 4- Return successful response to user
    logger.info(
        'Shortened URL. Responding with 200.',
        extra={'event': SHORTEN_SUCCESS, 'short_url': short_url},
    )
    return response_200_text(short_url)
