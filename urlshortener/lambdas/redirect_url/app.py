import logging

from urlshortener.types import LambdaEvent, LambdaContext, LambdaResponse
from urlshortener.dao.factory import build_short_url_dao
from urlshortener.dao.exceptions import DataStoreError, ShortURLNotFoundError
from urlshortener.exceptions import ConfigurationError, InvalidInputError
from urlshortener.services import URLRedirector
from urlshortener.utils import load_config
from urlshortener.utils.helpers import guarantee_500_response
from urlshortener.lambdas.responses import response_400, response_404, response_500, response_503, response_redirect
from urlshortener.lambdas.redirect_url.constants import (
    INVALID_INPUT,
    SHORT_URL_NOT_FOUND,
    STORE_UNAVAILABLE,
    CONFIGURATION_ERROR,
    REDIRECT_SUCCESS,
)


logger = logging.getLogger(__name__)


@guarantee_500_response
def lambda_handler(event: LambdaEvent, context: LambdaContext) -> LambdaResponse:
    """Handle incoming API Gateway requests to redirect URLs

    This Lambda handler follows this procedure to redirect URLs:
    - Step 1: Load the application's config
    - Step 2: Extract shortcode from request path
    - Step 3: Resolve the target URL and count the hit (via URLRedirector)
    - Step 4: Redirect client to target URL

    HTTP responses:
        308: Successful redirect
            headers:
                location: target URL destination
        400: Bad client request
            message: missing 'id' in path parameters
        404: Not found
            message: short url doesn't exist
        500: Internal server error
            message: server experienced an internal error
        503: Service unavailable
            message: the record store could not be reached (retry later)

    Example:
        >>> event = {'pathParameters': {'id': 'abcde'}}
        >>> response = lambda_handler(event, None)
        >>> response['statusCode']
        308
        >>> response['headers']['location']
        'https://example.com/page'
    """
    # 1- Get application's config
    try:
        service_config = load_config('redirect_url')
    except ConfigurationError:
        logger.exception(
            'Failed to load AppConfig for redirect URL function. Responding with 500.',
            extra={'event': CONFIGURATION_ERROR},
        )
        return response_500()

    # 2- Extract shortcode from request's path
    shortcode = (event.get('pathParameters') or {}).get('id')

    # 3- Resolve target URL and count the hit
    try:
        redirector = URLRedirector(service_config, build_short_url_dao(service_config))
        redirect = redirector.redirect(shortcode)
    except InvalidInputError:
        logger.info('Missing "id" in path. Responding with 400.', extra={'event': INVALID_INPUT})
        return response_400(message="missing 'id' in path", error_code=INVALID_INPUT)
    except ShortURLNotFoundError:
        logger.info(
            'Short URL record not found in database. Responding with 404.',
            extra={'shortcode': shortcode, 'event': SHORT_URL_NOT_FOUND},
        )
        return response_404(message=f"short url '{shortcode}' doesn't exist", error_code=SHORT_URL_NOT_FOUND)
    except ConfigurationError:
        logger.exception('Invalid record store configuration. Responding with 500.', extra={'event': CONFIGURATION_ERROR})
        return response_500()
    except DataStoreError:
        logger.exception(
            'Record store unavailable. Responding with 503.',
            extra={'shortcode': shortcode, 'event': STORE_UNAVAILABLE},
        )
        return response_503(message='record store unavailable', error_code=STORE_UNAVAILABLE)

    # 4- Redirect client to target URL
    logger.info(
        'Redirecting client to target URL. Responding with %s.',
        redirect.status,
        extra={'shortcode': shortcode, 'hits': redirect.hits, 'event': REDIRECT_SUCCESS},
    )
    return response_redirect(location=redirect.location, status_code=int(redirect.status))
