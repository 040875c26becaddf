"""Resolve short URLs and count redirects

Procedure:
    - Step 1: Validate the shortcode
    - Step 2: Look up the short URL record
    - Step 3: Atomically increment its hit counter (store-side)
    - Step 4: Return the target URL with a permanent redirect status
"""

import logging
from dataclasses import dataclass

from urlshortener.constants import REDIRECT_STATUS
from urlshortener.dao.base import ShortURLBaseDAO
from urlshortener.exceptions import InvalidInputError
from urlshortener.utils.config import ServiceConfig


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Redirect:
    location: str  # Target URL for the Location header
    hits: int  # Hit counter after this redirect
    status: int = REDIRECT_STATUS


class URLRedirector:
    def __init__(self, config: ServiceConfig, dao: ShortURLBaseDAO):
        self.config = config
        self.dao = dao

    def redirect(self, shortcode: str | None) -> Redirect:
        """Resolve `shortcode` and register one hit.

        Raises:
            InvalidInputError:
                If shortcode is missing or empty.
            ShortURLNotFoundError:
                If no record exists for shortcode.
            DataStoreError:
                If the record store is unavailable.
        """
        if not isinstance(shortcode, str) or not shortcode:
            raise InvalidInputError('Shortcode must be a non-empty string.')

        short_url = self.dao.get(shortcode)
        hits = self.dao.hit(shortcode)
        logger.debug('Registered short URL hit.', extra={'shortcode': shortcode, 'hits': hits})

        return Redirect(location=short_url.target, hits=hits)
