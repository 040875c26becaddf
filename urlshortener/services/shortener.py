"""Shorten long URLs into unique short links

Procedure for a single attempt:
    - Step 1: Generate a candidate shortcode
    - Step 2: Check the record store for an existing record with that shortcode
    - Step 3: Conditionally insert the new record (hits = 0)
    - Step 4: Return <base url>/<shortcode>

A collision in step 2 or step 3 ends the attempt. With `max_attempts=1` (the
default) it is surfaced as IdentifierCollisionError, and the caller retries the
whole request. DataStoreError is never retried here.
"""

import logging
from collections.abc import Callable

from urlshortener.models import ShortURLModel
from urlshortener.dao.base import ShortURLBaseDAO
from urlshortener.dao.exceptions import ShortURLAlreadyExistsError, ShortURLNotFoundError
from urlshortener.exceptions import BadConfigurationError, IdentifierCollisionError, InvalidInputError
from urlshortener.utils.config import ServiceConfig
from urlshortener.utils.helpers import get_short_url
from urlshortener.utils.shortener import generate_shortcode


logger = logging.getLogger(__name__)


class URLShortener:
    def __init__(
        self,
        config: ServiceConfig,
        dao: ShortURLBaseDAO,
        generator: Callable[[], str] = generate_shortcode,
    ):
        self.config = config
        self.dao = dao
        self.generator = generator

    def shorten(self, target_url: str | None, base_url: str | None = None) -> str:
        """Create a new short URL record for `target_url`.

        Args:
            target_url (str | None):
                The long URL to shorten.
            base_url (str | None):
                Public base URL used when none is configured.

        Returns:
            str: the full short URL, e.g. 'https://sho.rt/abcde'.

        Raises:
            InvalidInputError:
                If target_url is missing or empty.
            BadConfigurationError:
                If no base URL is configured or given.
            IdentifierCollisionError:
                If every attempt produced a shortcode that is already taken.
            DataStoreError:
                If the record store is unavailable.
        """
        if not isinstance(target_url, str) or not target_url.strip():
            raise InvalidInputError('URL must be a non-empty string.')

        base = self.config.base_url or base_url
        if not base:
            raise BadConfigurationError('No base URL is configured or derivable from the request.')

        for attempt in range(1, self.config.max_attempts + 1):
            shortcode = self.generator()
            if self._try_insert(ShortURLModel(target=target_url, shortcode=shortcode, hits=0)):
                logger.debug('Stored short URL record.', extra={'shortcode': shortcode, 'attempt': attempt})
                return get_short_url(shortcode, base)

            logger.info('Shortcode collision.', extra={'shortcode': shortcode, 'attempt': attempt})

        raise IdentifierCollisionError(
            f'Generated shortcode already exists after {self.config.max_attempts} attempt(s). Please try again.'
        )

    def _try_insert(self, short_url: ShortURLModel) -> bool:
        """Return True if the record was created, False on a shortcode collision."""
        try:
            self.dao.get(short_url.shortcode)
        except ShortURLNotFoundError:
            pass
        else:
            return False

        try:
            self.dao.insert(short_url)
        except ShortURLAlreadyExistsError:
            # Lost the race against a concurrent shorten that picked the same shortcode
            return False
        return True
