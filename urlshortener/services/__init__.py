from urlshortener.services.shortener import URLShortener
from urlshortener.services.redirector import URLRedirector, Redirect


__all__ = [
    'URLShortener',
    'URLRedirector',
    'Redirect',
]
