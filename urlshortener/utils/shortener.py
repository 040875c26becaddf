"""Shortcode generation utility

Shortcodes are the leading characters of a random (version 4) UUID in its
canonical string form, e.g. 'f47ac10b-58cc-4372-a567-0e02b2c3d479' -> 'f47ac'.

Functions:
    generate_shortcode(length=5):
        Generate a random lowercase-hex shortcode suitable for use as a URL slug.

Example:
    >>> from urlshortener.utils import generate_shortcode
    >>> generate_shortcode()
    'f47ac'
"""

import uuid

from urlshortener.constants import SHORTCODE_LENGTH


# Length of the first group of a canonical UUID string (8-4-4-4-12)
MAX_SHORTCODE_LENGTH = 8


def generate_shortcode(length: int = SHORTCODE_LENGTH) -> str:
    """Generate a random shortcode from a UUID4 prefix.

    Args:
        length (int, optional):
            Number of characters to keep. Defaults to 5.
            Must lie in [1, 8] so the prefix never contains a dash.

    Returns:
        str: lowercase hexadecimal shortcode of the requested length.

    NOTE:
        - 5 hex characters give 16**5 (~1M) distinct shortcodes, so collisions
          become likely after roughly a thousand links (birthday bound).
          Uniqueness is therefore enforced by the data store, never assumed.
    """
    if not isinstance(length, int) or isinstance(length, bool):
        raise TypeError(f'Length must be of type integer (given type: {type(length)}).')
    if not 1 <= length <= MAX_SHORTCODE_LENGTH:
        raise ValueError(f'Length must be between 1 and {MAX_SHORTCODE_LENGTH} (given value: {length}).')

    return str(uuid.uuid4())[:length]
