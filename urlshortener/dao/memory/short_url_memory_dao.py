"""In-process implementation of ShortURLBaseDAO

Records live in a dictionary guarded by a lock, so conditional inserts and
increments are atomic across threads of the same process. Intended for local
runs and tests; records do not survive the process.
"""

import threading
from typing import Any, Optional

from beartype import beartype

from urlshortener.models import ShortURLModel
from urlshortener.dao.base import ShortURLBaseDAO
from urlshortener.dao.base.short_url_base_dao import HITS_FIELD
from urlshortener.dao.exceptions import ShortURLAlreadyExistsError, ShortURLNotFoundError


# Process-wide store shared by every DAO built without explicit records
_RECORDS: dict[str, dict[str, Any]] = {}
_LOCK = threading.Lock()


class ShortURLMemoryDAO(ShortURLBaseDAO):
    def __init__(
        self,
        memory_records: Optional[dict[str, dict[str, Any]]] = None,
        memory_lock: Optional[threading.Lock] = None,
    ):
        if memory_records is None:
            memory_records, memory_lock = _RECORDS, _LOCK

        self.records = memory_records
        self.lock = memory_lock or threading.Lock()

    @beartype
    def insert(self, short_url: ShortURLModel, **kwargs) -> 'ShortURLMemoryDAO':
        with self.lock:
            if short_url.shortcode in self.records:
                raise ShortURLAlreadyExistsError(f"Short URL with code '{short_url.shortcode}' already exists.")
            self.records[short_url.shortcode] = {'target': short_url.target, HITS_FIELD: short_url.hits}
        return self

    @beartype
    def get(self, shortcode: str, **kwargs) -> ShortURLModel:
        with self.lock:
            record = self.records.get(shortcode)
            if record is None:
                raise ShortURLNotFoundError(f"Short URL with code '{shortcode}' not found.")
            return ShortURLModel(target=record['target'], shortcode=shortcode, hits=record[HITS_FIELD])

    @beartype
    def increment(self, shortcode: str, field: str = HITS_FIELD, delta: int = 1, **kwargs) -> int:
        self._validate_increment(field, delta)
        with self.lock:
            record = self.records.get(shortcode)
            if record is None:
                raise ShortURLNotFoundError(f"Short URL with code '{shortcode}' not found.")
            record[field] += delta
            return record[field]
