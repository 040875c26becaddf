"""Abstract base class for ShortURL data access objects (DAOs).

This class establishes a consistent contract for all ShortURL DAO implementations,
regardless of the underlying storage mechanism (e.g., Redis, DynamoDB, in-memory).

Responsibilities:
    - Provide an interface for inserting and retrieving ShortURLModel objects.
    - Provide an atomic, store-side increment of the link hit counter.
    - Standardize error handling across multiple data store implementations.

Example:
    Typical usage with a datastore-specific implementation:

        >>> from urlshortener.models import ShortURLModel
        >>> from urlshortener.dao.redis import ShortURLRedisDAO

        >>> dao = ShortURLRedisDAO(...)

        >>> short_url = ShortURLModel(
        ...     target="https://example.com/blog/article-123",
        ...     shortcode="a1b2c",
        ... )
        >>> dao.insert(short_url)

        >>> retrieved = dao.get("a1b2c")
        >>> print(retrieved.target)
        https://example.com/blog/article-123

        >>> dao.hit("a1b2c")
        1
"""

from abc import ABC, abstractmethod

from urlshortener.models import ShortURLModel


# Only the hit counter may change after a record is created
HITS_FIELD = 'hits'


class ShortURLBaseDAO(ABC):
    """Interface for ShortURL data access objects (DAOs).

    Methods:
        insert(short_url: ShortURLModel, **kwargs) -> ShortURLBaseDAO:
            Insert a new ShortURLModel into the data store if its shortcode is absent.
            Raises ShortURLAlreadyExistsError if the short code already exists.
            Raises DataStoreError on connection or write failure.

        get(shortcode: str, **kwargs) -> ShortURLModel:
            Retrieve a ShortURLModel from the data store by short code.
            Raises ShortURLNotFoundError if the entry does not exist.
            Raises DataStoreError on connection or read failure.

        increment(shortcode: str, field: str = 'hits', delta: int = 1, **kwargs) -> int:
            Atomically increment a numeric field of a stored record.
            Raises ShortURLNotFoundError if the entry does not exist.
            Raises DataStoreError on connection or write failure.

        hit(shortcode: str, **kwargs) -> int:
            Register one redirect for a short URL (increment hits by 1).

    Subclassing:
        Datastore-specific implementations (e.g., ShortURLRedisDAO or
        ShortURLDynamoDBDAO) must extend this class and implement all
        abstract methods.

    NOTE:
        - Records are never deleted. The DAO does not provide an interface to
          delete or overwrite entries.
        - Implementations must never retry internally.
    """

    @abstractmethod
    def insert(self, short_url: ShortURLModel, **kwargs) -> 'ShortURLBaseDAO':
        """Insert a new ShortURLModel into the data store.

        The write is conditional: it only succeeds if no record with the same
        shortcode exists, and an existing record is never overwritten.

        Args:
            short_url (ShortURLModel):
                The ShortURLModel instance to be inserted.

            **kwargs:
                Additional keyword arguments, used by data store.

        Returns:
            ShortURLBaseDAO: self (for method chaining)

        Raises:
            ShortURLAlreadyExistsError:
                If a ShortURLModel with the same short code already exists

            DataStoreError:
                If there is an error in the data store.
        """
        pass

    @abstractmethod
    def get(self, shortcode: str, **kwargs) -> ShortURLModel:
        """Retrieve a ShortURLModel from the data store by its short code.

        Args:
            shortcode (str):
                The short code of the ShortURLModel to be retrieved.

            **kwargs:
                Additional keyword arguments, used by data store.

        Returns:
            ShortURLModel: The stored ShortURLModel instance.

        Raises:
            ShortURLNotFoundError:
                If no ShortURLModel with the given short code exists.

            DataStoreError:
                If there is an error in the data store.
        """
        pass

    @abstractmethod
    def increment(self, shortcode: str, field: str = HITS_FIELD, delta: int = 1, **kwargs) -> int:
        """Atomically increment a numeric field of a stored record.

        The read-modify-write happens in the data store as a single operation,
        so concurrent increments of the same record are never lost.

        Args:
            shortcode (str):
                The short code of the record to update.

            field (str):
                Numeric field to increment. Only 'hits' is mutable.

            delta (int):
                Non-negative amount to add. Defaults to 1.

            **kwargs:
                Additional keyword arguments, used by data store.

        Returns:
            int: The field's value after the increment.

        Raises:
            ValueError:
                If the field is not mutable or delta is negative.

            ShortURLNotFoundError:
                If no ShortURLModel with the given short code exists.

            DataStoreError:
                If there is an error in the data store.
        """
        pass

    def hit(self, shortcode: str, **kwargs) -> int:
        """Increment the hit counter of a short URL by exactly one.

        Returns:
            int: The hit counter after this redirect.
        """
        return self.increment(shortcode, field=HITS_FIELD, delta=1, **kwargs)

    @staticmethod
    def _validate_increment(field: str, delta: int) -> None:
        if field != HITS_FIELD:
            raise ValueError(f"Only the '{HITS_FIELD}' field can be incremented (given field: {field!r}).")
        if delta < 0:
            raise ValueError(f'Hit counter never decreases (given delta: {delta}).')
