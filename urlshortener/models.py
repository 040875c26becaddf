from dataclasses import dataclass


# fmt: off
@dataclass(frozen=True)
class ShortURLModel:
    target: str     # Original long URL (immutable after creation)
    shortcode: str  # Unique short identifier of shortened URL
    hits: int = 0   # Number of successful redirects
# fmt: on
