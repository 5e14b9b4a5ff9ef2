# validation.py

import re
from typing import List, Sequence, Tuple

MAX_CACHE_SIZE = 10
MAX_PAGE_REQUESTS = 30

# Any run of comma, semicolon or whitespace separates two page identifiers
_DELIMITERS = re.compile(r"[,;\s]+")


class SimulationError(ValueError):
    """Base class for every error the simulator reports to its caller."""


class ValidationError(SimulationError):
    """Raised when user input is rejected before a simulation starts."""


class InvalidCacheSize(ValidationError):
    """Cache size is not an integer within [1, max_cache_size]."""

    def __init__(self, cache_size, max_cache_size=MAX_CACHE_SIZE):
        self.cache_size = cache_size
        self.max_cache_size = max_cache_size
        super().__init__(f"Cache size must be between 1 and {max_cache_size}.")


class InvalidSequenceFormat(ValidationError):
    """Non-blank request string that holds no page identifier."""

    def __init__(self, raw_sequence):
        self.raw_sequence = raw_sequence
        super().__init__("Invalid page request sequence format.")


class TooManyRequests(ValidationError):
    """More page requests than max_page_requests."""

    def __init__(self, count, max_page_requests=MAX_PAGE_REQUESTS):
        self.count = count
        self.max_page_requests = max_page_requests
        super().__init__(f"Maximum {max_page_requests} page requests allowed.")


class UnknownAlgorithm(SimulationError):
    """Selector outside ReplacementPolicy.ALL reached the dispatcher."""

    def __init__(self, algorithm):
        self.algorithm = algorithm
        super().__init__("Invalid algorithm selected.")


# -----------------------------
# Parsing
# -----------------------------
def parse_pages(raw: str) -> List[str]:
    """Split a raw request string into trimmed, non-empty page identifiers."""
    return [token.strip() for token in _DELIMITERS.split(raw) if token.strip() != ""]


# -----------------------------
# Validation
# -----------------------------
def validate(
    cache_size: int,
    raw: str,
    pages: Sequence[str],
    max_cache_size: int = MAX_CACHE_SIZE,
    max_page_requests: int = MAX_PAGE_REQUESTS,
) -> Tuple[List[str], int]:
    """
    Check simulation parameters in order, stopping at the first failure.

    Args:
        cache_size (int): Number of frames requested by the user
        raw (str): The untouched request string, used to tell a blank
            input apart from one made only of delimiters
        pages (Sequence[str]): Output of parse_pages(raw)
        max_cache_size (int): Upper bound for cache_size
        max_page_requests (int): Upper bound for len(pages)

    Returns:
        Tuple[List[str], int]: (pages, cache_size), ready for simulate()

    Raises:
        InvalidCacheSize: cache_size is not an integer in [1, max_cache_size]
        InvalidSequenceFormat: raw is non-blank but holds no page identifier
        TooManyRequests: more than max_page_requests identifiers
    """
    if not isinstance(cache_size, int) or isinstance(cache_size, bool):
        raise InvalidCacheSize(cache_size, max_cache_size)
    if cache_size < 1 or cache_size > max_cache_size:
        raise InvalidCacheSize(cache_size, max_cache_size)

    # A blank string is a valid empty sequence; only non-blank input may fail here
    if len(pages) == 0 and raw.strip() != "":
        raise InvalidSequenceFormat(raw)

    if len(pages) > max_page_requests:
        raise TooManyRequests(len(pages), max_page_requests)

    return list(pages), cache_size
