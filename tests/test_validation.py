"""Tests for request-string parsing and input validation.

Every simulation starts from a raw string typed by the user and a cache
size. Before any algorithm runs, the input is tokenized and checked; a
rejected input never produces a partial trace.
"""

import pytest

from validation import (
    MAX_CACHE_SIZE,
    MAX_PAGE_REQUESTS,
    InvalidCacheSize,
    InvalidSequenceFormat,
    SimulationError,
    TooManyRequests,
    UnknownAlgorithm,
    ValidationError,
    parse_pages,
    validate,
)

# -- Parser ---------------------------------------------------------------------


class TestParsePages:
    """Verify tokenization of the raw request string."""

    def test_mixed_delimiters(self) -> None:
        """Commas, semicolons and whitespace all separate identifiers."""
        assert parse_pages("A, B;C  D\tE\nF") == ["A", "B", "C", "D", "E", "F"]

    def test_runs_of_delimiters_collapse(self) -> None:
        """Consecutive delimiters never produce empty identifiers."""
        assert parse_pages(",,A;; ,B, ") == ["A", "B"]

    def test_identifiers_are_case_sensitive(self) -> None:
        """Identifiers are opaque strings, 'a' and 'A' are different pages."""
        assert parse_pages("a A a") == ["a", "A", "a"]

    def test_multi_character_identifiers(self) -> None:
        """Identifiers may be longer than one character."""
        assert parse_pages("page1 page2,10") == ["page1", "page2", "10"]

    def test_blank_input_is_empty(self) -> None:
        """An empty or blank string yields no identifiers."""
        assert parse_pages("") == []
        assert parse_pages("   ") == []

    def test_only_delimiters_is_empty(self) -> None:
        """A string of delimiters alone yields no identifiers."""
        assert parse_pages(" ,;, ") == []


# -- Validator ------------------------------------------------------------------


def check(cache_size, raw):
    return validate(cache_size, raw, parse_pages(raw))


class TestValidate:
    """Verify the ordered validation checks and their error kinds."""

    def test_valid_input_is_returned(self) -> None:
        """A valid input comes back as (pages, cache_size)."""
        assert check(3, "A B C") == (["A", "B", "C"], 3)

    @pytest.mark.parametrize("size", [0, -1, MAX_CACHE_SIZE + 1])
    def test_cache_size_out_of_range(self, size) -> None:
        """Sizes outside [1, MAX_CACHE_SIZE] are rejected."""
        with pytest.raises(InvalidCacheSize):
            check(size, "A")

    @pytest.mark.parametrize("size", [1, MAX_CACHE_SIZE])
    def test_cache_size_bounds_are_inclusive(self, size) -> None:
        """Both ends of the size range are accepted."""
        assert check(size, "A")[1] == size

    @pytest.mark.parametrize("size", [None, 2.5, "3", True])
    def test_non_integer_cache_size(self, size) -> None:
        """A cache size that is not an integer is an invalid size."""
        with pytest.raises(InvalidCacheSize):
            check(size, "A")

    def test_cache_size_message(self) -> None:
        """The message states the accepted range."""
        with pytest.raises(InvalidCacheSize, match="between 1 and 10"):
            check(11, "A")

    def test_blank_sequence_is_valid_and_empty(self) -> None:
        """A blank input is a valid request sequence with no requests."""
        assert check(2, "") == ([], 2)
        assert check(2, "  \t ") == ([], 2)

    def test_delimiter_only_sequence_is_invalid(self) -> None:
        """Non-blank input without any identifier is a format error."""
        with pytest.raises(InvalidSequenceFormat):
            check(2, ", ; ,")

    def test_max_requests_is_accepted(self) -> None:
        """Exactly MAX_PAGE_REQUESTS identifiers pass."""
        raw = " ".join(f"P{i}" for i in range(MAX_PAGE_REQUESTS))
        pages, _ = check(4, raw)
        assert len(pages) == MAX_PAGE_REQUESTS

    def test_too_many_requests(self) -> None:
        """31 identifiers exceed the request limit."""
        raw = " ".join(f"P{i}" for i in range(MAX_PAGE_REQUESTS + 1))
        with pytest.raises(TooManyRequests, match="Maximum 30 page requests"):
            check(4, raw)

    def test_cache_size_checked_first(self) -> None:
        """With several problems, the cache size error wins."""
        raw = " ".join(f"P{i}" for i in range(MAX_PAGE_REQUESTS + 1))
        with pytest.raises(InvalidCacheSize):
            check(0, raw)
        with pytest.raises(InvalidCacheSize):
            check(0, ",,,")

    def test_custom_limits(self) -> None:
        """Limits can be tightened by the caller."""
        with pytest.raises(InvalidCacheSize):
            validate(4, "A", ["A"], max_cache_size=3)
        with pytest.raises(TooManyRequests):
            validate(2, "A B", ["A", "B"], max_page_requests=1)

    def test_error_hierarchy(self) -> None:
        """Validation errors are SimulationErrors and ValueErrors."""
        for exc in (InvalidCacheSize, InvalidSequenceFormat, TooManyRequests):
            assert issubclass(exc, ValidationError)
            assert issubclass(exc, SimulationError)
            assert issubclass(exc, ValueError)


@pytest.mark.parametrize(
    "exc", [InvalidCacheSize, InvalidSequenceFormat, TooManyRequests, UnknownAlgorithm]
)
def test_errors_are_documented(exc) -> None:
    """Each concrete error class describes when it is raised."""
    assert exc.__doc__ and exc.__doc__.strip()
