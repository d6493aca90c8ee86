"""Tests for resource providers."""

import pytest

from clock_words.core import ResourceUnavailableError
from clock_words.io import (
    DEFAULT_WORD_LIST_KEY,
    InMemoryResourceProvider,
    PackageResourceProvider,
    parse_word_list,
)


def test_package_provider_loads_bundled_word_list():
    data = PackageResourceProvider().load(DEFAULT_WORD_LIST_KEY)

    entries = parse_word_list(data)
    assert len(entries) >= 10
    assert entries[0].name == "abandon"
    assert entries[0].translation


def test_package_provider_missing_resource_raises():
    with pytest.raises(ResourceUnavailableError):
        PackageResourceProvider().load("does_not_exist.tsv")


def test_package_provider_missing_package_raises():
    with pytest.raises(ResourceUnavailableError):
        PackageResourceProvider(package="clock_words.no_such_package").load(
            DEFAULT_WORD_LIST_KEY
        )


def test_in_memory_provider_returns_registered_buffer():
    provider = InMemoryResourceProvider({"words": b"abc"})
    assert provider.load("words") == b"abc"


def test_in_memory_provider_copies_added_buffer():
    source = bytearray(b"abc")
    provider = InMemoryResourceProvider()
    provider.add("words", source)
    source[0] = ord("x")

    assert provider.load("words") == b"abc"


@pytest.mark.parametrize("buffers", [{}, {"words": b""}])
def test_in_memory_provider_missing_or_empty_raises(buffers):
    with pytest.raises(ResourceUnavailableError):
        InMemoryResourceProvider(buffers).load("words")
