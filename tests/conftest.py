"""Shared fixtures for pxvapi tests."""
from urllib.parse import parse_qs, urlsplit

import pytest


def _decode(url):
    query = urlsplit(url).query
    pairs = parse_qs(query, keep_blank_values=True)
    #   Each key must appear once.
    assert all(len(v) == 1 for v in pairs.values()), pairs
    return {k: v[0] for k, v in pairs.items()}


@pytest.fixture
def decode_query():
    """Returns a function decoding the query of a url into a flat dict."""
    return _decode
