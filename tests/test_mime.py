"""Tests for the static MIME lookup."""

import pytest

from filestore.mime import is_servable, lookup_mime, mime_family


@pytest.mark.parametrize('file_name,expected', [
    ('a.txt', 'text/plain'),
    ('report.CSV', 'text/csv'),
    ('photo.jpeg', 'image/jpeg'),
    ('icon.svg', 'image/svg+xml'),
    ('backup.tar.gz', 'application/gzip'),
    ('setup.exe', 'application/x-msdownload'),
    ('dir/nested.png', 'image/png'),
])
def test_lookup_known_extensions(file_name, expected):
    assert lookup_mime(file_name) == expected


@pytest.mark.parametrize('file_name', ['README', 'archive.unknownext', 'trailingdot.'])
def test_lookup_unknown_extensions(file_name):
    assert lookup_mime(file_name) is None


def test_mime_family():
    assert mime_family('text/plain') == 'text'
    assert mime_family('image/svg+xml') == 'image'
    assert mime_family(None) is None
    assert mime_family('garbage') is None


def test_is_servable():
    assert is_servable('text/html')
    assert is_servable('image/png')
    assert not is_servable('application/json')
    assert not is_servable('video/mp4')
    assert not is_servable(None)
