import pytest

from content_profile.errors import ConfigurationError


class FakeTransport:
    def __init__(self, fragments=(), fail_after=None, error=None, configured=True):
        self.fragments = list(fragments)
        self.fail_after = fail_after
        self.error = error or RuntimeError("connection reset")
        self.configured = configured
        self.calls = []

    def check_configuration(self):
        if not self.configured:
            raise ConfigurationError("API Key is missing.")

    def generate(self, request):
        self.calls.append(request)
        for index, fragment in enumerate(self.fragments):
            if index == self.fail_after:
                raise self.error
            yield fragment
        if self.fail_after == len(self.fragments):
            raise self.error


@pytest.fixture
def make_transport():
    return FakeTransport


RECORD_FRAGMENTS = [
    '{"title": "Hide Tanning with Dixie Brewer", ',
    '"slug": "hide-tanning-with-dixie-brewer", "series": "Thrive", ',
    '"tags": ["Culture", "Arts"], "subhead": "Traditional Arts and Crafts", ',
    '"summary": "Dixie Brewer teaches hide tanning.", ',
    '"description_html": "<p>Dixie <strong>demonstrates</strong> tanning.</p>", ',
    '"keywords": "hide tanning, thrive", "thumbnail_concept": "Dixie at a frame."}',
]


@pytest.fixture
def record_fragments():
    return list(RECORD_FRAGMENTS)
