import pytest

import content_profile.main as main
from content_profile.config import Settings
from content_profile.pipeline import ContentProfiler
from content_profile.prompts import DEFAULT_USER_PROMPT


@pytest.fixture
def client():
    return main.app.test_client()


@pytest.fixture
def use_transport(monkeypatch):
    def install(transport):
        settings = Settings(api_key="k")
        monkeypatch.setattr(
            main, "build_profiler", lambda: ContentProfiler(transport=transport, settings=settings)
        )
        return transport

    return install


def test_generate_streams_fragments(client, use_transport, make_transport, record_fragments):
    transport = use_transport(make_transport(record_fragments))
    rv = client.post("/generate", json={"transcript": "words", "context": "aired in May"})
    assert rv.status_code == 200
    assert rv.mimetype == "text/plain"
    assert rv.get_data(as_text=True) == "".join(record_fragments)
    assert "aired in May" in transport.calls[0].task


def test_generate_rejects_empty_transcript(client, use_transport, make_transport):
    transport = use_transport(make_transport(["{}"]))
    rv = client.post("/generate", json={"transcript": "  "})
    assert rv.status_code == 400
    assert transport.calls == []


def test_generate_configuration_error(client, use_transport, make_transport):
    use_transport(make_transport(["{}"], configured=False))
    rv = client.post("/generate", json={"transcript": "words"})
    assert rv.status_code == 500
    assert rv.get_data(as_text=True) == "API Key is missing."


def test_generate_stream_stops_on_transport_error(client, use_transport, make_transport):
    use_transport(make_transport(["one", "two"], fail_after=1))
    rv = client.post("/generate", json={"transcript": "words"})
    assert rv.get_data(as_text=True) == "one"


def test_generate_without_streaming(client, use_transport, make_transport, record_fragments):
    use_transport(make_transport(record_fragments))
    rv = client.post("/generate", json={"transcript": "words", "stream": False})
    assert rv.status_code == 200
    body = rv.get_json()
    assert body["status"] == "parsed"
    assert body["record"]["title"] == "Hide Tanning with Dixie Brewer"
    assert body["error"] is None


def test_generate_without_streaming_reports_error(client, use_transport, make_transport):
    use_transport(make_transport(["{"], fail_after=1))
    rv = client.post("/generate", json={"transcript": "words", "stream": False})
    assert rv.status_code == 500
    body = rv.get_json()
    assert body["raw"] == "{"
    assert body["error"] == "connection reset"


def test_document_from_raw_output(client, record_fragments):
    rv = client.post("/document", json={"raw": "".join(record_fragments)})
    assert rv.status_code == 200
    assert rv.mimetype == "application/rtf"
    assert 'filename="hide-tanning-with-dixie-brewer.rtf"' in rv.headers["Content-Disposition"]
    assert rv.data.startswith(b"{\\rtf1")


def test_document_from_record(client):
    rv = client.post("/document", json={"title": "Te Ata"})
    assert rv.status_code == 200
    assert 'filename="content-profile.rtf"' in rv.headers["Content-Disposition"]


def test_document_rejects_invalid_raw(client):
    assert client.post("/document", json={"raw": '{"title": '}).status_code == 422
    assert client.post("/document", json=[1, 2]).status_code == 400


def test_prompts(client):
    body = client.get("/prompts").get_json()
    assert body["user_prompt"] == main.settings.user_prompt
    assert "{{TRANSCRIPT}}" in DEFAULT_USER_PROMPT


@pytest.mark.parametrize(
    "body, field",
    [
        ({"transcript": 5}, "transcript"),
        ({"transcript": ["words"]}, "transcript"),
        ({"transcript": "words", "context": 3}, "context"),
        ({"transcript": "words", "user_prompt": {"text": "x"}, "stream": False}, "user_prompt"),
    ],
)
def test_generate_rejects_non_text_fields(client, use_transport, make_transport, body, field):
    transport = use_transport(make_transport(["{}"]))
    rv = client.post("/generate", json=body)
    assert rv.status_code == 400
    assert field in rv.get_data(as_text=True)
    assert transport.calls == []


def test_generate_json_reports_empty_output(client, use_transport, make_transport):
    use_transport(make_transport([]))
    rv = client.post("/generate", json={"transcript": "words", "stream": False})
    assert rv.status_code == 500
    body = rv.get_json()
    assert body["error"] == "The model returned no output."
    assert body["status"] == "raw"
