import datetime

from content_profile.exports import document_export, raw_export, write_export
from content_profile.interpreter import ParsedRecord


def test_raw_export_is_byte_identical():
    export = raw_export('{"title": "Café"}', on=datetime.date(2024, 1, 15))
    assert export.filename == "content-profile-2024-01-15.json"
    assert export.content_type == "application/json"
    assert export.data == '{"title": "Café"}'.encode("utf-8")


def test_document_export_named_from_slug():
    export = document_export(ParsedRecord(slug="windstar-golf-course-renovation"))
    assert export.filename == "windstar-golf-course-renovation.rtf"
    assert export.content_type == "application/rtf"
    assert export.data.startswith(b"{\\rtf1")


def test_document_export_default_name():
    assert document_export(ParsedRecord()).filename == "content-profile.rtf"
    assert document_export(ParsedRecord(slug="../a b/c")).filename == "a-b-c.rtf"


def test_write_export(tmp_path):
    export = raw_export("{}", on=datetime.date(2024, 1, 15))
    path = write_export(export, tmp_path / "out")
    assert path == tmp_path / "out" / "content-profile-2024-01-15.json"
    assert path.read_bytes() == b"{}"
