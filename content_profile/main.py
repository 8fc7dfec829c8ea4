"""
HTTP entrypoint.

Routes:

* ``POST /generate`` – body ``{"transcript", "context", "system_prompt",
  "user_prompt"}``.  Streams the model output as plain text.  Send
  ``"stream": false`` to get a single JSON response with the raw text, the
  parsed record and any error instead.
* ``POST /document`` – body ``{"raw": "<model output>"}`` or the record
  itself.  Returns the RTF document as an attachment named after the slug.
* ``GET /prompts`` – the configured default templates.

Environment variables are described in :mod:`content_profile.config`.
"""

import json
import logging

from flask import Flask, Response, jsonify, request, stream_with_context

from .config import Settings
from .errors import ConfigurationError, EmptyTranscriptError, TransportError
from .exports import document_export
from .interpreter import ParsedRecord, parse_record
from .pipeline import ContentProfiler

logging.basicConfig(level=logging.INFO, format="%(message)s")

app = Flask(__name__)
settings = Settings.from_env()

TEXT_FIELDS = ("transcript", "context", "system_prompt", "user_prompt")


def build_profiler() -> ContentProfiler:
    return ContentProfiler(settings=settings)


def _stream_fragments(fragments):
    received = 0
    try:
        for fragment in fragments:
            received += len(fragment)
            yield fragment
    except TransportError as exc:
        logging.error(
            json.dumps({"event": "transport_error", "received": received, "error": str(exc)})
        )
        return
    logging.info(json.dumps({"event": "stream_complete", "received": received}))


def _generate_json(profiler: ContentProfiler, data: dict):
    result = profiler.generate(
        data["transcript"],
        data.get("context") or "",
        data.get("system_prompt"),
        data.get("user_prompt"),
    )
    body = {
        "raw": result.raw,
        "status": result.interpretation.status,
        "record": result.record.to_dict() if result.record else None,
        "error": result.error,
    }
    return jsonify(body), 200 if result.ok else 500


@app.route("/generate", methods=["POST"])
def generate():
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        data = {}
    invalid = [
        name for name in TEXT_FIELDS
        if data.get(name) is not None and not isinstance(data[name], str)
    ]
    if invalid:
        logging.info(json.dumps({"event": "invalid_fields", "fields": invalid}))
        return f"Expected text for: {', '.join(invalid)}", 400
    transcript = data.get("transcript") or ""
    if not transcript.strip():
        logging.info(json.dumps({"event": "empty_transcript"}))
        return str(EmptyTranscriptError()), 400

    profiler = build_profiler()
    logging.info(
        json.dumps(
            {
                "event": "generate",
                "transcript_chars": len(transcript),
                "has_context": bool((data.get("context") or "").strip()),
            }
        )
    )
    if data.get("stream") is False:
        return _generate_json(profiler, data)

    composed = profiler.compose(
        transcript,
        data.get("context") or "",
        data.get("system_prompt"),
        data.get("user_prompt"),
    )
    try:
        fragments = profiler.aggregator.stream(composed)
    except ConfigurationError as exc:
        logging.error(json.dumps({"event": "config_error"}))
        return str(exc), 500
    return Response(
        stream_with_context(_stream_fragments(fragments)),
        mimetype="text/plain",
    )


@app.route("/document", methods=["POST"])
def document():
    data = request.get_json(silent=True)
    if not isinstance(data, dict) or not data:
        return "Expected a JSON object", 400

    if "raw" in data:
        raw = data["raw"]
        record = parse_record(raw) if isinstance(raw, str) else None
        if record is None:
            logging.info(json.dumps({"event": "invalid_json"}))
            return "Invalid JSON format. Download the raw output instead.", 422
    else:
        record = ParsedRecord.from_dict(data)

    export = document_export(record)
    logging.info(json.dumps({"event": "document", "file": export.filename}))
    return Response(
        export.data,
        mimetype=export.content_type,
        headers={"Content-Disposition": f'attachment; filename="{export.filename}"'},
    )


@app.route("/prompts", methods=["GET"])
def prompts():
    return jsonify(
        {
            "system_prompt": settings.system_prompt,
            "user_prompt": settings.user_prompt,
        }
    )


if __name__ == "__main__":
    app.run(host="0.0.0.0", port=settings.port)
