import content_profile.prompt_composer as pc
from content_profile.prompts import DEFAULT_USER_PROMPT


def test_transcript_placeholder_replaced():
    request = pc.compose("Hello world", "", "sys", "Task: {{TRANSCRIPT}}")
    assert request.task == "Task: Hello world"
    assert request.instruction == "sys"


def test_both_placeholders_filled():
    request = pc.compose("the transcript", "  aired in May  ", "", "A {{CONTEXT}} B {{TRANSCRIPT}} C")
    assert request.task == (
        "A \n<additional_context>\naired in May\n</additional_context>\n B the transcript C"
    )
    assert "{{TRANSCRIPT}}" not in request.task
    assert "{{CONTEXT}}" not in request.task


def test_missing_transcript_placeholder_wraps_transcript():
    request = pc.compose("X", "", "", "Summarize this.")
    assert request.task == (
        "Here is the raw video transcript content:\n\n"
        "<transcript_content>\nX\n</transcript_content>\n\n"
        "Summarize this."
    )
    assert request.task.count("X") == 1


def test_missing_context_placeholder_splices_after_transcript_block():
    request = pc.compose("some words", "notes", "", DEFAULT_USER_PROMPT)
    close = request.task.index("</transcript_content>")
    assert request.task.index("<additional_context>") > close
    assert (
        "</transcript_content>\n\n<additional_context>\nnotes\n</additional_context>\n\n"
        in request.task
    )


def test_context_after_synthesised_transcript_block():
    request = pc.compose("t", "ctx", "", "Summarize.")
    assert request.task.index("<additional_context>") > request.task.index("</transcript_content>")
    assert request.task.endswith("Summarize.")


def test_context_prepended_without_transcript_block():
    request = pc.compose("t", "ctx", "", "Just {{TRANSCRIPT}}")
    assert request.task == "\n<additional_context>\nctx\n</additional_context>\n\n\nJust t"


def test_blank_context_adds_nothing():
    assert pc.compose("t", "   ", "", "{{CONTEXT}}{{TRANSCRIPT}}").task == "t"
    assert pc.build_context_block("") == ""


def test_transcript_inserted_verbatim():
    transcript = "She said {{CONTEXT}} costs $1 \\n {x} </transcript_content>"
    request = pc.compose(transcript, "c", "", DEFAULT_USER_PROMPT)
    assert transcript in request.task
    assert request.task.count("<additional_context>") == 1


def test_extra_placeholders_removed():
    request = pc.compose("t", "c", "", "{{TRANSCRIPT}} / {{TRANSCRIPT}} {{CONTEXT}}{{CONTEXT}}")
    assert request.task == "t /  \n<additional_context>\nc\n</additional_context>\n"


def test_token_formed_by_removal_is_removed_too():
    request = pc.compose("t", "", "", "{{TRANSCRIPT}} {{CONT{{CONTEXT}}EXT}} {{TRANS{{TRANSCRIPT}}CRIPT}}")
    assert request.task == "t  "


def test_nested_leftover_tokens_removed_after_context():
    request = pc.compose("t", "c", "", "{{CONTEXT}}{{TRANSCRIPT}}{{CONT{{CONTEXT}}EXT}}")
    assert request.task == "\n<additional_context>\nc\n</additional_context>\nt"
    assert "{{" not in request.task
