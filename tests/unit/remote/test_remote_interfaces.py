"""Unit tests for the remote execution request contract."""

from __future__ import annotations

import json

import pytest
from pydantic import ValidationError

from promptbook.models import ModelRequirements, Prompt
from promptbook.remote import RemoteExecutionRequest


@pytest.mark.unit
def test_request_round_trips_through_json(sample_prompt: Prompt) -> None:
    request = RemoteExecutionRequest(client_id="c1", prompt=sample_prompt)

    decoded = RemoteExecutionRequest.from_json(request.to_json())

    assert decoded == request
    assert decoded.client_id == "c1"
    assert decoded.prompt == sample_prompt


@pytest.mark.unit
def test_request_uses_camel_case_wire_format(sample_prompt: Prompt) -> None:
    payload = json.loads(
        RemoteExecutionRequest(client_id="c1", prompt=sample_prompt).to_json()
    )

    assert set(payload) == {"clientId", "prompt"}
    assert payload["clientId"] == "c1"
    assert payload["prompt"]["promptbookUrl"] == sample_prompt.promptbook_url
    assert payload["prompt"]["modelRequirements"]["modelVariant"] == "CHAT"


@pytest.mark.unit
def test_request_accepts_wire_payload() -> None:
    payload = {
        "clientId": "c2",
        "prompt": {
            "title": "Summarize",
            "content": "Summarize this",
            "modelRequirements": {"modelVariant": "COMPLETION"},
            "parameters": {},
        },
    }
    request = RemoteExecutionRequest.from_json(json.dumps(payload).encode("utf-8"))

    assert request.client_id == "c2"
    assert request.prompt.model_requirements == ModelRequirements(
        model_variant="COMPLETION"
    )


@pytest.mark.unit
@pytest.mark.parametrize(
    "payload",
    [
        '{"prompt": {"content": "x"}}',
        '{"clientId": "c1"}',
        '{"clientId": "c1", "prompt": {"title": "no content"}}',
        "not json",
    ],
)
def test_request_rejects_malformed_payloads(payload: str) -> None:
    with pytest.raises(ValidationError):
        RemoteExecutionRequest.from_json(payload)


@pytest.mark.unit
def test_request_is_immutable(sample_prompt: Prompt) -> None:
    request = RemoteExecutionRequest(client_id="c1", prompt=sample_prompt)
    with pytest.raises(ValidationError):
        request.client_id = "other"  # type: ignore[misc]
