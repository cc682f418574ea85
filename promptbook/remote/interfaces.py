"""Messages exchanged with a remote promptbook server.

The transport (a persistent, ordered, bidirectional channel such as a
socket.io connection) is out of scope; these models only fix the shape of the
payloads and their JSON encoding.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from promptbook.models import Prompt


class RemoteExecutionRequest(BaseModel):
    """Request from a client asking the server to execute one prompt.

    The server answers on the same channel with progress messages addressed
    to ``client_id``.

    Attributes:
        client_id: Identity of the client responsible for the request.
        prompt: The prompt to execute.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    client_id: str = Field(alias="clientId")
    prompt: Prompt

    def to_json(self) -> str:
        """Encode as ``{"clientId": ..., "prompt": {...}}``."""
        return self.model_dump_json(by_alias=True)

    @classmethod
    def from_json(cls, payload: str | bytes) -> RemoteExecutionRequest:
        """Decode a JSON payload produced by ``to_json``.

        Raises:
            pydantic.ValidationError: If the payload has the wrong shape.
        """
        return cls.model_validate_json(payload)


__all__ = ["RemoteExecutionRequest"]
