from typing import Any

from pydantic import BaseModel


class ActionResponse(BaseModel):
    """What an action hands back to the agent runtime: a message plus structured content."""

    success: bool
    text: str
    content: dict[str, Any]

    @classmethod
    def ok(cls, text: str, content: dict[str, Any]) -> "ActionResponse":
        return cls(success=True, text=text, content=content)

    @classmethod
    def failure(cls, text: str, error: str) -> "ActionResponse":
        return cls(success=False, text=text, content={"error": error})
