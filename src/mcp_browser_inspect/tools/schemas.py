"""Argument models for the MCP tools."""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..actions.navigation import validate_url


class _ToolArgs(BaseModel):
    model_config = ConfigDict(extra="forbid")


class TakeSnapshotArgs(_ToolArgs):
    url: Optional[str] = Field(
        default=None,
        description="URL to navigate to before taking snapshot",
    )
    verbose: bool = Field(
        default=False,
        description="Include detailed accessibility information",
    )

    @field_validator("url")
    @classmethod
    def _check_url(cls, v: Optional[str]) -> Optional[str]:
        return None if v is None else validate_url(v)


class EvaluateScriptArgs(_ToolArgs):
    script: str = Field(
        min_length=1,
        description="JavaScript code to execute in the page context",
    )
    url: Optional[str] = Field(
        default=None,
        description="URL to navigate to before executing script",
    )

    @field_validator("url")
    @classmethod
    def _check_url(cls, v: Optional[str]) -> Optional[str]:
        return None if v is None else validate_url(v)


__all__ = ["TakeSnapshotArgs", "EvaluateScriptArgs"]
