"""Shared models for aicommit."""
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Tuple

from pydantic import BaseModel, Field


@dataclass
class CommandInvocation:
    """Options taken from the command line for one run."""
    language: Optional[str] = None
    notes: str = ""
    unknown_args: Tuple[str, ...] = field(default_factory=tuple)

    @property
    def show_help(self) -> bool:
        return bool(self.unknown_args)


class ChatMessage(BaseModel):
    role: str
    content: str


class CompletionRequest(BaseModel):
    model: str
    messages: List[ChatMessage]
    max_tokens: int
    temperature: float


class CompletionMessage(BaseModel):
    role: Optional[str] = None
    content: Optional[str] = None


class CompletionChoice(BaseModel):
    message: CompletionMessage = Field(default_factory=CompletionMessage)


class CompletionError(BaseModel):
    message: str = Field(default="", description="Error reported by the endpoint")


class CompletionResponse(BaseModel):
    choices: List[CompletionChoice] = Field(default_factory=list)
    error: Optional[CompletionError] = None


class PipelineOutcome(str, Enum):
    NO_CHANGES = "no_changes"
    COMMITTED = "committed"


class PipelineResult(BaseModel):
    outcome: PipelineOutcome
    message: Optional[str] = None
