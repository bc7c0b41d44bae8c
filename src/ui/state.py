"""Submission lifecycle state for the recommendation UI."""

from enum import Enum
from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field

from src.rendering import RenderedDocument, render

PENDING_MESSAGE = "AIが厳選中です…🍜"


class OutcomeStatus(str, Enum):
    """Lifecycle state of one recommendation request."""

    IDLE = "idle"
    PENDING = "pending"
    SUCCESS = "success"
    FAILURE = "failure"


class Idle(BaseModel):
    """Nothing submitted yet."""

    model_config = ConfigDict(frozen=True)

    status: Literal[OutcomeStatus.IDLE] = OutcomeStatus.IDLE


class Pending(BaseModel):
    """A request is in flight."""

    model_config = ConfigDict(frozen=True)

    status: Literal[OutcomeStatus.PENDING] = OutcomeStatus.PENDING
    sequence: int = Field(description="送信番号")
    message: str = Field(default=PENDING_MESSAGE, description="待機中メッセージ")


class Success(BaseModel):
    """The service answered with recommendation text."""

    model_config = ConfigDict(frozen=True)

    status: Literal[OutcomeStatus.SUCCESS] = OutcomeStatus.SUCCESS
    sequence: int = Field(description="送信番号")
    text: str = Field(description="レコメンド結果（マークダウン）")

    def render(self) -> RenderedDocument:
        """Render the result text into content blocks."""
        return render(self.text)


class Failure(BaseModel):
    """Validation or request failure with a user-facing reason."""

    model_config = ConfigDict(frozen=True)

    status: Literal[OutcomeStatus.FAILURE] = OutcomeStatus.FAILURE
    sequence: int = Field(description="送信番号")
    reason: str = Field(description="エラーメッセージ")
    error_kind: str = Field(description="エラー種別")


SubmissionOutcome = Annotated[
    Union[Idle, Pending, Success, Failure],
    Field(discriminator="status"),
]
