from typing import List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

Score = Union[int, float]


class Message(BaseModel):
    role: Literal["system", "user", "assistant"]
    content: str


class CompletionRequest(BaseModel):
    model_config = ConfigDict(frozen=True)

    messages: List[Message]
    max_output_tokens: int = Field(gt=0)
    temperature: float


class CompletionResult(BaseModel):
    text: str


class JudgeScore(BaseModel):
    # Model output must already be well typed: no "80" -> 80, no true -> 1.
    model_config = ConfigDict(strict=True)

    content: Score = Field(ge=0, le=100)
    style: Score = Field(ge=0, le=100)
    strategy: Score = Field(ge=0, le=100)
    comments: str


# ---- Request bodies ----
# Field names follow the client's camelCase JSON keys.

class DebateRequest(BaseModel):
    motion: str = ""
    role: str = ""
    messages: List[Message] = []
    systemPrompt: Optional[str] = None
    maxTokens: int = Field(default=500, gt=0)
    temperature: float = 0.8


class TopicKnowledgeRequest(BaseModel):
    motion: str = ""


class PrepMaterialsRequest(BaseModel):
    motion: str = ""
    userTeam: str = ""
    format: str = ""


class SpeechRequest(BaseModel):
    motion: str = ""
    speakerRole: str = ""
    speechType: str = ""
    teamSide: str = ""
    format: str = ""
    debateHistory: str = ""
    difficulty: str = ""


class JudgeSpeechRequest(BaseModel):
    speaker: str = ""
    speechType: str = ""
    content: str = ""


class FinalRfdRequest(BaseModel):
    motion: str = ""
    format: str = ""
    allSpeeches: str = ""


# ---- Response bodies ----

class DebateReply(BaseModel):
    reply: str


class TopicKnowledge(BaseModel):
    knowledge: str


class PrepMaterials(BaseModel):
    materials: str


class GeneratedSpeech(BaseModel):
    speech: str


class FinalRfd(BaseModel):
    rfd: str
