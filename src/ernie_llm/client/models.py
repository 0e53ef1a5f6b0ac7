from __future__ import annotations

"""Wire types for the Wenxin Workshop chat and embedding endpoints."""

from typing import List, Optional

from pydantic import BaseModel, Field


class Message(BaseModel):
    role: str  # 'user' or 'assistant'
    content: str


class CompletionRequest(BaseModel):
    messages: List[Message]
    temperature: Optional[float] = None
    top_p: Optional[float] = None
    penalty_score: Optional[float] = None
    stream: bool = False
    user_id: Optional[str] = None

    def to_payload(self) -> dict:
        return self.model_dump(exclude_none=True)


class Usage(BaseModel):
    prompt_tokens: int = 0
    completion_tokens: int = 0
    total_tokens: int = 0


class Completion(BaseModel):
    id: str = ""
    object: str = ""
    created: int = 0
    sentence_id: int = 0
    is_end: bool = False
    is_truncated: bool = False
    result: str = ""
    need_clear_history: bool = False
    usage: Usage = Field(default_factory=Usage)
    error_code: int = 0
    error_msg: str = ""


class EmbeddingData(BaseModel):
    object: str = ""
    embedding: List[float] = Field(default_factory=list)
    index: int = 0


class EmbeddingResponse(BaseModel):
    id: str = ""
    object: str = ""
    created: int = 0
    data: List[EmbeddingData] = Field(default_factory=list)
    usage: Usage = Field(default_factory=Usage)
    error_code: int = 0
    error_msg: str = ""
