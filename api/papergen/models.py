from __future__ import annotations

from dataclasses import dataclass
from typing import Any, List, Optional

import azure.functions as func  # type: ignore
from pydantic import BaseModel, ConfigDict, Field, model_validator


@dataclass
class GenerateRequest:
    method: str
    blueprint: Any = None

    @classmethod
    def from_http(cls, req: func.HttpRequest) -> "GenerateRequest":  # type: ignore
        method = (req.method or "").upper()
        try:
            body = req.get_json()
        except ValueError:
            body = None
        blueprint = body.get("blueprint") if isinstance(body, dict) else None
        return cls(method=method, blueprint=blueprint)


# Schema of the paper the system prompt asks for. Extra keys the model adds
# are tolerated; only strict validation mode consults these models.


class Question(BaseModel):
    model_config = ConfigDict(extra="allow")

    q_num: int
    question: str
    options: Optional[List[str]] = None
    answer: Any = None
    marks: int


class Section(BaseModel):
    model_config = ConfigDict(extra="allow")

    title: str
    marks: int
    questions: List[Question]


class PaperMetadata(BaseModel):
    model_config = ConfigDict(extra="allow", populate_by_name=True)

    board: Optional[str] = None
    class_: Optional[Any] = Field(default=None, alias="class")
    subject: Optional[str] = None
    topic: Optional[str] = None
    difficulty: Optional[str] = None
    language: Optional[str] = None
    time: Optional[int] = None
    totalMarks: int


class QuestionPaper(BaseModel):
    model_config = ConfigDict(extra="allow")

    metadata: PaperMetadata
    sections: List[Section]

    @model_validator(mode="after")
    def check_numbering_and_marks(self) -> "QuestionPaper":
        numbers = [q.q_num for section in self.sections for q in section.questions]
        if numbers != list(range(1, len(numbers) + 1)):
            raise ValueError(f"q_num must run 1..{len(numbers)} across sections, got {numbers}")
        section_total = sum(section.marks for section in self.sections)
        if section_total != self.metadata.totalMarks:
            raise ValueError(
                f"section marks add up to {section_total}, metadata.totalMarks is {self.metadata.totalMarks}"
            )
        return self
