from pydantic import BaseModel, ConfigDict, Field, model_validator
from typing import Dict, List

# ------------------------------------------------------------
# AZ-204 objective groupings
# ------------------------------------------------------------
SKILL_AREAS = (
    "Develop Azure compute solutions",
    "Develop for Azure storage",
    "Implement Azure security",
    "Connect to and consume Azure services",
    "Monitor, troubleshoot, and optimize Azure solutions",
)

OPTIONS_PER_QUESTION = 4


# ------------------------------------------------------------
# Question model
# ------------------------------------------------------------
class Question(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: int
    topic: str                     # e.g. "App Service", "Functions"
    skill_area: str = Field(alias="skillArea")
    question: str
    options: List[str]
    answer: str                    # must equal one of `options`
    explanation: str

    @model_validator(mode="after")
    def check_invariants(self) -> "Question":
        for name in ("topic", "skill_area", "question", "answer", "explanation"):
            if not getattr(self, name).strip():
                raise ValueError(f"{name} must not be empty")

        if self.skill_area not in SKILL_AREAS:
            raise ValueError(f"unknown skill area: {self.skill_area!r}")

        if len(self.options) != OPTIONS_PER_QUESTION:
            raise ValueError(
                f"expected {OPTIONS_PER_QUESTION} options, got {len(self.options)}"
            )
        if any(not opt.strip() for opt in self.options):
            raise ValueError("options must be non-empty strings")
        if len(set(self.options)) != len(self.options):
            raise ValueError("options must be distinct")

        if self.answer not in self.options:
            raise ValueError(f"answer {self.answer!r} is not one of the options")
        return self

    def to_wire(self) -> Dict:
        """camelCase dict as served by the API."""
        return self.model_dump(by_alias=True)


# ------------------------------------------------------------
# Response models
# ------------------------------------------------------------
class EndpointMap(BaseModel):
    questions: str
    randomQuestion: str
    questionsByTopic: str
    health: str


class ApiInfo(BaseModel):
    message: str
    version: str
    endpoints: EndpointMap


class HealthResponse(BaseModel):
    status: str
    timestamp: str
    questionsCount: int


class ErrorResponse(BaseModel):
    error: str
