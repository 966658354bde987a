# gradewise/schema/grading.py
from enum import Enum
from typing import Annotated, Dict, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from gradewise.exceptions import REQUIRED_TOTAL_WEIGHT
from gradewise.schema.base import BaseResponse

# Keep whole numbers as ints so they read back the way they were entered
Number = Union[int, float]
Percentage = Union[
    Annotated[int, Field(ge=0, le=100)],
    Annotated[float, Field(ge=0, le=100)],
]


class ComponentName(str, Enum):
    HOMEWORK = "homework"
    MIDTERM = "midterm"
    FINAL_EXAM = "final_exam"

    @property
    def label(self) -> str:
        return self.value.replace("_", " ").title()


class GradeLabel(str, Enum):
    EXCELLENT = "Excellent"
    GREAT_JOB = "Great Job"
    GOOD = "Good"
    NEEDS_IMPROVEMENT = "Needs Improvement"


class ComponentInput(BaseModel):
    """
    Form state for one graded component.

    None means the field has not been filled in yet, which is kept
    distinct from an explicit 0 until the grade is computed.
    """
    weight: Optional[Percentage] = None
    score: Optional[Percentage] = None

    model_config = ConfigDict(validate_assignment=True)

    @property
    def is_empty(self) -> bool:
        return self.weight is None and self.score is None


class GradeRequest(BaseModel):
    """The three components collected from the form"""
    homework: ComponentInput = Field(default_factory=ComponentInput)
    midterm: ComponentInput = Field(default_factory=ComponentInput)
    final_exam: ComponentInput = Field(default_factory=ComponentInput)

    def component(self, name: ComponentName) -> ComponentInput:
        return getattr(self, ComponentName(name).value)

    @property
    def total_weight(self) -> Number:
        return sum(
            self.component(name).weight or 0 for name in ComponentName
        )


class ComponentScore(BaseModel):
    """A component with absent values coerced to zero"""
    weight: Number
    score: Number

    model_config = ConfigDict(frozen=True)

    @classmethod
    def from_input(cls, component: ComponentInput) -> "ComponentScore":
        return cls(weight=component.weight or 0, score=component.score or 0)


class GradeResult(BaseModel):
    final_grade: float
    label: GradeLabel
    homework: ComponentScore
    midterm: ComponentScore
    final_exam: ComponentScore

    model_config = ConfigDict(frozen=True)

    def component(self, name: ComponentName) -> ComponentScore:
        return getattr(self, ComponentName(name).value)


class WeightCheck(BaseModel):
    total_weight: Number
    required_total: int = REQUIRED_TOTAL_WEIGHT
    is_valid: bool


class SubmitState(str, Enum):
    IDLE = "idle"
    COMPUTING = "computing"
    REQUESTING_SUGGESTIONS = "requesting_suggestions"
    DONE = "done"


# Models for API Responses
class GradeData(BaseModel):
    final_grade: float
    display_grade: str
    label: GradeLabel
    total_weight: Number
    components: Dict[ComponentName, ComponentScore]


class GradeResponse(BaseResponse[GradeData]):
    pass


class WeightCheckResponse(BaseResponse[WeightCheck]):
    pass


class SubmissionData(BaseModel):
    state: SubmitState
    grade: Optional[GradeData] = None
    suggestions: Optional[str] = None


class SubmissionResponse(BaseResponse[SubmissionData]):
    pass
