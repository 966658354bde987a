# gradewise/schema/suggestions.py
from pydantic import BaseModel, ConfigDict, Field, field_validator

from gradewise.schema.grading import Number


class SuggestionRequest(BaseModel):
    """Values interpolated into the grade-boost prompt"""
    final_grade: Number = Field(description="The final calculated grade of the student.")
    homework_weight: Number = Field(description="The weight of the homework component.")
    homework_score: Number = Field(description="The score of the homework component.")
    midterm_weight: Number = Field(description="The weight of the midterm component.")
    midterm_score: Number = Field(description="The score of the midterm component.")
    final_exam_weight: Number = Field(description="The weight of the final exam component.")
    final_exam_score: Number = Field(description="The score of the final exam component.")

    model_config = ConfigDict(frozen=True)


class GradeBoostSuggestions(BaseModel):
    """Shape the model must answer with"""
    suggestions: str = Field(description="Personalized suggestions to improve the grade.")

    @field_validator("suggestions")
    @classmethod
    def require_text(cls, suggestions: str) -> str:
        if not suggestions.strip():
            raise ValueError("suggestions must not be blank")
        return suggestions
