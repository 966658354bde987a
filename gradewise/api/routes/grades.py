# gradewise/api/routes/grades.py
from fastapi import APIRouter, Depends

from gradewise.exceptions import SuggestionFetchError, WeightSumError
from gradewise.schema.grading import (
    GradeRequest,
    GradeResponse,
    SubmissionData,
    SubmissionResponse,
    WeightCheckResponse,
)
from gradewise.services import grading
from gradewise.services.calculator import CalculatorSession
from gradewise.services.suggestions.client import SuggestionClient
from gradewise.api.dependencies.suggestions import get_suggestion_client

router = APIRouter(prefix="/grades")


@router.post("/weights", response_model=WeightCheckResponse)
async def check_weights(request: GradeRequest) -> WeightCheckResponse:
    """
    Report the current total weight and whether a grade can be computed.
    """
    check = grading.validate(request)
    return WeightCheckResponse(
        data=check,
        message="Weights are valid" if check.is_valid else (
            f"Total must be {check.required_total}% to calculate"
        ),
    )


@router.post("/", response_model=GradeResponse)
async def calculate_grade(request: GradeRequest) -> GradeResponse:
    """
    Compute the weighted final grade without asking for suggestions.
    Responds 422 when the weights do not add up to 100.
    """
    result = grading.compute_grade(request)
    return GradeResponse(data=grading.to_grade_data(result))


@router.post("/submit", response_model=SubmissionResponse)
async def submit_grade(
    request: GradeRequest,
    client: SuggestionClient = Depends(get_suggestion_client),
) -> SubmissionResponse:
    """
    Compute the grade and fetch grade-boost suggestions for it.

    A suggestion failure still returns the grade, with status false and no
    suggestions.
    """
    session = CalculatorSession(client)
    session.form = request
    await session.submit()

    if isinstance(session.error, WeightSumError):
        raise session.error

    data = SubmissionData(
        state=session.state,
        grade=grading.to_grade_data(session.result),
        suggestions=session.suggestions,
    )

    if isinstance(session.error, SuggestionFetchError):
        return SubmissionResponse.failure(
            "Could not fetch suggestions. Please try again.",
            "suggestion_fetch_failed",
            data=data,
            detail=str(session.error),
        )

    return SubmissionResponse(data=data)
