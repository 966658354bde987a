# gradewise/services/grading.py
"""
Weighted grade computation.

Everything here is pure: no I/O and no state. Ranges are enforced by the
ComponentInput model at the boundary, so the functions below trust the
values they are given.
"""
from gradewise.exceptions import REQUIRED_TOTAL_WEIGHT, WeightSumError
from gradewise.schema.grading import (
    ComponentName,
    ComponentScore,
    GradeData,
    GradeLabel,
    GradeRequest,
    GradeResult,
    WeightCheck,
)

# Highest threshold first
GRADE_BANDS = (
    (90, GradeLabel.EXCELLENT),
    (80, GradeLabel.GREAT_JOB),
    (70, GradeLabel.GOOD),
)


def total_weight(request: GradeRequest) -> float:
    """Sum of the component weights, counting absent ones as 0."""
    return request.total_weight


def validate(request: GradeRequest) -> WeightCheck:
    """Check that the weights add up to exactly 100 (no tolerance)."""
    total = total_weight(request)
    return WeightCheck(
        total_weight=total,
        required_total=REQUIRED_TOTAL_WEIGHT,
        is_valid=total == REQUIRED_TOTAL_WEIGHT,
    )


def ensure_valid(request: GradeRequest) -> WeightCheck:
    check = validate(request)
    if not check.is_valid:
        raise WeightSumError(check.total_weight, check.required_total)
    return check


def classify(final_grade: float) -> GradeLabel:
    for threshold, label in GRADE_BANDS:
        if final_grade >= threshold:
            return label
    return GradeLabel.NEEDS_IMPROVEMENT


def compute_grade(request: GradeRequest) -> GradeResult:
    """
    Compute the weighted final grade.

    Raises WeightSumError when the weights do not total 100. Weights are
    never rescaled to make them fit. No rounding is applied.
    """
    ensure_valid(request)

    components = {
        name.value: ComponentScore.from_input(request.component(name))
        for name in ComponentName
    }
    final_grade = sum(
        comp.score * (comp.weight / 100) for comp in components.values()
    )

    return GradeResult(
        final_grade=final_grade,
        label=classify(final_grade),
        **components,
    )


def format_grade(final_grade: float) -> str:
    """Display form of a grade, one decimal place."""
    return f"{final_grade:.1f}"


def to_grade_data(result: GradeResult) -> GradeData:
    return GradeData(
        final_grade=result.final_grade,
        display_grade=format_grade(result.final_grade),
        label=result.label,
        total_weight=sum(
            result.component(name).weight for name in ComponentName
        ),
        components={name: result.component(name) for name in ComponentName},
    )
