# gradewise/services/calculator.py
from typing import Callable, Optional

from gradewise.exceptions import (
    GradewiseError,
    SuggestionFetchError,
    WeightSumError,
)
from gradewise.logging_config import app_logger
from gradewise.schema.grading import (
    ComponentInput,
    ComponentName,
    GradeRequest,
    GradeResult,
    SubmitState,
)
from gradewise.services import grading
from gradewise.services.suggestions.client import SuggestionClient

# Sentinel so set_component can tell "leave as is" from "clear to None"
_UNSET = object()


class CalculatorSession:
    """
    Form state plus the submit cycle of the grade calculator.

    Holds one result slot which each new cycle overwrites. A response that
    arrives for a cycle that has since been superseded (by another submit or
    a clear) is dropped.
    """

    def __init__(
        self,
        client: SuggestionClient,
        on_change: Optional[Callable[["CalculatorSession"], None]] = None,
    ):
        self.client = client
        self.on_change = on_change
        self.form = GradeRequest()
        self.state = SubmitState.IDLE
        self.result: Optional[GradeResult] = None
        self.suggestions: Optional[str] = None
        self.error: Optional[GradewiseError] = None
        self._cycle = 0

    @property
    def total_weight(self) -> float:
        return grading.total_weight(self.form)

    @property
    def is_loading(self) -> bool:
        return self.state in (
            SubmitState.COMPUTING,
            SubmitState.REQUESTING_SUGGESTIONS,
        )

    @property
    def can_submit(self) -> bool:
        return not self.is_loading and grading.validate(self.form).is_valid

    def set_component(self, name: ComponentName, weight=_UNSET, score=_UNSET) -> ComponentInput:
        """Update one component; pydantic rejects values outside [0, 100]."""
        component = self.form.component(name)
        if weight is not _UNSET:
            component.weight = weight
        if score is not _UNSET:
            component.score = score
        return component

    def clear_component(self, name: ComponentName) -> None:
        self.set_component(name, weight=None, score=None)

    def clear(self) -> None:
        """Reset every field and drop any result, including one in flight."""
        self._cycle += 1
        self.form = GradeRequest()
        self.result = None
        self.suggestions = None
        self.error = None
        self._transition(SubmitState.IDLE)

    async def submit(self) -> SubmitState:
        """
        Run one cycle: validate, compute, then ask for suggestions.

        Errors are surfaced on self.error rather than raised. A weight
        mismatch leaves the session Idle with nothing computed; a suggestion
        failure still ends in Done with the grade kept. While a request is
        in flight the call is ignored and the session is left untouched.
        """
        if self.is_loading:
            app_logger.debug(f"Ignoring submit, cycle {self._cycle} still running")
            return self.state

        check = grading.validate(self.form)
        if not check.is_valid:
            app_logger.warning(
                f"Refusing to compute grade, total weight is {check.total_weight}"
            )
            self.error = WeightSumError(check.total_weight, check.required_total)
            self._transition(SubmitState.IDLE)
            return self.state

        self._cycle += 1
        cycle = self._cycle
        # Snapshot so edits made while the request is in flight don't leak in
        form = self.form.model_copy(deep=True)

        self.result = None
        self.suggestions = None
        self.error = None
        self._transition(SubmitState.COMPUTING)

        self.result = grading.compute_grade(form)
        self._transition(SubmitState.REQUESTING_SUGGESTIONS)

        try:
            suggestions = await self.client.request_suggestions(
                self.result.final_grade, form
            )
        except SuggestionFetchError as e:
            if cycle != self._cycle:
                return self.state
            self.error = e
        else:
            if cycle != self._cycle:
                app_logger.debug(f"Dropping suggestions for stale cycle {cycle}")
                return self.state
            self.suggestions = suggestions

        self._transition(SubmitState.DONE)
        return self.state

    def _transition(self, state: SubmitState) -> None:
        app_logger.debug(f"Calculator cycle {self._cycle}: {self.state.value} -> {state.value}")
        self.state = state
        if self.on_change:
            self.on_change(self)
