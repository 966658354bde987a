# gradewise/services/suggestions/client.py
import asyncio

from typing import Optional

from langchain_core.runnables import Runnable
from langchain_core.utils.json import parse_json_markdown

from gradewise.exceptions import SuggestionFetchError
from gradewise.logging_config import app_logger
from gradewise.schema.grading import GradeRequest
from gradewise.schema.suggestions import GradeBoostSuggestions, SuggestionRequest
from gradewise.services.suggestions.chains import create_suggestion_chain
from gradewise.settings import settings


def build_suggestion_request(
    final_grade: float,
    request: GradeRequest,
) -> SuggestionRequest:
    """
    Build the seven prompt values from a computed grade and its inputs.

    Absent weights and scores are sent as 0, the model never sees a
    missing value.
    """
    return SuggestionRequest(
        final_grade=final_grade,
        homework_weight=request.homework.weight or 0,
        homework_score=request.homework.score or 0,
        midterm_weight=request.midterm.weight or 0,
        midterm_score=request.midterm.score or 0,
        final_exam_weight=request.final_exam.weight or 0,
        final_exam_score=request.final_exam.score or 0,
    )


def parse_suggestions(response: str) -> GradeBoostSuggestions:
    """Validate the model reply, which may be wrapped in a markdown fence"""
    return GradeBoostSuggestions.model_validate(parse_json_markdown(response))


class SuggestionClient:
    """
    Single round trip to the grade-boost model.

    Any LangChain chat model (or runnable taking a prompt value) can be
    passed in; the configured OpenAI model is used otherwise.
    """

    def __init__(
        self,
        chat_model: Optional[Runnable] = None,
        timeout: Optional[float] = settings.SUGGESTION_TIMEOUT_SECONDS,
    ):
        self.chat_model = chat_model
        self.timeout = timeout or None
        self._chain: Optional[Runnable] = None

    @property
    def chain(self) -> Runnable:
        # Built on first use so a misconfigured model fails inside the call
        if self._chain is None:
            self._chain = create_suggestion_chain(self.chat_model)
        return self._chain

    async def request_suggestions(
        self,
        final_grade: float,
        request: GradeRequest,
    ) -> str:
        """
        Ask the model for grade-boost suggestions.

        Returns the suggestions text. Raises SuggestionFetchError on any
        failure, including a reply that is not {"suggestions": "<text>"}.
        There are no retries.
        """
        payload = build_suggestion_request(final_grade, request)
        app_logger.debug(f"Requesting suggestions: {payload.model_dump_json()}")

        try:
            response = await asyncio.wait_for(
                self.chain.ainvoke(payload.model_dump()),
                timeout=self.timeout,
            )
            result = parse_suggestions(response)
        except Exception as e:
            app_logger.exception(f"Error fetching suggestions: {e!r}")
            raise SuggestionFetchError() from e

        return result.suggestions
