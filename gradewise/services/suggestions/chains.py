# gradewise/services/suggestions/chains.py
from typing import List, Optional

from langchain_core.messages import BaseMessage
from langchain_core.output_parsers import StrOutputParser
from langchain_core.prompts import ChatPromptTemplate
from langchain_core.runnables import Runnable
from langchain_openai import ChatOpenAI

from gradewise.schema.suggestions import SuggestionRequest
from gradewise.settings import settings


SYSTEM_PROMPT = (
    "You are an AI assistant that provides personalized suggestions to "
    "students on how to improve their grades based on their performance in "
    "different components of the course."
)

GRADE_BOOST_PROMPT = """Based on the final grade and the weights and scores of homework, midterms, and final exam, provide specific and actionable suggestions to the student.

Final Grade: {final_grade}
Homework Weight: {homework_weight}
Midterm Weight: {midterm_weight}
Final Exam Weight: {final_exam_weight}
Homework Score: {homework_score}
Midterm Score: {midterm_score}
Final Exam Score: {final_exam_score}

Respond with a JSON object that has exactly one key, "suggestions", whose value is the suggestions as a single string.

Suggestions:
"""

grade_boost_prompt = ChatPromptTemplate.from_messages(
    [
        ("system", SYSTEM_PROMPT),
        ("human", GRADE_BOOST_PROMPT),
    ]
)


def create_chat_model() -> ChatOpenAI:
    """Initialize ChatGPT model"""
    return ChatOpenAI(
        model=settings.OPENAI_MODEL,
        temperature=settings.OPENAI_TEMPERATURE,
        api_key=settings.OPENAI_API_KEY,
    )


def render_prompt(request: SuggestionRequest) -> List[BaseMessage]:
    """Fill the grade-boost template with the request values"""
    return grade_boost_prompt.format_messages(**request.model_dump())


def create_suggestion_chain(
    chat_model: Optional[Runnable] = None,
) -> Runnable:
    """Create chain for grade-boost suggestions, returning the raw reply text"""
    chat = chat_model if chat_model is not None else create_chat_model()
    return grade_boost_prompt | chat | StrOutputParser()
