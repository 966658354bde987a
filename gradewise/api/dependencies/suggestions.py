# gradewise/api/dependencies/suggestions.py
from functools import lru_cache

from gradewise.services.suggestions.client import SuggestionClient


@lru_cache
def get_suggestion_client() -> SuggestionClient:
    """Shared client for the configured chat model (override in tests)"""
    return SuggestionClient()
