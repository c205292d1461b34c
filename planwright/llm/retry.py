# planwright/llm/retry.py
"""Retry logic for LLM API calls with exponential backoff."""

import logging

import httpx
import openai
from ollama import ResponseError
from tenacity import (
    before_sleep_log,
    retry,
    retry_if_exception,
    stop_after_attempt,
    wait_exponential,
)

logger = logging.getLogger(__name__)

# Retryable HTTP status codes (transient errors)
RETRYABLE_STATUSES = {408, 429, 500, 502, 503, 504}


def is_retryable(exception: BaseException) -> bool:
    """
    Returns True if the exception should be retried.

    Retryable conditions:
    - ConnectionError / httpx transport errors (server unavailable)
    - openai connection, timeout, rate-limit and 5xx errors
    - ollama ResponseError with status in RETRYABLE_STATUSES
    """
    if isinstance(exception, (ConnectionError, httpx.TransportError)):
        return True

    if isinstance(exception, (openai.APIConnectionError, openai.APITimeoutError)):
        return True

    if isinstance(exception, openai.APIStatusError):
        return exception.status_code in RETRYABLE_STATUSES

    if isinstance(exception, ResponseError):
        return exception.status_code in RETRYABLE_STATUSES

    return False


# Tenacity retry decorator for LLM API calls
llm_retry = retry(
    stop=stop_after_attempt(3),
    wait=wait_exponential(multiplier=1, min=2, max=30),
    retry=retry_if_exception(is_retryable),
    before_sleep=before_sleep_log(logger, logging.WARNING),
    reraise=True,
)
