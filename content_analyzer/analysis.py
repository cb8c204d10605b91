"""
Gemini analysis client.

Sends the analysis prompt to a Gemini model and turns the free-form reply
into an AnalysisResult dict. The reply is expected to contain a JSON object;
the object is located with a greedy match from the first '{' to the last '}'.

Parse policy:
- A reply without a parseable JSON object is NOT an error. It degrades to
  a fixed fallback result whose summary is the start of the raw reply.
- Only a failure of the API call itself raises (AnalysisApiError).
"""

import json
import logging
import re
from typing import Any, Dict, Optional

import google.generativeai as genai

from .errors import AnalysisApiError

logger = logging.getLogger(__name__)

DEFAULT_MODEL = 'gemini-2.0-flash'
FALLBACK_SUMMARY_LENGTH = 500

_JSON_OBJECT_RE = re.compile(r'\{[\s\S]*\}')


def _reject_constant(name: str):
    raise ValueError(f'Non-standard JSON constant: {name}')


def fallback_analysis(raw_text: str) -> Dict[str, Any]:
    """Build the fixed AnalysisResult used when the reply has no usable JSON."""
    return {
        'themes': ['Content Analysis'],
        'sentiment': {
            'overall': 'neutral',
            'tone': 'informative',
            'confidence': 'medium',
        },
        'summary': (raw_text or '')[:FALLBACK_SUMMARY_LENGTH] + '...',
        'keyInsights': ['Analysis completed successfully'],
        'intentions': ['Information sharing'],
        'targetAudience': 'General audience',
        'contentType': 'Web content',
        'expertise': 'Standard',
        'actionablePoints': ['Review the analyzed content'],
    }


def parse_analysis_response(raw_text: str) -> Dict[str, Any]:
    """
    Extract the AnalysisResult from a raw model reply.

    Args:
        raw_text: Free-form text returned by the model

    Returns:
        The parsed JSON object, or the fallback result when no JSON object
        can be found or decoded
    """
    match = _JSON_OBJECT_RE.search(raw_text or '')
    if not match:
        logger.error("No valid JSON found in model response")
        logger.info("Raw response: %s", raw_text)
        return fallback_analysis(raw_text)

    try:
        parsed = json.loads(match.group(), parse_constant=_reject_constant)
    except ValueError as e:
        logger.error("Error parsing JSON: %s", e)
        logger.info("Raw response: %s", raw_text)
        return fallback_analysis(raw_text)

    return parsed


class AnalysisClient:
    """
    Thin wrapper around a Gemini GenerativeModel.

    The model is built once and shared across requests; it holds no
    per-request state.
    """

    def __init__(self, api_key: Optional[str], model_name: str = DEFAULT_MODEL,
                 timeout: Optional[float] = None):
        self.model_name = model_name
        self.timeout = timeout
        self._model = None
        if api_key:
            genai.configure(api_key=api_key)
            self._model = genai.GenerativeModel(model_name)

    @property
    def configured(self) -> bool:
        return self._model is not None

    def generate(self, prompt: str) -> str:
        """
        Send the prompt and return the raw reply text.

        Raises:
            AnalysisApiError: missing credential, or the API call failed
        """
        if self._model is None:
            raise AnalysisApiError('GEMINI_API_KEY not configured')

        request_options = {'timeout': self.timeout} if self.timeout else None
        try:
            response = self._model.generate_content(prompt, request_options=request_options)
            # .text raises ValueError when the reply was blocked or empty
            text = response.text
        except Exception as e:
            raise AnalysisApiError(f'Gemini API error: {e}') from e

        logger.info("Gemini API response received")
        return text

    def analyze(self, prompt: str) -> Dict[str, Any]:
        return parse_analysis_response(self.generate(prompt))
