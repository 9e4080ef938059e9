"""
Nutrition AI Service

Asks the hosted Gemini model to estimate nutrition facts for a meal given
as free text or as a photo, then normalizes the reply. Any failure along
the way (API error, empty reply, unparseable JSON, wrong structure) is
raised as a single AIAnalysisError.
"""

import json
import logging
import re
from functools import partial
from typing import Any, Dict, Optional

from flask import current_app
from google import genai
from google.genai import types

from nutrition_tracker.services.nutrition_normalizer import check_url, normalize_analysis

logger = logging.getLogger(__name__)

SYSTEM_PROMPT = (
    "You are a nutrition expert that provides accurate nutritional information "
    "in JSON format only."
)

REPLY_SCHEMA = """{
  "food_name": "brief, clear description of the food. If multiple items, combine them.",
  "meal_type": "breakfast" or "lunch" or "dinner" or "snack",
  "suggestions": ["2-3 personalized suggestions"],
  "confidence": "high" or "medium" or "low",
  "source_analysis": [
    {
      "item": "Specific Food Item Name (e.g. 'Raw Spinach')",
      "sources": [
        {
          "url": "full_url_string",
          "reason": "Why this link?",
          "type": "official" or "database" or "search" or "estimate"
        }
      ],
      "methodology": "Explanation of portion size assumption and data source.",
      "nutrition": {
        "calories": number,
        "protein": number,
        "carbs": number,
        "fat": number,
        "cholesterol": number (optional),
        "sodium": number (optional),
        "sugar": number (optional)
      },
      "confidence": "high" or "medium" or "low",
      "status": "Exact" or "Estimate"
    }
  ]
}"""

GUIDELINES = """Guidelines for Sources:
- PRIORITY 1: Specific Product Pages. Try to provide the direct URL to the official product page or database entry.
- PRIORITY 2: Search Fallback. If a direct link isn't certain, use a Google Search query: "https://www.google.com/search?q=site:domain+item+nutrition".
- Diversity: Provide up to 3 different sources per item.

Guidelines for Item Breakdown:
- Break down the meal into individual ingredients or distinct components.
- Estimate specific portion sizes for each component.

CRITICAL: Return ONLY the JSON object."""

_FENCE_RE = re.compile(r"```(?:json)?\s*", re.IGNORECASE)


class AIAnalysisError(Exception):
    """The model could not produce a usable nutrition analysis."""


def _goal_lines(goals: Optional[Dict[str, Any]]) -> str:
    if not goals:
        return ""
    lines = [
        "User's nutrition goals:",
        f"- Calories: {goals.get('calorie_goal')} kcal/day",
        f"- Protein: {goals.get('protein_goal')}g/day",
        f"- Carbs: {goals.get('carbs_goal')}g/day",
        f"- Fat: {goals.get('fat_goal')}g/day",
    ]
    if goals.get("cholesterol_goal"):
        lines.append(f"- Cholesterol: {goals['cholesterol_goal']}mg/day")
    if goals.get("sodium_goal"):
        lines.append(f"- Sodium: {goals['sodium_goal']}mg/day")
    if goals.get("sugar_goal"):
        lines.append(f"- Sugar: {goals['sugar_goal']}g/day")
    return "\n".join(lines) + "\n\n"


def build_text_prompt(food_description: str, goals: Optional[Dict[str, Any]]) -> str:
    return (
        "You are a nutrition expert. Analyze the following food description and "
        "return ONLY a JSON object with nutrition information.\n\n"
        f'Food description: "{food_description}"\n\n'
        f"{_goal_lines(goals)}"
        f"Return this exact JSON structure:\n{REPLY_SCHEMA}\n\n"
        f"{GUIDELINES}"
    )


def build_image_prompt(goals: Optional[Dict[str, Any]]) -> str:
    return (
        "You are a nutrition expert. Identify every food and drink visible in the "
        "attached photo, estimate the portion sizes, and return ONLY a JSON object "
        "with nutrition information.\n\n"
        f"{_goal_lines(goals)}"
        f"Return this exact JSON structure:\n{REPLY_SCHEMA}\n\n"
        f"{GUIDELINES}"
    )


def parse_reply(content: str) -> Dict[str, Any]:
    """
    Parse a model reply that should hold one JSON object, possibly wrapped in
    a markdown code fence or surrounded by prose.
    """
    cleaned = _FENCE_RE.sub("", (content or "").strip()).strip()
    try:
        return json.loads(cleaned)
    except json.JSONDecodeError:
        start, end = cleaned.find("{"), cleaned.rfind("}")
        if start == -1 or end <= start:
            raise
        return json.loads(cleaned[start:end + 1])


def generate_reply(prompt: str, image_bytes: Optional[bytes] = None, mime_type: str = "image/jpeg") -> str:
    """Send the prompt (and optional image) to Gemini and return the reply text."""
    api_key = current_app.config.get("GEMINI_API_KEY")
    if not api_key:
        raise AIAnalysisError("GEMINI_API_KEY is not configured")

    client = genai.Client(api_key=api_key)
    contents = [prompt]
    if image_bytes is not None:
        contents = [types.Part.from_bytes(data=image_bytes, mime_type=mime_type), prompt]

    response = client.models.generate_content(
        model=current_app.config.get("GEMINI_MODEL", "gemini-flash-latest"),
        contents=contents,
        config=types.GenerateContentConfig(
            system_instruction=SYSTEM_PROMPT,
            # Low temperature keeps the numbers consistent between calls
            temperature=current_app.config.get("AI_TEMPERATURE", 0.3),
            response_mime_type="application/json",
        ),
    )
    return response.text if response is not None else ""


def _url_checker():
    if not current_app.config.get("URL_PROBE_ENABLED", True):
        return None
    return partial(check_url, timeout=current_app.config.get("URL_PROBE_TIMEOUT", 2.0))


def _run_analysis(prompt: str, image_bytes: Optional[bytes] = None, mime_type: str = "image/jpeg") -> Dict[str, Any]:
    try:
        content = generate_reply(prompt, image_bytes=image_bytes, mime_type=mime_type)
        if not content:
            raise AIAnalysisError("No response from model")
        raw = parse_reply(content)
        return normalize_analysis(
            raw,
            url_checker=_url_checker(),
            max_workers=current_app.config.get("URL_PROBE_WORKERS", 8),
        )
    except AIAnalysisError:
        logger.exception("AI analysis failed")
        raise
    except Exception as e:
        logger.exception("AI analysis failed")
        raise AIAnalysisError("Failed to analyze food with AI") from e


def analyze_food(food_description: str, goals: Optional[Dict[str, Any]]) -> Dict[str, Any]:
    logger.info("Analyzing food description: %s", food_description[:80])
    return _run_analysis(build_text_prompt(food_description, goals))


def analyze_image(image_bytes: bytes, mime_type: str = "image/jpeg", goals: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    logger.info("Analyzing food image (%d bytes, %s)", len(image_bytes), mime_type)
    return _run_analysis(build_image_prompt(goals), image_bytes=image_bytes, mime_type=mime_type)
