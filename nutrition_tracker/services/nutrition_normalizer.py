"""
Nutrition Normalizer

Reshapes the loosely structured JSON a language model returns for a meal
into the analysis payload served by the API:

- nutrient values of each sub-item that are missing or not numbers become 0
- per-nutrient totals are summed over the sub-items and rounded
- source links that do not answer are swapped for a search-engine query
- missing metadata gets fixed fallback values
"""

import logging
import math
from concurrent.futures import ThreadPoolExecutor
from typing import Any, Callable, Dict, List, Optional
from urllib.parse import quote, urlparse

import requests

from nutrition_tracker.utils.enums import Confidence, EstimateStatus, MealType, SourceType

logger = logging.getLogger(__name__)

ITEM_NUTRIENTS = ("calories", "protein", "carbs", "fat", "cholesterol", "sodium", "sugar")
# Reported only when the meal actually contains some
OPTIONAL_TOTALS = ("cholesterol", "sodium", "sugar")

SEARCH_URL = "https://www.google.com/search?q="
SEARCH_MARKER = "google.com/search"
PROBE_USER_AGENT = "Mozilla/5.0 (compatible; NutritionTracker/1.0;)"
DEFAULT_PROBE_TIMEOUT = 2.0

DEFAULT_ITEM_NAME = "Unknown Item"
DEFAULT_METHODOLOGY = "No methodology"


class InvalidAnalysisError(ValueError):
    """The model reply does not have the expected top-level structure."""


UrlChecker = Callable[[str], bool]


def safe_number(value: Any) -> float:
    """Return ``value`` when it is a finite int or float, else 0."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return 0
    if isinstance(value, float) and not math.isfinite(value):
        return 0
    return value


def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def _finite_total(key: str, total: Any) -> float:
    try:
        value = float(total)
    except OverflowError:
        value = math.inf
    if not math.isfinite(value):
        raise InvalidAnalysisError(f"Total {key} is out of range")
    return value


def _pick(obj: Dict[str, Any], *keys: str) -> Any:
    for key in keys:
        if key in obj and obj[key] is not None:
            return obj[key]
    return None


def check_url(url: str, timeout: float = DEFAULT_PROBE_TIMEOUT) -> bool:
    """HEAD ``url`` once. Search-engine links are taken as valid without a request."""
    if SEARCH_MARKER in (url or ""):
        return True
    try:
        response = requests.head(
            url,
            timeout=timeout,
            allow_redirects=True,
            headers={"User-Agent": PROBE_USER_AGENT},
        )
        return response.ok
    except (requests.RequestException, ValueError) as e:
        logger.debug("Source probe failed for %s: %s", url, e)
        return False


def search_fallback_url(url: str, item_name: str) -> str:
    query = f"{item_name} nutrition"
    try:
        host = urlparse(url).hostname
    except ValueError:
        host = None
    if host:
        query = f"site:{host} {item_name} nutrition"
    # Same escaping as JavaScript's encodeURIComponent
    return SEARCH_URL + quote(query, safe="-_.!~*'()")


def _as_source(raw: Any) -> Optional[Dict[str, Any]]:
    if isinstance(raw, dict):
        return dict(raw)
    if isinstance(raw, str):
        return {"url": raw}
    return None


def _check_all(urls: List[str], url_checker: UrlChecker, max_workers: int) -> Dict[str, bool]:
    unique = list(dict.fromkeys(urls))
    if not unique:
        return {}
    workers = max(1, min(max_workers, len(unique)))
    with ThreadPoolExecutor(max_workers=workers) as pool:
        results = list(pool.map(url_checker, unique))
    return dict(zip(unique, results))


def normalize_analysis(
    raw: Dict[str, Any],
    url_checker: Optional[UrlChecker] = None,
    max_workers: int = 8,
) -> Dict[str, Any]:
    """
    Normalize a parsed model reply.

    Args:
        raw: Parsed JSON object from the model
        url_checker: Callable telling whether a source URL answers. When None,
            sources are kept as the model gave them.
        max_workers: Upper bound of concurrent URL probes

    Returns:
        Dictionary with food_name, quantity, unit, rounded totals, meal_type,
        suggestions, confidence and the cleaned source_analysis list

    Raises:
        InvalidAnalysisError: ``raw`` lacks a food name or a sub-item list, or a
            nutrient total is too large to represent
    """
    if not isinstance(raw, dict):
        raise InvalidAnalysisError("Reply is not a JSON object")

    food_name = _pick(raw, "food_name", "foodName")
    raw_items = _pick(raw, "source_analysis", "sourceAnalysis")
    if not food_name or not isinstance(raw_items, list):
        raise InvalidAnalysisError("Invalid structure from AI")

    totals = {key: 0 for key in ITEM_NUTRIENTS}
    items: List[Dict[str, Any]] = []
    for raw_item in raw_items:
        if not isinstance(raw_item, dict):
            raw_item = {}
        raw_nutrition = raw_item.get("nutrition")
        if not isinstance(raw_nutrition, dict):
            raw_nutrition = {}

        nutrition = {key: safe_number(raw_nutrition.get(key)) for key in ITEM_NUTRIENTS}
        for key in ITEM_NUTRIENTS:
            totals[key] += nutrition[key]

        raw_sources = raw_item.get("sources")
        sources = []
        if isinstance(raw_sources, list):
            sources = [s for s in (_as_source(rs) for rs in raw_sources) if s is not None]

        items.append({
            "item": raw_item.get("item") or DEFAULT_ITEM_NAME,
            "sources": sources,
            "methodology": raw_item.get("methodology") or DEFAULT_METHODOLOGY,
            "nutrition": nutrition,
            "confidence": raw_item.get("confidence") or Confidence.LOW.value,
            "status": raw_item.get("status") or EstimateStatus.ESTIMATE.value,
        })

    totals = {key: _finite_total(key, total) for key, total in totals.items()}

    if url_checker is not None:
        urls = [str(s.get("url") or "") for item in items for s in item["sources"]]
        reachable = _check_all(urls, url_checker, max_workers)
        for item in items:
            item["sources"] = [
                _with_fallback(source, item["item"], reachable) for source in item["sources"]
            ]

    result = {
        "food_name": food_name,
        # Sub-items are already summed into a single serving
        "quantity": 1,
        "unit": "serving",
    }
    for key in ITEM_NUTRIENTS:
        if key in OPTIONAL_TOTALS:
            result[key] = round_half_up(totals[key]) if totals[key] > 0 else None
        else:
            result[key] = round_half_up(totals[key])

    suggestions = raw.get("suggestions")
    result.update({
        "meal_type": _pick(raw, "meal_type", "mealType") or MealType.SNACK.value,
        "suggestions": suggestions if isinstance(suggestions, list) else [],
        "confidence": raw.get("confidence") or Confidence.MEDIUM.value,
        "source_analysis": items,
    })
    return result


def _with_fallback(source: Dict[str, Any], item_name: str, reachable: Dict[str, bool]) -> Dict[str, Any]:
    url = str(source.get("url") or "")
    if reachable.get(url, False):
        return source

    reason = source.get("reason")
    fallback = dict(source)
    fallback.update({
        "url": search_fallback_url(url, item_name),
        "reason": f"{reason} (Search Fallback)" if reason else "Search Fallback",
        "type": SourceType.SEARCH.value,
    })
    return fallback
