import math

import pytest
import requests

from nutrition_tracker.services import nutrition_normalizer
from nutrition_tracker.services.nutrition_normalizer import (
    InvalidAnalysisError,
    check_url,
    normalize_analysis,
    search_fallback_url,
)


def _reply(items, **extra):
    raw = {"food_name": "Spinach salad", "source_analysis": items}
    raw.update(extra)
    return raw


def _item(name, sources=None, **nutrition):
    return {"item": name, "sources": sources or [], "nutrition": nutrition}


def test_totals_are_summed_and_rounded():
    raw = _reply([
        _item("Spinach", calories=23.4, protein=2.9, carbs=3.6, fat=0.4),
        _item("Feta", calories=75.3, protein=4.0, carbs=1.2, fat=6.0),
        _item("Olive oil", calories=119.5, protein=0, carbs=0, fat=13.5),
    ])
    result = normalize_analysis(raw)
    assert result["calories"] == 218
    assert result["protein"] == 7
    assert result["carbs"] == 5
    assert result["fat"] == 20
    assert result["quantity"] == 1
    assert result["unit"] == "serving"


def test_totals_round_half_up():
    raw = _reply([_item("A", calories=50.25), _item("B", calories=50.25)])
    assert normalize_analysis(raw)["calories"] == 101


def test_non_numeric_nutrients_become_zero():
    raw = _reply([
        _item("A", calories="120", protein=None, carbs=True, fat=float("nan")),
        _item("B", calories=80, protein=5),
        {"item": "C"},
    ])
    result = normalize_analysis(raw)
    first = result["source_analysis"][0]["nutrition"]
    assert first["calories"] == 0
    assert first["protein"] == 0
    assert first["carbs"] == 0
    assert first["fat"] == 0
    assert not math.isnan(first["fat"])
    assert result["source_analysis"][2]["nutrition"]["sodium"] == 0
    assert result["calories"] == 80
    assert result["protein"] == 5


def test_optional_totals_only_when_present():
    raw = _reply([_item("Egg", calories=78, cholesterol=186.4, sodium=0)])
    result = normalize_analysis(raw)
    assert result["cholesterol"] == 186
    assert result["sodium"] is None
    assert result["sugar"] is None


def test_missing_metadata_gets_defaults():
    raw = {"food_name": "Mystery", "source_analysis": [{"nutrition": {"calories": 10}}], "suggestions": "eat more"}
    result = normalize_analysis(raw)
    item = result["source_analysis"][0]
    assert item["item"] == "Unknown Item"
    assert item["methodology"] == "No methodology"
    assert item["confidence"] == "low"
    assert item["status"] == "Estimate"
    assert item["sources"] == []
    assert result["meal_type"] == "snack"
    assert result["confidence"] == "medium"
    assert result["suggestions"] == []


def test_model_values_are_kept():
    raw = _reply(
        [{"item": "Toast", "nutrition": {"calories": 80}, "methodology": "1 slice", "confidence": "high", "status": "Exact"}],
        meal_type="breakfast", confidence="high", suggestions=["Add fruit"],
    )
    result = normalize_analysis(raw)
    assert result["meal_type"] == "breakfast"
    assert result["confidence"] == "high"
    assert result["suggestions"] == ["Add fruit"]
    assert result["source_analysis"][0]["status"] == "Exact"


def test_camel_case_reply_keys():
    raw = {"foodName": "Toast", "mealType": "breakfast", "sourceAnalysis": [_item("Toast", calories=80)]}
    result = normalize_analysis(raw)
    assert result["food_name"] == "Toast"
    assert result["meal_type"] == "breakfast"
    assert result["calories"] == 80


@pytest.mark.parametrize("raw", [
    {"source_analysis": []},
    {"food_name": "Toast"},
    {"food_name": "Toast", "source_analysis": {"item": "x"}},
    ["not", "an", "object"],
])
def test_invalid_structure(raw):
    with pytest.raises(InvalidAnalysisError):
        normalize_analysis(raw)


def test_unreachable_sources_fall_back_to_search():
    sources = [
        {"url": "https://www.example.com/spinach", "reason": "USDA entry", "type": "database"},
        {"url": "https://good.example.org/spinach", "reason": "Brand page", "type": "official"},
        {"url": "not a url", "reason": "Guess", "type": "estimate"},
    ]
    raw = _reply([_item("Raw Spinach", sources=sources, calories=7)])
    checked = []

    def checker(url):
        checked.append(url)
        return url.startswith("https://good.")

    result = normalize_analysis(raw, url_checker=checker)
    out = result["source_analysis"][0]["sources"]

    assert sorted(checked) == sorted(s["url"] for s in sources)
    assert out[0] == {
        "url": "https://www.google.com/search?q=site%3Awww.example.com%20Raw%20Spinach%20nutrition",
        "reason": "USDA entry (Search Fallback)",
        "type": "search",
    }
    assert out[1] == sources[1]
    assert out[2]["url"] == "https://www.google.com/search?q=Raw%20Spinach%20nutrition"
    assert out[2]["type"] == "search"


def test_sources_untouched_without_checker():
    sources = [{"url": "https://dead.example.com", "reason": "r", "type": "official"}]
    raw = _reply([_item("Kale", sources=sources)])
    assert normalize_analysis(raw)["source_analysis"][0]["sources"] == sources


def test_duplicate_urls_are_probed_once():
    src = {"url": "https://shared.example.com/a", "reason": "r", "type": "database"}
    raw = _reply([_item("A", sources=[src]), _item("B", sources=[dict(src)])])
    checked = []

    def checker(url):
        checked.append(url)
        return True

    normalize_analysis(raw, url_checker=checker)
    assert checked == ["https://shared.example.com/a"]


def test_search_fallback_url_escaping():
    url = search_fallback_url("https://fdc.nal.usda.gov/food/123", "Mac & Cheese")
    assert url == "https://www.google.com/search?q=site%3Afdc.nal.usda.gov%20Mac%20%26%20Cheese%20nutrition"


class _Response:
    def __init__(self, ok):
        self.ok = ok


def test_check_url_skips_search_links(monkeypatch):
    def boom(*args, **kwargs):
        raise AssertionError("search links must not be requested")

    monkeypatch.setattr(nutrition_normalizer.requests, "head", boom)
    assert check_url("https://www.google.com/search?q=kale") is True


def test_check_url_uses_head_with_timeout(monkeypatch):
    calls = []

    def fake_head(url, **kwargs):
        calls.append((url, kwargs))
        return _Response(ok=True)

    monkeypatch.setattr(nutrition_normalizer.requests, "head", fake_head)
    assert check_url("https://example.com", timeout=1.5) is True
    assert calls[0][1]["timeout"] == 1.5
    assert calls[0][1]["allow_redirects"] is True


def test_check_url_failures(monkeypatch):
    monkeypatch.setattr(nutrition_normalizer.requests, "head", lambda url, **kw: _Response(ok=False))
    assert check_url("https://example.com/404") is False

    def timeout(url, **kwargs):
        raise requests.Timeout("slow")

    monkeypatch.setattr(nutrition_normalizer.requests, "head", timeout)
    assert check_url("https://example.com/slow") is False


@pytest.mark.parametrize("calories", [1e308, 10 ** 400])
def test_totals_too_large_are_invalid(calories):
    raw = _reply([_item("A", calories=calories), _item("B", calories=calories)])
    with pytest.raises(InvalidAnalysisError):
        normalize_analysis(raw)
