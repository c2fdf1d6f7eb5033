import json

import pytest

from trip_planner.parser import FallbackItinerary, ParsedItinerary, extract_json_object, parse_itinerary


def test_object_in_prose_is_returned_unchanged(model_text, sample_document):
    result = parse_itinerary(model_text)

    assert isinstance(result, ParsedItinerary)
    assert result.document == sample_document


def test_untrusted_fields_pass_through():
    text = 'Sure! {"overview": {"destination": 42}, "extra": [1, 2], "travel_tips": "not a list"} done'
    result = parse_itinerary(text)

    assert isinstance(result, ParsedItinerary)
    assert result.document == {"overview": {"destination": 42}, "extra": [1, 2], "travel_tips": "not a list"}


def test_stray_braces_in_prose_still_find_the_object():
    text = 'Notes {draft} follow.\n{"overview": {"destination": "Rome"}}\nP.S. keep smiling :}'
    result = parse_itinerary(text)

    assert isinstance(result, ParsedItinerary)
    assert result.document == {"overview": {"destination": "Rome"}}


def test_copied_skeleton_falls_back_instead_of_inner_object():
    # model echoed the prompt's skeleton: comments and a bare `etc.` make the outer object invalid
    text = (
        'Here you go:\n{ "overview": {"destination": "Paris", "duration": "3 days", "total_budget": 90000},'
        ' "daily_itinerary": {"day_1": {"morning": {"activity": "Louvre"}},'
        ' "day_2": { /* Same structure */ }},'
        ' "accommodation_details": {"amenities": ["WiFi", etc.]} }'
    )
    result = parse_itinerary(text)

    assert isinstance(result, FallbackItinerary)
    assert result.document["daily_itinerary"] == {"raw_response": text}


def test_empty_placeholder_braces_are_not_an_itinerary():
    text = "Use the {} placeholder. Day 1: Louvre. Day 2: Versailles."
    result = parse_itinerary(text)

    assert isinstance(result, FallbackItinerary)
    assert result.raw_text == text


def test_small_example_object_does_not_win_over_the_plan():
    text = 'Format like {"name": "x"} please.\n{"overview": {"destination": "Rome"}, "travel_tips": []}\nbye }'
    result = parse_itinerary(text)

    assert isinstance(result, ParsedItinerary)
    assert result.document == {"overview": {"destination": "Rome"}, "travel_tips": []}


def test_braces_inside_strings_do_not_split_the_object():
    text = 'Plan } below\n{"overview": {"destination": "Oslo"}, "travel_tips": ["use the } key"]}\nthanks :}'
    result = parse_itinerary(text)

    assert isinstance(result, ParsedItinerary)
    assert result.document["travel_tips"] == ["use the } key"]


def test_no_braces_gives_fallback_with_raw_text():
    text = "Day 1: walk around.\nDay 2: eat pasta."
    result = parse_itinerary(text)

    assert isinstance(result, FallbackItinerary)
    assert result.raw_text == text
    assert result.document["daily_itinerary"] == {"raw_response": text}


def test_fallback_placeholders():
    doc = parse_itinerary("{ this is not json }").document

    assert doc["overview"] == {
        "destination": "Unknown",
        "duration": "5 days",
        "total_budget": 50000,
        "currency": "INR",
        "travel_style": "Mid-range",
    }
    assert doc["budget_breakdown"] == pytest.approx({
        "accommodation": 20000,
        "food": 15000,
        "transportation": 7500,
        "activities": 5000,
        "miscellaneous": 2500,
    })
    assert len(doc["travel_tips"]) == 5
    assert "accommodation_details" not in doc
    # serialisable as-is
    json.dumps(doc)


@pytest.mark.parametrize("text", ["", "[1, 2, 3]", "}{", '"just a string"'])
def test_non_object_output_falls_back(text):
    assert isinstance(parse_itinerary(text), FallbackItinerary)


def test_none_does_not_raise():
    result = parse_itinerary(None)
    assert isinstance(result, FallbackItinerary)
    assert result.document["daily_itinerary"] == {"raw_response": ""}


def test_extract_prefers_whole_span():
    assert extract_json_object('x {"a": {"b": 1}} y') == {"a": {"b": 1}}
    assert extract_json_object("nothing here") is None
