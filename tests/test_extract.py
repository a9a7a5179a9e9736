"""Tests for tolerant JSON extraction and result mapping."""
import json

from label_analyzer.core.types import FailureKind, FoodAnalysis, NotFood
from label_analyzer.parsing.extract import (
    GENERIC_FAILURE_MESSAGE,
    NOT_FOOD_MESSAGE,
    extract_json_candidate,
    parse_analysis_response,
    parse_json_candidate,
)


def test_fenced_block_with_json_tag(fenced_food_reply, food_reply):
    result = parse_analysis_response(fenced_food_reply)

    assert isinstance(result, FoodAnalysis)
    assert result.is_food
    assert result.name == food_reply["foodName"]
    assert result.ingredients == food_reply["ingredients"]
    assert result.nutrition == food_reply["nutrition"]
    assert result.rating == food_reply["rating"]
    assert result.verdict == food_reply["verdict"]
    assert result.ingredients_to_watch == food_reply["ingredientsToWatch"]


def test_fenced_block_without_tag():
    text = 'Sure!\n```\n{"isFood": true, "foodName": "Crackers"}\n```'
    assert extract_json_candidate(text) == '{"isFood": true, "foodName": "Crackers"}'


def test_brace_span_when_no_fence():
    text = 'The label says: {"isFood": true, "foodName": "Soup"} -- hope that helps.'
    assert extract_json_candidate(text) == '{"isFood": true, "foodName": "Soup"}'


def test_bare_and_fenced_parse_to_same_object(food_reply):
    bare = json.dumps(food_reply)
    fenced = "```json\n" + bare + "\n```"
    assert parse_json_candidate(bare) == parse_json_candidate(fenced) == food_reply


def test_not_food_uses_fixed_message():
    result = parse_analysis_response('{"isFood":false}')
    assert isinstance(result, NotFood)
    assert not result.is_food
    assert result.reason == NOT_FOOD_MESSAGE
    assert result.failure is FailureKind.NOT_FOOD


def test_not_food_ignores_model_reason_by_default():
    result = parse_analysis_response('{"isFood": false, "error": "This is a cat."}')
    assert result.reason == NOT_FOOD_MESSAGE


def test_not_food_can_surface_model_reason():
    text = '{"isFood": false, "error": "This is a cat."}'
    assert parse_analysis_response(text, use_model_reason=True).reason == "This is a cat."
    assert (
        parse_analysis_response('{"isFood": false}', use_model_reason=True).reason
        == NOT_FOOD_MESSAGE
    )


def test_missing_is_food_counts_as_not_food():
    result = parse_analysis_response('{"foodName": "Mystery"}')
    assert result.failure is FailureKind.NOT_FOOD


def test_unparseable_text_is_parse_failure():
    result = parse_analysis_response("not json at all")
    assert isinstance(result, NotFood)
    assert result.reason == GENERIC_FAILURE_MESSAGE
    assert result.failure is FailureKind.PARSE


def test_truncated_json_is_parse_failure():
    result = parse_analysis_response('```json\n{"isFood": true, "foodName": "Ch\n```')
    assert result.failure is FailureKind.PARSE


def test_empty_and_none_text():
    assert parse_analysis_response("").failure is FailureKind.PARSE
    assert parse_analysis_response(None).failure is FailureKind.PARSE


def test_json_array_is_not_an_analysis():
    assert parse_json_candidate("[1, 2, 3]") is None


def test_json_scalars_are_not_food():
    for text in ("42", '"just a string"', "[1, 2, 3]", "true"):
        result = parse_analysis_response(text)
        assert result.failure is FailureKind.NOT_FOOD, text
        assert result.reason == NOT_FOOD_MESSAGE


def test_json_null_is_parse_failure():
    assert parse_analysis_response("null").failure is FailureKind.PARSE


def test_deeply_nested_reply_is_parse_failure():
    """Nesting beyond the decoder's recursion limit must not escape"""
    text = '{"a":' * 100000 + "1" + "}" * 100000
    result = parse_analysis_response(text)
    assert isinstance(result, NotFood)
    assert result.failure is FailureKind.PARSE
    assert result.reason == GENERIC_FAILURE_MESSAGE


def test_missing_food_fields_become_none():
    result = parse_analysis_response('{"isFood": true}')
    assert isinstance(result, FoodAnalysis)
    assert result.name is None
    assert result.nutrition is None
    assert result.ingredients_to_watch is None


def test_malformed_sub_fields_pass_through_unvalidated():
    text = '{"isFood": true, "rating": "four", "nutrition": [1, 2]}'
    result = parse_analysis_response(text)
    assert result.rating == "four"
    assert result.nutrition == [1, 2]


def test_to_dict_uses_camel_case_keys(food_reply):
    result = parse_analysis_response(json.dumps(food_reply))
    assert result.to_dict() == food_reply
    assert NotFood("nope").to_dict() == {
        "isFood": False,
        "error": "nope",
        "failure": "not_food",
    }
