import pytest

from speech_score import ScoreResult, score_text
from speech_score.scorer.tips import TIP_MESSAGES

EN = TIP_MESSAGES["en"]


def test_missing_leading_article():
    result = score_text("The quick brown fox", "quick brown fox")
    assert result.accuracy == 79
    assert EN["articles"] in result.tips
    assert EN["read_fully"] not in result.tips


def test_empty_transcript():
    result = score_text("I want to go to the store", "")
    assert result.accuracy == 0
    assert list(result.tips) == [EN["read_fully"], EN["articles"], EN["prepositions"]]


def test_perfect_reading():
    result = score_text("hello", "hello")
    assert result == ScoreResult(accuracy=100, tips=(EN["practice"],))


def test_identical_after_normalization():
    assert score_text("Hello, World!", "hello world").accuracy == 100


def test_both_empty():
    assert score_text("", "").accuracy == 100


def test_none_transcript_is_empty():
    assert score_text("", None).accuracy == 100
    assert score_text("hello", None).accuracy == 0


@pytest.mark.parametrize("reference, hypothesis", [("", "hello"), ("hello", ""), ("", "a b")])
def test_one_side_empty_is_below_100(reference, hypothesis):
    assert score_text(reference, hypothesis).accuracy < 100


def test_half_points_round_up():
    # distance 3 over 8 chars -> 62.5
    assert score_text("abcdefgh", "xyzdefgh").accuracy == 63


@pytest.mark.parametrize(
    "reference, hypothesis",
    [
        ("!!!", "???"),
        ("short", "a much much longer transcript than the reference"),
        ("Completely different", "zzzz qqqq"),
        ("...", "hello"),
        ("The cat sat on the mat.", "the cat sat on the mat"),
    ],
)
def test_accuracy_bounds_and_determinism(reference, hypothesis):
    first = score_text(reference, hypothesis)
    second = score_text(reference, hypothesis)
    assert first == second
    assert 0 <= first.accuracy <= 100
    assert 1 <= len(first.tips) <= 3


def test_to_dict():
    assert score_text("hello", "hello").to_dict() == {"accuracy": 100, "tips": [EN["practice"]]}


def test_korean_tips():
    assert score_text("hello", "hello", language="ko").tips == (TIP_MESSAGES["ko"]["practice"],)
