"""Tests for the questionary prompt wrappers."""

from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest

from nudge import prompts
from nudge.platforms import resolve_platforms
from nudge.util import UserCancelled


def _answer(value):
    question = MagicMock()
    question.ask.return_value = value
    return question


@pytest.fixture
def platforms():
    return resolve_platforms(home=Path("/home/u"), cwd=Path("/repo"))


class TestConfirm:
    def test_returns_answer(self):
        with patch("questionary.confirm", return_value=_answer(True)) as mock_confirm:
            assert prompts.confirm("Proceed?", default=True) is True
        assert mock_confirm.call_args.kwargs["default"] is True

    def test_false_is_not_cancel(self):
        with patch("questionary.confirm", return_value=_answer(False)):
            assert prompts.confirm("Proceed?") is False

    def test_abort_raises(self):
        with patch("questionary.confirm", return_value=_answer(None)):
            with pytest.raises(UserCancelled):
                prompts.confirm("Proceed?")


class TestSelectPlatforms:
    def test_all(self, platforms):
        with patch("questionary.select", return_value=_answer("all")):
            assert prompts.select_platforms(platforms) == list(platforms.values())

    def test_single(self, platforms):
        with patch("questionary.select", return_value=_answer("claudecode")):
            assert prompts.select_platforms(platforms) == [platforms["claudecode"]]

    def test_abort(self, platforms):
        with patch("questionary.select", return_value=_answer(None)):
            with pytest.raises(UserCancelled):
                prompts.select_platforms(platforms)


class TestSelectModel:
    def test_default_model_is_empty_string(self):
        with patch("questionary.select", return_value=_answer("")):
            assert prompts.select_model() == ""

    def test_listed_model(self):
        with patch("questionary.select", return_value=_answer("openai/gpt-4o")) as sel:
            assert prompts.select_model("openai/gpt-4o") == "openai/gpt-4o"
        assert sel.call_args.kwargs["default"] == "openai/gpt-4o"

    def test_unlisted_current_has_no_default(self):
        with patch("questionary.select", return_value=_answer("")) as sel:
            prompts.select_model("mistral/large")
        assert sel.call_args.kwargs["default"] is None

    def test_custom_model(self):
        with patch("questionary.select", return_value=_answer("__custom__")), \
             patch("questionary.text", return_value=_answer(" groq/llama3 ")) as text:
            assert prompts.select_model() == "groq/llama3"
        validate = text.call_args.kwargs["validate"]
        assert validate("") == "Model identifier is required"
        assert validate("llama3") == "Model should be in format: provider/model-name"
        assert validate("groq/llama3") is True

    def test_custom_model_may_be_empty_on_update(self):
        with patch("questionary.select", return_value=_answer("__custom__")), \
             patch("questionary.text", return_value=_answer("")) as text:
            assert prompts.select_model("", allow_empty=True) == ""
        assert text.call_args.kwargs["validate"]("") is True

    def test_abort_custom_entry(self):
        with patch("questionary.select", return_value=_answer("__custom__")), \
             patch("questionary.text", return_value=_answer(None)):
            with pytest.raises(UserCancelled):
                prompts.select_model()


class TestSelectColor:
    def test_listed_color(self):
        with patch("questionary.select", return_value=_answer("#10B981")) as sel:
            assert prompts.select_color("#14B8A6") == "#10B981"
        assert sel.call_args.kwargs["default"] == "#14B8A6"

    def test_custom_color(self):
        with patch("questionary.select", return_value=_answer("__custom__")), \
             patch("questionary.text", return_value=_answer("#123abc")) as text:
            assert prompts.select_color("#FF0000") == "#123abc"
        validate = text.call_args.kwargs["validate"]
        assert text.call_args.kwargs["default"] == "#FF0000"
        assert validate("") == "Color is required"
        assert validate("#12") == "Invalid hex color format. Use #RRGGBB"
        assert validate("#123ABC") is True
