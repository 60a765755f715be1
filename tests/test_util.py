"""Tests for nudge.util: validation and error classes."""

from unittest.mock import patch

import pytest

from nudge.util import (
    MissingTemplateError,
    NudgeError,
    StorageError,
    UserCancelled,
    ValidationError,
    confirm_destructive,
    is_valid_hex_color,
    is_valid_model,
    validate_color,
    validate_model,
)


class TestHexColor:
    @pytest.mark.parametrize("value", ["#14B8A6", "#000000", "#FFFFFF", "#abcdef"])
    def test_accepts(self, value):
        assert is_valid_hex_color(value)

    @pytest.mark.parametrize(
        "value",
        ["14B8A6", "#14B8A", "#14B8A67", "#GGGGGG", "#FFF", "teal", " #14B8A6",
         "#14B8A6\n", ""],
    )
    def test_rejects(self, value):
        assert not is_valid_hex_color(value)

    def test_non_string_rejected(self):
        assert not is_valid_hex_color(None)

    def test_validate_color_raises(self):
        with pytest.raises(ValidationError, match="invalid hex color") as exc:
            validate_color("#12345")
        assert exc.value.exit_code == 3

    def test_validate_color_returns_value(self):
        assert validate_color("#10B981") == "#10B981"


class TestModel:
    @pytest.mark.parametrize(
        "value", ["anthropic/claude-sonnet-4", "openai/gpt-4o", "ollama/llama3:8b"],
    )
    def test_accepts(self, value):
        assert is_valid_model(value)

    @pytest.mark.parametrize(
        "value", ["", "claude-sonnet-4", "/gpt-4o", "openai/", "open ai/gpt"],
    )
    def test_rejects(self, value):
        assert not is_valid_model(value)

    def test_validate_model_raises(self):
        with pytest.raises(ValidationError, match="provider/model-name"):
            validate_model("gpt-4o")


class TestErrorClasses:
    def test_default_exit_code(self):
        err = NudgeError("test")
        assert err.exit_code == 1
        assert str(err) == "test"

    def test_missing_template(self):
        err = MissingTemplateError("/x/learn.md")
        assert err.exit_code == 1
        assert "/x/learn.md" in str(err)
        assert err.path == "/x/learn.md"

    def test_storage_error(self):
        assert StorageError("disk full").exit_code == 1

    def test_user_cancelled_exits_cleanly(self):
        err = UserCancelled()
        assert err.exit_code == 0
        assert str(err) == "Cancelled."

    def test_hierarchy(self):
        for cls in (MissingTemplateError, StorageError, ValidationError, UserCancelled):
            assert issubclass(cls, NudgeError)


class TestConfirmDestructive:
    def test_force_bypasses_prompt(self):
        confirm_destructive("remove all installations", force=True)

    def test_non_tty_without_force_raises(self):
        with patch("sys.stdin") as mock_stdin:
            mock_stdin.isatty.return_value = False
            with pytest.raises(NudgeError, match="non-interactive") as exc:
                confirm_destructive("remove all installations", force=False)
            assert exc.value.exit_code == 3

    def test_user_accepts(self):
        with patch("sys.stdin") as mock_stdin, \
             patch("nudge.prompts.confirm", return_value=True) as mock_confirm:
            mock_stdin.isatty.return_value = True
            confirm_destructive("remove all installations", force=False)
        mock_confirm.assert_called_once_with("Remove all installations?", default=False)

    def test_user_declines(self):
        with patch("sys.stdin") as mock_stdin, \
             patch("nudge.prompts.confirm", return_value=False):
            mock_stdin.isatty.return_value = True
            with pytest.raises(UserCancelled):
                confirm_destructive("remove all installations", force=False)
