"""Error classes, input validation, and confirmation prompts."""

import re
import sys


class NudgeError(Exception):
    """Base error for nudge CLI operations."""

    def __init__(self, message: str, exit_code: int = 1):
        super().__init__(message)
        self.exit_code = exit_code


class MissingTemplateError(NudgeError):
    """The bundled agent template could not be found."""

    def __init__(self, path):
        super().__init__(f"template not found at {path}")
        self.path = path


class StorageError(NudgeError):
    """Reading or writing an agent file failed."""


class ValidationError(NudgeError):
    """Malformed user input (exit code 3)."""

    def __init__(self, message: str):
        super().__init__(message, exit_code=3)


class UserCancelled(NudgeError):
    """The user aborted an interactive step (exit code 0)."""

    def __init__(self, message: str = "Cancelled."):
        super().__init__(message, exit_code=0)


_HEX_COLOR = re.compile(r"#[0-9a-fA-F]{6}")
_MODEL_ID = re.compile(r"[^/\s]+/\S+")


def is_valid_hex_color(value: str) -> bool:
    """Return True for exactly ``#RRGGBB`` (any case), nothing more."""
    return isinstance(value, str) and _HEX_COLOR.fullmatch(value) is not None


def is_valid_model(value: str) -> bool:
    """Return True for a ``provider/model-name`` identifier."""
    return isinstance(value, str) and _MODEL_ID.fullmatch(value) is not None


def validate_color(value: str) -> str:
    if not is_valid_hex_color(value):
        raise ValidationError(f"invalid hex color: {value}. Use format #RRGGBB")
    return value


def validate_model(value: str) -> str:
    if not is_valid_model(value):
        raise ValidationError(
            f"invalid model: {value}. Use format provider/model-name"
        )
    return value


def confirm_destructive(message: str, force: bool = False) -> None:
    """Prompt for confirmation on destructive ops. Raises UserCancelled on decline."""
    if force:
        return

    if not sys.stdin.isatty():
        raise NudgeError(
            f"Refusing to {message} without --force (non-interactive)",
            exit_code=3,
        )

    from nudge.prompts import confirm

    if not confirm(f"{message[:1].upper()}{message[1:]}?", default=False):
        raise UserCancelled()
