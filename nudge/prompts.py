"""Interactive selection prompts (questionary).

Every prompt raises UserCancelled when the user aborts it (Ctrl-C / Esc),
which questionary reports as a ``None`` answer.
"""

import questionary
from questionary import Style

from nudge.platforms import COLOR_OPTIONS, MODEL_OPTIONS, Platform
from nudge.util import UserCancelled, is_valid_hex_color, is_valid_model

CUSTOM_STYLE = Style([
    ("qmark", "fg:#14b8a6 bold"),
    ("question", "bold"),
    ("answer", "fg:#14b8a6 bold"),
    ("pointer", "fg:#14b8a6 bold"),
    ("highlighted", "fg:#14b8a6 bold bg:default"),
    ("selected", "fg:#14b8a6 bold bg:default"),
])

_CUSTOM = "__custom__"
_ALL = "all"


def _ask(question):
    answer = question.ask()
    if answer is None:
        raise UserCancelled()
    return answer


def _title(label: str, hint: str) -> str:
    return f"{label} ({hint})" if hint else label


def _choices(options, custom_label: str) -> list:
    choices = [
        questionary.Choice(_title(label, hint), value=value)
        for value, label, hint in options
    ]
    choices.append(questionary.Choice(custom_label, value=_CUSTOM))
    return choices


def confirm(message: str, default: bool = False) -> bool:
    return _ask(questionary.confirm(message, default=default, style=CUSTOM_STYLE))


def select_platforms(platforms: dict[str, Platform]) -> list[Platform]:
    """Ask which platforms to target: all of them, or exactly one."""
    choices = [questionary.Choice("All platforms (recommended)", value=_ALL)]
    for p in platforms.values():
        choices.append(questionary.Choice(_title(f"{p.name} only", p.hint), value=p.key))
    answer = _ask(questionary.select(
        "Where should the Learn agent be installed?",
        choices=choices,
        default=_ALL,
        style=CUSTOM_STYLE,
    ))
    if answer == _ALL:
        return list(platforms.values())
    return [platforms[answer]]


def select_model(current: str = "", allow_empty: bool = False) -> str:
    """Pick a model from the list or type a provider/model-name identifier.

    Returns "" for the assistant's default model.
    """
    known = [value for value, _, _ in MODEL_OPTIONS]
    answer = _ask(questionary.select(
        "Select a model for the Learn agent",
        choices=_choices(MODEL_OPTIONS, "Enter custom model"),
        default=current if current in known else None,
        style=CUSTOM_STYLE,
    ))
    if answer != _CUSTOM:
        return answer

    def validate(value: str):
        if not value:
            return True if allow_empty else "Model identifier is required"
        if not is_valid_model(value):
            return "Model should be in format: provider/model-name"
        return True

    return _ask(questionary.text(
        "Enter the model identifier (e.g., anthropic/claude-sonnet-4)",
        default=current,
        validate=validate,
        style=CUSTOM_STYLE,
    )).strip()


def select_color(current: str) -> str:
    """Pick an agent color from the list or type a #RRGGBB value."""
    known = [value for value, _, _ in COLOR_OPTIONS]
    answer = _ask(questionary.select(
        "Select a color for the Learn agent",
        choices=_choices(COLOR_OPTIONS, "Enter custom hex color"),
        default=current if current in known else None,
        style=CUSTOM_STYLE,
    ))
    if answer != _CUSTOM:
        return answer

    def validate(value: str):
        if not value:
            return "Color is required"
        if not is_valid_hex_color(value):
            return "Invalid hex color format. Use #RRGGBB"
        return True

    return _ask(questionary.text(
        "Enter the hex color (e.g., #14B8A6)",
        default=current,
        validate=validate,
        style=CUSTOM_STYLE,
    ))
