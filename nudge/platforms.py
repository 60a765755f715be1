"""Supported assistants, where their agent files live, and option lists."""

import os
from dataclasses import dataclass
from pathlib import Path

TEMPLATE_DIR = Path(__file__).resolve().parent / "agents"

DEFAULT_COLOR = "#14B8A6"

# (value, label, hint); "" means the assistant's own default model
MODEL_OPTIONS = [
    ("", "Use OpenCode default", "recommended"),
    ("anthropic/claude-sonnet-4", "anthropic/claude-sonnet-4", ""),
    ("anthropic/claude-opus-4", "anthropic/claude-opus-4", ""),
    ("openai/gpt-4o", "openai/gpt-4o", ""),
    ("google/gemini-2.0-flash", "google/gemini-2.0-flash", ""),
]

COLOR_OPTIONS = [
    ("#14B8A6", "Teal (#14B8A6)", "recommended"),
    ("#10B981", "Emerald (#10B981)", ""),
    ("#06B6D4", "Cyan (#06B6D4)", ""),
    ("#0EA5E9", "Sky Blue (#0EA5E9)", ""),
]


@dataclass(frozen=True)
class Platform:
    """One assistant that consumes the Learn agent file."""

    key: str
    name: str
    hint: str
    agents_dir: Path
    filename: str
    template: Path
    configurable: bool = False  # accepts model/color frontmatter

    @property
    def path(self) -> Path:
        return self.agents_dir / self.filename


def default_home() -> Path:
    """Home directory for user-level configs, overridable via NUDGE_HOME."""
    override = os.environ.get("NUDGE_HOME", "")
    if override:
        return Path(override).expanduser()
    return Path.home()


def resolve_platforms(
    home: Path | None = None,
    cwd: Path | None = None,
    template_dir: Path = TEMPLATE_DIR,
) -> dict[str, Platform]:
    """Build the platform table for the given home and working directories.

    Copilot agents are per-repository, so they go under ``cwd``; OpenCode and
    Claude Code agents are per-user, under ``home``.
    """
    home = Path(home) if home is not None else default_home()
    cwd = Path(cwd) if cwd is not None else Path.cwd()

    platforms = [
        Platform(
            key="opencode",
            name="OpenCode",
            hint="Install to ~/.config/opencode/agents/",
            agents_dir=home / ".config" / "opencode" / "agents",
            filename="learn.md",
            template=template_dir / "opencode" / "learn.md",
            configurable=True,
        ),
        Platform(
            key="copilot",
            name="GitHub Copilot",
            hint="Install to .github/agents/ in current directory",
            agents_dir=cwd / ".github" / "agents",
            filename="learn.agent.md",
            template=template_dir / "copilot" / "learn.agent.md",
        ),
        Platform(
            key="claudecode",
            name="Claude Code",
            hint="Install to ~/.claude/agents/",
            agents_dir=home / ".claude" / "agents",
            filename="learn.md",
            template=template_dir / "claudecode" / "learn.md",
        ),
    ]
    return {p.key: p for p in platforms}
