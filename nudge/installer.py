"""Render, write, and remove the Learn agent file for each platform.

Every function takes the platform and a Storage explicitly, so the same
code runs against the real filesystem or a test double.
"""

from collections.abc import Callable, Iterable
from dataclasses import dataclass, field
from pathlib import Path

from nudge.frontmatter import parse_frontmatter, update_frontmatter
from nudge.platforms import DEFAULT_COLOR, Platform
from nudge.storage import Storage
from nudge.util import MissingTemplateError, NudgeError, is_valid_hex_color


@dataclass
class AgentConfig:
    """User-selected settings written into configurable agent files."""

    model: str = ""  # "" = assistant default, field removed
    color: str = DEFAULT_COLOR

    def updates(self) -> dict[str, str]:
        """Update set for update_frontmatter."""
        return {"color": self.color, "model": self.model}


@dataclass
class BatchResult:
    """Outcome of one action applied to several platforms."""

    succeeded: list[Platform] = field(default_factory=list)
    failed: list[tuple[Platform, str]] = field(default_factory=list)

    @property
    def partial(self) -> bool:
        return bool(self.succeeded) and bool(self.failed)

    @property
    def exit_code(self) -> int:
        """1 only when nothing succeeded; partial success still exits 0."""
        if self.failed and not self.succeeded:
            return 1
        return 0


def read_template(platform: Platform, storage: Storage) -> str:
    try:
        return storage.read(platform.template)
    except FileNotFoundError:
        raise MissingTemplateError(platform.template)


def render_agent(platform: Platform, config: AgentConfig, storage: Storage) -> str:
    """Return the agent document to install for platform.

    Configurable platforms get model and color merged into the template's
    frontmatter; the others receive the template unchanged.
    """
    content = read_template(platform, storage)
    if platform.configurable:
        content = update_frontmatter(content, config.updates())
    return content


def read_config(platform: Platform, storage: Storage) -> AgentConfig:
    """Read model and color back from an installed agent file.

    Missing or malformed values fall back to the defaults.
    """
    metadata, _ = parse_frontmatter(storage.read(platform.path))

    model = metadata.get("model", "")
    if not isinstance(model, str):
        model = ""

    color = metadata.get("color", "")
    # Older releases wrote the color double-quoted twice
    color = color.strip("\"'") if isinstance(color, str) else ""
    if not is_valid_hex_color(color):
        color = DEFAULT_COLOR

    return AgentConfig(model=model, color=color)


def install_agent(platform: Platform, config: AgentConfig, storage: Storage) -> Path:
    """Write the rendered agent file, creating its directory. Returns the path."""
    content = render_agent(platform, config, storage)
    storage.ensure_dir(platform.agents_dir)
    storage.write(platform.path, content)
    return platform.path


def remove_agent(platform: Platform, storage: Storage) -> Path:
    storage.remove(platform.path)
    return platform.path


def installed_platforms(
    platforms: Iterable[Platform], storage: Storage
) -> list[Platform]:
    """Platforms that currently have an agent file."""
    return [p for p in platforms if storage.exists(p.path)]


def run_batch(
    platforms: Iterable[Platform], action: Callable[[Platform], object]
) -> BatchResult:
    """Apply action to each platform; a failure is recorded, not raised."""
    result = BatchResult()
    for platform in platforms:
        try:
            action(platform)
        except (NudgeError, OSError) as e:
            result.failed.append((platform, str(e)))
        else:
            result.succeeded.append(platform)
    return result
