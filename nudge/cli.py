"""CLI parser, subcommand dispatch, and exception handler."""

import argparse
import sys

from nudge import __version__
from nudge.util import NudgeError, UserCancelled


class NudgeArgumentParser(argparse.ArgumentParser):
    """Custom parser that exits with code 3 on usage errors (not 2)."""

    def error(self, message: str) -> None:
        self.print_usage(sys.stderr)
        print(f"ERR: {message}", file=sys.stderr)
        sys.exit(3)


def _require_tty() -> None:
    """Interactive prompts need a terminal on stdin."""
    if not sys.stdin.isatty():
        raise NudgeError(
            "interactive mode needs a terminal (use --no-tui)", exit_code=3,
        )


def _report(result, action: str, done: str, args, config=None) -> int:
    """Print a batch outcome and return its exit code."""
    from nudge.format import format_batch, format_error, format_warning, get_output_mode

    mode = get_output_mode(args)
    output = format_batch(result, done, mode, config=config)
    if output:
        print(output)
    for platform, error in result.failed:
        print(format_error(f"failed to {action} {platform.name}: {error}"), file=sys.stderr)
    if result.partial:
        print(format_warning(f"Learn agent partially {done}."), file=sys.stderr)
    return result.exit_code


def cmd_install(args) -> int:
    """Handler for `nudge install`."""
    from nudge.format import format_warning
    from nudge.installer import AgentConfig, install_agent, installed_platforms, run_batch
    from nudge.platforms import DEFAULT_COLOR, resolve_platforms
    from nudge.storage import FileStorage
    from nudge.util import validate_color, validate_model

    interactive = getattr(args, "tui", True)
    model = getattr(args, "model", None)
    color = getattr(args, "color", None)

    # Validate flags before any prompt or write
    if model:
        validate_model(model)
    if color is not None:
        validate_color(color)
    if interactive:
        _require_tty()

    platforms = resolve_platforms()
    storage = FileStorage()

    if getattr(args, "all", False):
        selected = list(platforms.values())
    else:
        selected = [p for key, p in platforms.items() if getattr(args, key, False)]
    if not selected:
        if interactive:
            from nudge.prompts import select_platforms
            selected = select_platforms(platforms)
        else:
            selected = list(platforms.values())

    existing = installed_platforms(selected, storage)
    if existing:
        names = ", ".join(p.name for p in existing)
        if interactive:
            from nudge.prompts import confirm
            if not confirm(
                f"Learn agent already exists for {names}. Overwrite?", default=False,
            ):
                raise UserCancelled("Installation cancelled.")
        else:
            print(
                format_warning(f"Learn agent already exists for {names}. Overwriting..."),
                file=sys.stderr,
            )

    config = AgentConfig(model=model or "", color=color or DEFAULT_COLOR)
    if interactive and any(p.configurable for p in selected):
        from nudge.prompts import select_color, select_model
        if model is None:
            config.model = select_model()
        if color is None:
            config.color = select_color(DEFAULT_COLOR)

    result = run_batch(selected, lambda p: install_agent(p, config, storage))
    return _report(result, "install", "installed", args, config=config)


def cmd_update(args) -> int:
    """Handler for `nudge update`."""
    from nudge.format import format_success, format_warning, get_output_mode
    from nudge.installer import AgentConfig, install_agent, installed_platforms, read_config, run_batch
    from nudge.platforms import resolve_platforms
    from nudge.storage import FileStorage

    platforms = resolve_platforms()
    storage = FileStorage()

    installed = installed_platforms(platforms.values(), storage)
    if not installed:
        print(format_warning("Learn agent is not installed."), file=sys.stderr)
        print(format_success(
            "Run `nudge install` to install it first.", get_output_mode(args),
        ))
        return 0

    config = AgentConfig()
    configurable = [p for p in installed if p.configurable]
    if configurable:
        current = read_config(configurable[0], storage)
        if getattr(args, "preserve_config", False) or not getattr(args, "tui", True):
            config = current
        else:
            _require_tty()
            from nudge.prompts import confirm, select_color, select_model
            if confirm("Keep your current model and color settings?", default=True):
                config = current
            else:
                config = AgentConfig(
                    model=select_model(current.model, allow_empty=True),
                    color=select_color(current.color),
                )

    result = run_batch(installed, lambda p: install_agent(p, config, storage))
    return _report(
        result, "update", "updated", args,
        config=config if configurable else None,
    )


def cmd_uninstall(args) -> int:
    """Handler for `nudge uninstall`."""
    from nudge.format import format_success, format_warning, get_output_mode
    from nudge.installer import installed_platforms, remove_agent, run_batch
    from nudge.platforms import resolve_platforms
    from nudge.storage import FileStorage
    from nudge.util import confirm_destructive

    platforms = resolve_platforms()
    storage = FileStorage()
    mode = get_output_mode(args)

    installed = installed_platforms(platforms.values(), storage)
    if not installed:
        print(format_warning("Learn agent is not installed on any platform."), file=sys.stderr)
        print(format_success("Nothing to uninstall.", mode))
        return 0

    if mode != "json":
        print("Found Learn agent installations:")
        for p in installed:
            print(f"  {p.name}: {p.path}")

    target = "this installation" if len(installed) == 1 else "all installations"
    confirm_destructive(f"remove {target}", force=getattr(args, "force", False))

    result = run_batch(installed, lambda p: remove_agent(p, storage))
    return _report(result, "remove", "removed", args)


def build_parser() -> NudgeArgumentParser:
    """Build the CLI argument parser with all subcommands."""
    parser = NudgeArgumentParser(
        prog="nudge",
        description=(
            "AI-powered coding mentor that guides with questions, not answers"
            " - for OpenCode, GitHub Copilot, and Claude Code"
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--version", action="version", version=f"nudge {__version__}",
    )

    # Global output mode flags via a parent parser so they work
    # both before and after the subcommand name.
    output_parent = argparse.ArgumentParser(add_help=False)
    output_group = output_parent.add_mutually_exclusive_group()
    output_group.add_argument(
        "--json", action="store_true", default=argparse.SUPPRESS, help="JSON output",
    )
    output_group.add_argument(
        "--verbose", action="store_true", default=argparse.SUPPRESS,
        help="Detailed output",
    )

    top_output_group = parser.add_mutually_exclusive_group()
    top_output_group.add_argument("--json", action="store_true", help="JSON output")
    top_output_group.add_argument(
        "--verbose", action="store_true", help="Detailed output"
    )

    sub = parser.add_subparsers(dest="command")

    # install
    install_p = sub.add_parser("install", parents=[output_parent], help="Install the Learn agent")
    install_p.add_argument(
        "--no-tui", dest="tui", action="store_false",
        help="Non-interactive mode with defaults",
    )
    install_p.add_argument("--opencode", action="store_true", help="Install for OpenCode")
    install_p.add_argument("--copilot", action="store_true", help="Install for GitHub Copilot")
    install_p.add_argument("--claudecode", action="store_true", help="Install for Claude Code")
    install_p.add_argument(
        "--all", action="store_true", help="Install for all platforms without prompting",
    )
    install_p.add_argument(
        "--model", help="Model for OpenCode (e.g., anthropic/claude-sonnet-4)",
    )
    install_p.add_argument(
        "--color", metavar="HEX", help="Agent color for OpenCode (e.g., #14B8A6)",
    )
    install_p.set_defaults(func=cmd_install)

    # update
    update_p = sub.add_parser(
        "update", parents=[output_parent],
        help="Update the Learn agent to the latest version",
    )
    update_p.add_argument(
        "--preserve-config", action="store_true",
        help="Keep existing model and color settings (OpenCode only)",
    )
    update_p.add_argument(
        "--no-tui", dest="tui", action="store_false",
        help="Non-interactive mode (keeps existing settings)",
    )
    update_p.set_defaults(func=cmd_update)

    # uninstall
    uninstall_p = sub.add_parser(
        "uninstall", parents=[output_parent],
        help="Remove the Learn agent from all installed platforms",
    )
    uninstall_p.add_argument(
        "--force", action="store_true", help="Skip confirmation prompt",
    )
    uninstall_p.set_defaults(func=cmd_uninstall)

    return parser


def main(argv=None) -> int:
    """Entry point for the nudge CLI."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help(sys.stderr)
        return 3

    if getattr(args, "json", False) and getattr(args, "verbose", False):
        parser.error("--json and --verbose are mutually exclusive")

    try:
        return args.func(args)
    except KeyboardInterrupt:
        print("\nCancelled.", file=sys.stderr)
        return 130
    except UserCancelled as e:
        print(str(e), file=sys.stderr)
        return e.exit_code
    except NudgeError as e:
        print(f"ERR: {e}", file=sys.stderr)
        return e.exit_code
    except Exception as e:
        print(f"ERR: unexpected error: {e}", file=sys.stderr)
        return 1
