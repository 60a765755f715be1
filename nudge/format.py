"""Output mode selection and formatting helpers."""

import json


def get_output_mode(args) -> str:
    """Determine output mode from parsed args."""
    if getattr(args, "json", False):
        return "json"
    if getattr(args, "verbose", False):
        return "verbose"
    return "terse"


def format_json(**fields) -> str:
    return json.dumps(fields)


def format_success(message: str, mode: str = "terse") -> str:
    """Format a success message for the given output mode."""
    if mode == "json":
        return json.dumps({"ok": True, "message": message})
    return message


def format_warning(message: str) -> str:
    """Format a warning. Always plain text, always stderr."""
    return f"WARN: {message}"


def format_error(message: str) -> str:
    """Format an error message. Always plain text, always stderr."""
    return f"ERR: {message}"


def format_batch(result, verb: str, mode: str = "terse", config=None) -> str:
    """Summarise a BatchResult on stdout.

    Failures are not included here; the caller reports them on stderr.
    """
    if mode == "json":
        fields = {
            "ok": not result.failed,
            verb: [
                {"platform": p.key, "path": str(p.path)} for p in result.succeeded
            ],
            "failed": [
                {"platform": p.key, "error": err} for p, err in result.failed
            ],
        }
        if config is not None:
            fields["model"] = config.model or None
            fields["color"] = config.color
        return format_json(**fields)

    lines = []
    for p in result.succeeded:
        if mode == "verbose":
            lines.append(f"{verb.capitalize()}: {p.name}")
            lines.append(f"  Location: {p.path}")
        else:
            lines.append(f"OK {verb} {p.name} -> {p.path}")
    if config is not None and mode == "verbose" and any(
        p.configurable for p in result.succeeded
    ):
        lines.append(f"Model: {config.model or 'OpenCode default'}")
        lines.append(f"Color: {config.color}")
    return "\n".join(lines)
