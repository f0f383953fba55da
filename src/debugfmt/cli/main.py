"""Cyclopts CLI entry point for debugfmt."""

from __future__ import annotations

import json
import sys
from contextvars import ContextVar
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING, Annotated

import structlog
from cyclopts import App, Parameter

from debugfmt import __version__
from debugfmt.lib.config.settings import DebugfmtConfig, load_config
from debugfmt.lib.errors import DebugCapabilityError, UnknownTagError
from debugfmt.lib.handle import dbg
from debugfmt.lib.logging import configure_logging
from debugfmt.lib.registry import get_default_registry

if TYPE_CHECKING:
    from collections.abc import Sequence

    from debugfmt.lib.tags import ModeTag

logger = structlog.get_logger(__name__)


@dataclass(frozen=True, slots=True)
class GlobalOptions:
    """Options stripped from argv before cyclopts parses commands."""

    verbosity: int = 0
    json_logs: bool = False


_CONFIG: ContextVar[DebugfmtConfig | None] = ContextVar("_CONFIG", default=None)


def get_config() -> DebugfmtConfig:
    return _CONFIG.get() or DebugfmtConfig()


app = App(
    name="debugfmt",
    help="Render JSON documents with opt-in debug formatting",
    version=__version__,
    help_formatter="plain",
)


def _read_document(value: str | None, file: Path | None) -> str:
    if file is not None:
        return file.read_text(encoding="utf-8")
    if value is not None:
        return value
    return sys.stdin.read()


def resolve_tag_names(
    tag_names: Sequence[str],
    *,
    pretty: bool,
    config: DebugfmtConfig,
) -> tuple[type[ModeTag], ...]:
    """Explicit tags win; config defaults apply only when none are given."""

    names = list(tag_names)
    if pretty:
        names.append("pretty")
    if not names:
        names = list(config.default_tags)
    registry = get_default_registry()
    return tuple(registry.tag_named(name) for name in names)


@app.command(name="render")
def render(
    value: str | None = None,
    *,
    file: Annotated[
        Path | None,
        Parameter(name="--file", help="Read the JSON document from a file."),
    ] = None,
    tag: Annotated[
        list[str] | None,
        Parameter(name="--tag", help="Mode tag to render with; may be repeated."),
    ] = None,
    pretty: Annotated[
        bool,
        Parameter(name="--pretty", help="Shorthand for --tag pretty."),
    ] = False,
) -> None:
    """Print the debug rendering of a JSON document (argument, --file, or stdin)."""

    tags = resolve_tag_names(tag or (), pretty=pretty, config=get_config())
    document = json.loads(_read_document(value, file))
    handle = dbg(document, *tags)
    logger.debug(
        "rendering document",
        source="file" if file is not None else ("argument" if value is not None else "stdin"),
        tags=sorted(tag_class.name for tag_class in handle.tags),
    )
    handle.write_to(sys.stdout)
    sys.stdout.write("\n")


@app.command(name="capabilities")
def capabilities() -> None:
    """List registered debug capabilities."""

    for capability in get_default_registry().capabilities():
        print(capability.label())


def _extract_global_options(argv: Sequence[str]) -> tuple[list[str], GlobalOptions]:
    verbosity = 0
    json_logs = False
    cleaned: list[str] = []
    for arg in argv:
        if arg in {"-v", "--verbose"}:
            verbosity += 1
            continue
        if arg == "--json-logs":
            json_logs = True
            continue
        cleaned.append(arg)
    return cleaned, GlobalOptions(verbosity=verbosity, json_logs=json_logs)


def main(argv: Sequence[str] | None = None) -> None:
    """CLI entry point used by `debugfmt` and `python -m debugfmt`."""

    args = list(sys.argv[1:] if argv is None else argv)
    cleaned_args, options = _extract_global_options(args)

    try:
        config = load_config(Path.cwd())
    except (ValueError, OSError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        raise SystemExit(1) from None

    configure_logging(
        json_mode=options.json_logs or config.json_logs,
        verbosity=max(options.verbosity, config.verbosity),
    )

    token = _CONFIG.set(config)
    try:
        app(cleaned_args)
    except (DebugCapabilityError, UnknownTagError, ValueError, OSError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        raise SystemExit(1) from None
    finally:
        _CONFIG.reset(token)
