"""Command-line interface for inspecting prompt disambiguation.

The CLI stands in for the prompt widget: it feeds one input string and caret
position through the engine and shows what the player would be offered.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Iterable, List, Optional

from dotenv import find_dotenv, load_dotenv

from adventure_core.common.config import get_config_paths, get_max_suggestion_count
from adventure_core.world.world_loader import load_world

from .service import SuggestionResult, SuggestionService
from .weaving import ContextGroup, GroupKind

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
logger = logging.getLogger(__name__)

SUGGEST_COMMAND = "suggest"
INSPECT_COMMAND = "inspect"
VOCABULARY_COMMAND = "vocabulary"


def _configure_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(level=level, format=LOG_FORMAT)


def build_parser() -> argparse.ArgumentParser:
    """Build the top-level CLI parser with subcommands.

    - ``suggest`` prints ranked suggestions for the word under the caret
    - ``inspect`` also prints the resolved verb / preposition / noun groups
    - ``vocabulary`` lists the world's words in matcher order
    """
    parser = argparse.ArgumentParser(
        description="Disambiguate adventure commands and suggest the next word.",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable debug logging of each disambiguation stage.",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    suggest_parser = subparsers.add_parser(
        SUGGEST_COMMAND,
        help="Suggest completions for the word being typed.",
    )
    _add_prompt_arguments(suggest_parser)
    suggest_parser.set_defaults(handler=_run_suggest)

    inspect_parser = subparsers.add_parser(
        INSPECT_COMMAND,
        help="Show the resolved context groups along with suggestions.",
    )
    _add_prompt_arguments(inspect_parser)
    inspect_parser.set_defaults(handler=_run_inspect)

    vocabulary_parser = subparsers.add_parser(
        VOCABULARY_COMMAND,
        help="List the world's vocabulary, longest spelling first.",
    )
    _add_world_argument(vocabulary_parser)
    vocabulary_parser.set_defaults(handler=_run_vocabulary)

    return parser


def _add_world_argument(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--world",
        type=Path,
        default=None,
        help="World definition JSON (default: ADVENTURE_WORLD or the packaged test world).",
    )


def _add_prompt_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("text", help="Input typed at the prompt so far.")
    parser.add_argument(
        "--caret",
        type=int,
        default=None,
        help="Caret position within the text (default: end of text).",
    )
    _add_world_argument(parser)
    parser.add_argument(
        "--max-suggestions",
        type=int,
        default=None,
        help="Maximum suggestions to show (default: ADVENTURE_MAX_SUGGESTIONS or 5).",
    )
    parser.add_argument(
        "--format",
        choices=["text", "json"],
        default="text",
        help="Output format (default: text).",
    )
    parser.add_argument(
        "--pretty",
        action="store_true",
        help="Pretty-print JSON output with indentation.",
    )


def main(argv: Optional[Iterable[str]] = None) -> int:
    env_file = find_dotenv(usecwd=True)
    if env_file:
        load_dotenv(env_file, override=False)

    parser = build_parser()
    args = parser.parse_args(list(argv) if argv is not None else sys.argv[1:])
    _configure_logging(args.verbose)
    return args.handler(args)


def _open_service(args: argparse.Namespace) -> Optional[SuggestionService]:
    world_path = args.world or get_config_paths()["default_world"]
    max_suggestions = getattr(args, "max_suggestions", None)
    if max_suggestions is not None and max_suggestions < 1:
        _emit_error("--max-suggestions must be at least 1.")
        return None
    try:
        world = load_world(world_path)
    except (FileNotFoundError, ValueError, json.JSONDecodeError) as exc:
        _emit_error(f"Could not load world {world_path}: {exc}")
        return None
    logger.debug("Loaded world %r from %s", world.title, world_path)
    return SuggestionService(
        world=world,
        max_suggestions=max_suggestions or get_max_suggestion_count(),
    )


def _run_suggest(args: argparse.Namespace) -> int:
    return _run_prompt(args, include_groups=False)


def _run_inspect(args: argparse.Namespace) -> int:
    return _run_prompt(args, include_groups=True)


def _run_prompt(args: argparse.Namespace, *, include_groups: bool) -> int:
    service = _open_service(args)
    if service is None:
        return 2

    with service:
        result = service.suggest(args.text, args.caret)

    payload = _result_payload(result, include_groups=include_groups)
    if args.format == "json":
        print(_render_json(payload, pretty=args.pretty))
    else:
        print(_format_text_report(payload))

    if result.fatal:
        return 2
    return 0 if result.ok else 1


def _run_vocabulary(args: argparse.Namespace) -> int:
    world_path = args.world or get_config_paths()["default_world"]
    try:
        world = load_world(world_path)
    except (FileNotFoundError, ValueError, json.JSONDecodeError) as exc:
        _emit_error(f"Could not load world {world_path}: {exc}")
        return 2

    for word in world.load_relevant_vocabulary():
        print(f"{word.spelling}\t{word.part_of_speech.value}\t#{word.referent.ref_id}")
    return 0


def _result_payload(
    result: SuggestionResult, *, include_groups: bool
) -> dict[str, object]:
    payload: dict[str, object] = {
        "text": result.text,
        "caret": result.caret,
        "ok": result.ok,
        "error": result.error,
        "suggestions": [
            {"text": s.text, "display": s.display, "score": _json_score(s.score)}
            for s in result.suggestions
        ],
    }
    if include_groups and result.context is not None:
        payload["working_word"] = result.context.working_word
        payload["groups"] = [
            _group_payload(group) for group in result.context.groups
        ]
    return payload


def _group_payload(group: ContextGroup) -> dict[str, object]:
    if group.kind is GroupKind.NOUN_PHRASE:
        return {
            "kind": group.kind.value,
            "clusters": [
                {
                    "noun": cluster.profile.noun.describe(),
                    "ref_id": cluster.profile.key,
                    "marks": "".join("X" if m else "." for m in cluster.marks),
                    "complete": cluster.is_complete,
                    "mentioned": sorted(cluster.mentioned),
                    "unmentioned": sorted(cluster.unmentioned),
                }
                for cluster in group.clusters
            ],
        }
    return {
        "kind": group.kind.value,
        "words": [word.spelling for word in group.words],
    }


def _json_score(score: float) -> float | str:
    # JSON has no infinity; exact matches score math.inf.
    return "inf" if score == float("inf") else round(score, 6)


def _render_json(payload: dict[str, object], *, pretty: bool) -> str:
    if pretty:
        return json.dumps(payload, ensure_ascii=False, indent=2)
    return json.dumps(payload, ensure_ascii=False)


def _format_text_report(payload: dict[str, object]) -> str:
    lines: List[str] = [f"> {payload['text']}"]
    groups = payload.get("groups")
    if isinstance(groups, list):
        for group in groups:
            if group["kind"] == GroupKind.NOUN_PHRASE.value:
                lines.append("  noun phrase:")
                for cluster in group["clusters"]:
                    status = "complete" if cluster["complete"] else "open"
                    lines.append(
                        f"    #{cluster['ref_id']} {cluster['noun']} "
                        f"[{cluster['marks']}] {status}"
                    )
            else:
                lines.append(f"  {group['kind']}: {', '.join(group['words'])}")

    if not payload["ok"]:
        lines.append(f"  (no suggestions: {payload['error']})")
        return "\n".join(lines)

    suggestions = payload["suggestions"]
    if not suggestions:
        lines.append("  (no suggestions)")
    for entry in suggestions:  # type: ignore[union-attr]
        lines.append(f"  - {entry['display']}")
    return "\n".join(lines)


def _emit_error(message: str) -> None:
    """Send an error message to stderr without raising an exception."""
    print(message, file=sys.stderr)


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
