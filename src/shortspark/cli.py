from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path
from typing import Any

from dotenv import load_dotenv
from pydantic import ValidationError

from .brief.model import SAMPLE_BRIEF
from .errors import EngineError
from .orchestrator import StudioOrchestrator
from .brief.normalizer import snake_case_keys
from .text_utils import load_json_with_repair, slugify

logger = logging.getLogger(__name__)

FIELD_ARGS = ("topic", "audience", "tone", "goal", "brand_keywords", "duration")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Turn a creative brief into a short-video production bundle."
    )
    parser.add_argument("--topic", help="What the video is about")
    parser.add_argument("--audience", help="Who the video is for")
    parser.add_argument("--tone", help="Delivery tone, e.g. high-energy, educational, calm")
    parser.add_argument("--goal", help="Outcome the viewer should reach")
    parser.add_argument("--brand-keywords", dest="brand_keywords", help="Brand names or keywords")
    parser.add_argument("--duration", help="Target runtime in seconds (clamped to 15-60)")
    parser.add_argument(
        "--brief",
        type=Path,
        help="Path to a brief JSON/YAML file; explicit flags override its fields",
    )
    parser.add_argument(
        "--sample",
        action="store_true",
        help="Start from the built-in sample brief",
    )
    parser.add_argument(
        "--config",
        type=Path,
        help="Optional path to engine configuration JSON/YAML",
    )
    parser.add_argument(
        "--output-dir",
        type=Path,
        default=Path("data/runs"),
        help="Base directory for per-brief outputs",
    )
    parser.add_argument(
        "--stdout",
        action="store_true",
        help="Print the bundle JSON instead of writing it to disk",
    )
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    return parser


def load_brief_payload(path: Path) -> dict[str, Any]:
    text = path.read_text(encoding="utf-8")
    if path.suffix.lower() in {".yaml", ".yml"}:
        import yaml  # type: ignore[import-not-found]

        payload = yaml.safe_load(text)
    else:
        payload = load_json_with_repair(text, logger=logger)
    if not isinstance(payload, dict):
        raise EngineError(f"Brief file {path} must contain an object")
    return snake_case_keys(payload)


def collect_payload(args: argparse.Namespace) -> dict[str, Any]:
    payload: dict[str, Any] = {}
    if args.sample:
        payload.update(SAMPLE_BRIEF.model_dump())
    if args.brief:
        payload.update(load_brief_payload(args.brief))
    for name in FIELD_ARGS:
        value = getattr(args, name)
        if value is not None:
            payload[name] = value
    return payload


def main(argv: list[str] | None = None) -> None:
    import yaml  # type: ignore[import-not-found]

    load_dotenv()
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO)

    try:
        orchestrator = (
            StudioOrchestrator.from_file(args.config)
            if args.config
            else StudioOrchestrator.default()
        )
        payload = collect_payload(args)
    except (ValidationError, ValueError, OSError, yaml.YAMLError) as exc:
        parser.error(str(exc))
    if not payload:
        parser.error("Provide brief fields, --brief or --sample")

    bundle = orchestrator.run_payload(payload)
    serialized = json.dumps(bundle.model_dump(mode="json"), indent=2)
    if args.stdout:
        print(serialized)
        return

    run_dir = args.output_dir / (slugify(bundle.brief.topic) or "untitled")
    run_dir.mkdir(parents=True, exist_ok=True)
    output_path = run_dir / "bundle.json"
    output_path.write_text(serialized, encoding="utf-8")
    print(f"Wrote production bundle to {output_path}")


if __name__ == "__main__":
    main()
