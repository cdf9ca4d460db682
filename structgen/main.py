"""CLI entry point for the documentation struct generator."""

import argparse
import logging
import sys
import time
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

from structgen.config import TypeConfig, load_config
from structgen.pipeline.loader import DEFAULT_REGION, load_document
from structgen.pipeline.builder import discover_structs
from structgen.pipeline.validator import validate
from structgen.pipeline.emitter import emit_code
from structgen.pipeline.report import summarize

logger = logging.getLogger(__name__)


def run_pipeline(html_path: str, config: TypeConfig, region: str | None = DEFAULT_REGION) -> dict:
    """Run the full extraction pipeline, return final state."""
    state: dict = {"html_path": html_path, "region": region, "config": config}

    state.update(load_document(state))
    state.update(discover_structs(state))
    state.update(validate(state))
    state.update(emit_code(state))
    state.update(summarize(state))

    return state


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Generate Zig structs from Field/Type/Description tables in an HTML page.")
    parser.add_argument("html_path", help="Path to the HTML documentation page")
    parser.add_argument("--output", "-o", default="output/types.zig",
                        help="Output file, or '-' for stdout")
    parser.add_argument("--region", default=DEFAULT_REGION,
                        help="id of the element holding the type definitions")
    parser.add_argument("--no-region", dest="region", action="store_const", const=None,
                        help="Use the whole page")
    parser.add_argument("--integer-repr", help="Zig type for documented 'Integer'")
    parser.add_argument("--float-repr", help="Zig type for documented 'Float'")
    parser.add_argument("--true-as-bool", action=argparse.BooleanOptionalAction, default=None,
                        help="Map documented 'True' to bool instead of @TypeOf(true)")
    parser.add_argument("--json-value", dest="prefer_json_value", action=argparse.BooleanOptionalAction,
                        default=None, help="Map 'X or Y' types to std.json.Value (--no-json-value: unsupported)")
    parser.add_argument("--strict", action=argparse.BooleanOptionalAction, default=None,
                        help="Fail when a field type cannot be mapped")
    parser.add_argument("--log-level", default="INFO",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(level=getattr(logging, args.log_level), format="%(levelname)s %(name)s: %(message)s")

    html_path = Path(args.html_path)
    if not html_path.exists():
        logger.error("File not found: %s", html_path)
        return 1

    try:
        config = load_config().with_overrides(
            integer_repr=args.integer_repr,
            float_repr=args.float_repr,
            true_as_bool=args.true_as_bool,
            prefer_json_value_for_unions=args.prefer_json_value,
            strict=args.strict,
        )
    except ValueError as exc:
        logger.error("Invalid configuration: %s", exc)
        return 1

    start = time.time()
    logger.info("Extracting types from %s", html_path)

    try:
        state = run_pipeline(str(html_path), config, region=args.region)
    except Exception:
        logger.exception("Pipeline failed")
        return 1

    code = state.get("code", "")
    if args.output == "-":
        sys.stdout.write(code)
    else:
        output_path = Path(args.output)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(code, encoding="utf-8")

    summary = state["summary"]
    logger.info("Done: %d types, %d ignored -> %s (%.1fs)",
                summary["accepted"], summary["rejected"], args.output, time.time() - start)
    return 0


if __name__ == "__main__":
    sys.exit(main())
