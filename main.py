#!/usr/bin/env python3
# This project was developed with assistance from AI tools.
import argparse
import json
import logging
import sys
from pathlib import Path

from pydantic import ValidationError

from config import config
from models import DisclosureRecord
from orchestrator import DISCLOSURE_FILENAME, HAZARD_FILENAME, asset_sources, create_orchestrator, write_pdf
from presets import apply_preset
from rendering import RenderError, build_assembler, render_calibration, render_disclosure, render_hazard_document
from utils.extraction_cache import get_extraction_cache
from utils.geocoding import lookup_hazards
from utils.record_merge import apply_edits, build_record, parse_edit


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="重要事項説明書 (rental disclosure) builder",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python main.py run contract.pdf registry.pdf            # Extract, build, look up hazards, render
  python main.py run contract.pdf registry.pdf --set contract.startDate=2025年4月1日
  python main.py extract contract.pdf registry.pdf -o record.json
  python main.py render record.json -o 重要事項説明書.pdf    # Render an edited record
  python main.py hazard --address 京都府京都市南区西九条池ノ内町93
  python main.py calibrate -o calibration.pdf             # Outline every registered slot
  python main.py cache --stats

Environment Variables (see .env.example):
  OPENAI_API_KEY        Required for extraction. Your OpenAI API key
  OPENAI_BASE_URL       Optional. Custom endpoint (default: https://api.openai.com/v1)
  OPENAI_MODEL          Optional. Model name (default: gpt-4o-mini)
  TEMPLATE_PATH         Optional. Template PDF; fresh pages are rendered without one
  FONT_PATH / FONT_URL  Japanese TrueType font to embed
  AGENCY_PRESET_PATH    Optional. JSON with the agency's broker/officer/guarantee details
        """
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default=None,
        help="Logging level (default: LOG_LEVEL or WARNING)"
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    def add_edits(sub):
        sub.add_argument(
            "--set",
            dest="edits",
            action="append",
            default=[],
            metavar="PATH=VALUE",
            help="Manual edit applied last, e.g. building.name=サンプルマンション101 (repeatable)"
        )

    run = subparsers.add_parser("run", help="Full pipeline: extract, build record, hazard lookup, render")
    run.add_argument("contract", type=str, help="Lease contract PDF")
    run.add_argument("registry", type=str, help="Registry extract PDF")
    run.add_argument("--output-dir", "-o", type=str, default=None,
                     help="Directory for output PDFs (default: ./output)")
    run.add_argument("--no-cache", action="store_true", help="Disable extraction caching for this run")
    run.add_argument("--no-hazard", action="store_true", help="Skip hazard lookup and the hazard-map PDF")
    add_edits(run)

    extract = subparsers.add_parser("extract", help="Extract both PDFs into a record JSON file")
    extract.add_argument("contract", type=str, help="Lease contract PDF")
    extract.add_argument("registry", type=str, help="Registry extract PDF")
    extract.add_argument("--output", "-o", type=str, default=None,
                         help="Record JSON path (default: print to stdout)")
    extract.add_argument("--no-cache", action="store_true", help="Disable extraction caching for this run")

    render = subparsers.add_parser("render", help="Render a record JSON file into the template")
    render.add_argument("record", type=str, help="Record JSON (camelCase keys)")
    render.add_argument("--output", "-o", type=str, default=None,
                        help=f"Output PDF (default: OUTPUT_DIR/{DISCLOSURE_FILENAME})")
    add_edits(render)

    hazard = subparsers.add_parser("hazard", help="Look up hazards and render the hazard-map PDF")
    source = hazard.add_mutually_exclusive_group(required=True)
    source.add_argument("--record", type=str, help="Record JSON; its building address and hazard report are used")
    source.add_argument("--address", type=str, help="Property address")
    hazard.add_argument("--output", "-o", type=str, default=None,
                        help=f"Output PDF (default: OUTPUT_DIR/{HAZARD_FILENAME})")

    calibrate = subparsers.add_parser("calibrate", help="Draw every registered field box over the template")
    calibrate.add_argument("--output", "-o", type=str, default="calibration.pdf", help="Output PDF")

    cache = subparsers.add_parser("cache", help="Extraction cache maintenance")
    cache.add_argument("--stats", action="store_true", help="Show cache statistics")
    cache.add_argument("--clear", action="store_true", help="Clear the extraction cache")

    return parser.parse_args(argv)


def validate_environment() -> bool:
    """Validate the environment and configuration."""
    try:
        config.validate()
        return True
    except ValueError as e:
        print(f"[ERROR] Configuration Error: {e}")
        print("\nPlease ensure you have:")
        print("  1. Created a .env file with your OPENAI_API_KEY")
        print("  2. Or set the OPENAI_API_KEY environment variable")
        return False


def parse_edits(raw_edits: list[str]) -> dict:
    """--set arguments as an ordered path -> value mapping."""
    edits = {}
    for raw in raw_edits:
        path, value = parse_edit(raw)
        edits[path.value] = value
    return edits


def load_record(path: str) -> DisclosureRecord:
    """Record from JSON; unknown keys are ignored and invalid values keep their defaults."""
    data = json.loads(Path(path).read_text(encoding="utf-8"))
    return build_record(data)


def cmd_run(args) -> int:
    if not validate_environment():
        return 1

    for pdf in (args.contract, args.registry):
        if not Path(pdf).exists():
            print(f"[ERROR] File does not exist: {pdf}")
            return 1

    orchestrator = create_orchestrator()
    final_state = orchestrator.run(
        contract_path=args.contract,
        registry_path=args.registry,
        output_dir=args.output_dir,
        edits=parse_edits(args.edits),
        use_cache=not args.no_cache,
        render_hazard=not args.no_hazard,
    )

    if final_state.get("render_succeeded"):
        print("\nWorkflow completed successfully!")
        return 0
    print("\n[WARNING] Workflow completed with issues.")
    return 1


def cmd_extract(args) -> int:
    if not validate_environment():
        return 1

    orchestrator = create_orchestrator()
    use_cache = not args.no_cache
    contract_data = orchestrator.contract_extractor.extract(args.contract, use_cache=use_cache)
    registry_data = orchestrator.registry_extractor.extract(args.registry, use_cache=use_cache)

    record = apply_preset(build_record(contract_data, registry_data), orchestrator.preset)
    payload = record.model_dump_json(by_alias=True, indent=2)

    if args.output:
        Path(args.output).write_text(payload, encoding="utf-8")
        print(f"Record written to {args.output}")
    else:
        print(payload)
    return 0


def cmd_render(args) -> int:
    record = apply_edits(load_record(args.record), parse_edits(args.edits))
    output = Path(args.output) if args.output else config.OUTPUT_DIR / DISCLOSURE_FILENAME

    pdf = render_disclosure(record, asset_sources(), version=config.TEMPLATE_VERSION, mark_style=config.MARK_STYLE)
    write_pdf(output, pdf)
    print(f"Disclosure written to {output}")
    return 0


def cmd_hazard(args) -> int:
    if args.record:
        record = load_record(args.record)
        address = record.property_address
        report = record.hazard_report
    else:
        address = args.address
        report = None

    if not address:
        print("[ERROR] No property address to look up")
        return 1

    looked_up = lookup_hazards(address)
    if report is not None:
        # Keep map images carried by the record
        looked_up = report.model_copy(update=looked_up.model_dump(exclude={
            "flood_map_image", "landslide_map_image", "tsunami_map_image"
        }))
    print(f"{address}: {looked_up.flood_risk}")

    output = Path(args.output) if args.output else config.OUTPUT_DIR / HAZARD_FILENAME
    write_pdf(output, render_hazard_document(looked_up, asset_sources()))
    print(f"Hazard map written to {output}")
    return 0


def cmd_calibrate(args) -> int:
    assembler = build_assembler(asset_sources(), config.TEMPLATE_VERSION, config.MARK_STYLE)
    write_pdf(Path(args.output), render_calibration(assembler))
    print(f"Calibration sheet written to {args.output}")
    return 0


def cmd_cache(args) -> int:
    cache = get_extraction_cache()
    if args.clear:
        count = cache.clear()
        print(f"Cleared {count} entries from extraction cache")
    if args.stats or not args.clear:
        stats = cache.get_stats()
        print("Extraction Cache Statistics:")
        print(f"  Total documents cached: {stats['total_documents']}")
        for doc_type, count in sorted(stats["by_type"].items()):
            print(f"  {doc_type + ':':<23} {count}")
        print(f"  Cache file: {cache.cache_path.absolute()}")
    return 0


COMMANDS = {
    "run": cmd_run,
    "extract": cmd_extract,
    "render": cmd_render,
    "hazard": cmd_hazard,
    "calibrate": cmd_calibrate,
    "cache": cmd_cache,
}


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    args = parse_args(argv)
    logging.basicConfig(
        level=(args.log_level or config.LOG_LEVEL).upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        return COMMANDS[args.command](args)
    except RenderError as e:
        print(f"[ERROR] Rendering failed: {e}")
        return 1
    except (ValueError, ValidationError, OSError, RuntimeError) as e:
        print(f"[ERROR] {e}")
        return 1
    except KeyboardInterrupt:
        print("\n\n[WARNING] Interrupted by user")
        return 130


if __name__ == "__main__":
    sys.exit(main())
