from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

from pydantic import ValidationError

from cargo_packer.config import load_settings
from cargo_packer.containers import CONTAINER_PRESETS_CM, get_container
from cargo_packer.geometry import find_layout_violations
from cargo_packer.io.schemas import dump_placements, load_placements, load_request
from cargo_packer.metrics import format_summary
from cargo_packer.models import Container
from cargo_packer.packing.first_fit import pack_boxes

logger = logging.getLogger(__name__)


def _fail(message: str) -> int:
    print(f"error: {message}", file=sys.stderr)
    return 2


def cmd_pack(args: argparse.Namespace) -> int:
    settings = load_settings()
    try:
        request = load_request(Path(args.input))
        if args.preset:
            container = get_container(args.preset)
        else:
            container = request.resolve_container(settings.default_preset)
    except (OSError, ValueError) as e:
        # ValidationError and JSONDecodeError are ValueErrors
        return _fail(str(e))

    print(f"Container: {container.length} x {container.width} x {container.height}")
    result = pack_boxes(container, request.boxes)
    print(format_summary(result))

    for inst in result.unplaced:
        name = f" ({inst.label})" if inst.label else ""
        print(f"  not placed{name}: {inst.length} x {inst.width} x {inst.height}")

    if args.output:
        output_path = dump_placements(result, args.output)
        print(f"Placements written to {output_path}")
    if args.json:
        print(json.dumps(result.model_dump(), indent=2))
    return 0


def cmd_verify(args: argparse.Namespace) -> int:
    try:
        if args.container:
            L, W, H = args.container
            container = Container(length=L, width=W, height=H)
        else:
            container = get_container(args.preset or load_settings().default_preset)
        placements = load_placements(args.placements)
    except (OSError, ValidationError, ValueError) as e:
        return _fail(str(e))

    problems = find_layout_violations(container, placements)
    for problem in problems:
        print(problem)
    if problems:
        print(f"{len(problems)} problem(s) in {len(placements)} placements")
        return 1
    print(f"OK: {len(placements)} placements, no overlaps, all inside the container")
    return 0


def cmd_presets(args: argparse.Namespace) -> int:
    for name, dims in CONTAINER_PRESETS_CM.items():
        print(f"{name:8} {dims['length']} x {dims['width']} x {dims['height']}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="cargo-packer", description="Greedy container packing CLI")
    sub = parser.add_subparsers(dest="command", required=True)

    p = sub.add_parser("pack", help="Pack the boxes of a request file into one container")
    p.add_argument("input", help="Request JSON: {container | container_preset, boxes} or a bare box list")
    p.add_argument("--output", help="Write placements to this JSON file")
    p.add_argument("--preset", help="Container preset, overrides the request")
    p.add_argument("--json", action="store_true", help="Also print the full result as JSON")
    p.set_defaults(func=cmd_pack)

    v = sub.add_parser("verify", help="Check an exported layout for overlaps and containment")
    v.add_argument("placements", help="Placements JSON written by 'pack --output'")
    group = v.add_mutually_exclusive_group()
    group.add_argument("--container", nargs=3, type=float, metavar=("L", "W", "H"))
    group.add_argument("--preset", help="Container preset name")
    v.set_defaults(func=cmd_verify)

    s = sub.add_parser("presets", help="List container presets")
    s.set_defaults(func=cmd_presets)

    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=load_settings().log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
