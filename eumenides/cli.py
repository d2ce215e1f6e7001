"""
eumenides — classify text from the command line.

Usage:
    eumenides "You are all INCOMPETENT IDIOTS!!!"
    echo "some post" | eumenides --sensitivity high --tier premium
    eumenides --json "text one" "text two"
    eumenides --hybrid "borderline text"     # uses EUMENIDES_CLASSIFIER
    eumenides --stats | --languages | --sensitivities
"""

from __future__ import annotations

import argparse
import asyncio
import json
import sys
from typing import Optional

from eumenides.config import settings
from eumenides.detector import explain, get_detector
from eumenides.logging import setup_logging
from eumenides.sensitivity import available_sensitivities, is_available, required_tier


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="eumenides",
        description="Eumenides aggression detector",
    )
    parser.add_argument(
        "texts",
        nargs="*",
        help="Texts to classify (default: one text read from stdin)",
    )
    parser.add_argument(
        "--sensitivity",
        default=settings.DEFAULT_SENSITIVITY,
        help=f"Sensitivity level or alias (default: {settings.DEFAULT_SENSITIVITY})",
    )
    parser.add_argument(
        "--tier",
        default=settings.DEFAULT_TIER,
        help=f"Entitlement tier: free, basic, premium (default: {settings.DEFAULT_TIER})",
    )
    parser.add_argument(
        "--hybrid",
        action="store_true",
        help="Consult the configured secondary classifier for borderline texts",
    )
    parser.add_argument("--json", action="store_true", help="Output JSON")
    parser.add_argument("--stats", action="store_true", help="Show dictionary statistics")
    parser.add_argument("--languages", action="store_true", help="List loaded languages")
    parser.add_argument(
        "--sensitivities",
        action="store_true",
        help="List sensitivity levels available to --tier",
    )
    return parser


def _emit(payload, as_json: bool, text_lines: list[str]) -> None:
    if as_json:
        print(json.dumps(payload, indent=2, ensure_ascii=False))
    else:
        print("\n".join(text_lines))


async def _classify_hybrid(texts: list[str], sensitivity: str, tier: str) -> list:
    from eumenides.classifiers.factory import get_classifier
    from eumenides.hybrid import HybridDetector

    hybrid = HybridDetector(get_detector(), get_classifier())
    return [await hybrid.classify(text, sensitivity, tier) for text in texts]


def main(argv: Optional[list[str]] = None) -> int:
    args = _build_parser().parse_args(argv)
    setup_logging()
    detector = get_detector()

    if args.stats:
        stats = detector.stats()
        _emit(stats, args.json, [f"{k}: {v}" for k, v in stats.items()])
        return 0

    if args.languages:
        languages = detector.supported_languages()
        _emit(languages, args.json, [f"{l['code']}  {l['name']}" for l in languages])
        return 0

    if args.sensitivities:
        levels = available_sensitivities(args.tier)
        _emit(
            levels, args.json,
            [f"{l['value']:<12} threshold={l['threshold']:<4} tier={l['tier']}" for l in levels],
        )
        return 0

    if not is_available(args.sensitivity, args.tier):
        print(
            f"Warning: sensitivity '{args.sensitivity}' requires the "
            f"{required_tier(args.sensitivity)} tier",
            file=sys.stderr,
        )

    texts = args.texts or [sys.stdin.read()]

    if args.hybrid:
        results = asyncio.run(_classify_hybrid(texts, args.sensitivity, args.tier))
    else:
        results = [detector.classify(text, args.sensitivity, args.tier) for text in texts]

    lines = []
    for result in results:
        verdict = "AGGRESSIVE" if result.is_aggressive else "ok"
        lines.append(f"[{verdict}] {explain(result)}")
    _emit([r.to_dict() for r in results], args.json, lines)

    return 1 if any(r.is_aggressive for r in results) else 0


if __name__ == "__main__":
    sys.exit(main())
