"""
Command-line entry point.

    python -m promptpress.run_reduce notes.txt --keep-spaces --stem aggressive
    cat prompt.txt | python -m promptpress.run_reduce --config options.yaml --stats

Options from `--config` (YAML, keys as in ReductionConfig) are applied first;
flags given on the command line override them.
"""

import argparse
import json
import logging
import sys
from dataclasses import fields, replace

import yaml

from promptpress.core.reduction.config import ReductionConfig
from promptpress.core.token_counting.savings import format_cost
from promptpress.services.reduction_service import ReductionService

logger = logging.getLogger("promptpress.cli")


def load_config(path: str | None) -> ReductionConfig:
    if not path:
        return ReductionConfig()
    with open(path, "r", encoding="utf-8") as file:
        raw = yaml.safe_load(file) or {}
    known = {f.name for f in fields(ReductionConfig)}
    unknown = set(raw) - known
    if unknown:
        logger.warning(f"Ignoring unknown config keys: {sorted(unknown)}")
    values = {k: v for k, v in raw.items() if k in known}
    for key in ("custom_stopwords", "exclude_stopwords"):
        if key in values:
            values[key] = tuple(values[key] or ())
    return ReductionConfig(**values)


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="promptpress", description="Shrink text before sending it to an LLM."
    )
    p.add_argument("input", nargs="?", help="text file to read (stdin when omitted)")
    p.add_argument("--config", help="YAML file with reduction options")
    p.add_argument(
        "--keep-stopwords", dest="remove_stopwords", action="store_false", default=None
    )
    p.add_argument(
        "--drop-punctuation", dest="remove_punctuation", action="store_true", default=None
    )
    p.add_argument(
        "--keep-spaces", dest="remove_spaces", action="store_false", default=None
    )
    p.add_argument(
        "--stem",
        dest="stemmer",
        nargs="?",
        const="light",
        default=None,
        help="enable stemming with the given variant (light, extended, aggressive)",
    )
    p.add_argument("--language", default=None)
    p.add_argument(
        "--stopword",
        dest="custom_stopwords",
        action="append",
        default=None,
        help="extra word to remove (repeatable)",
    )
    p.add_argument(
        "--keep-word",
        dest="exclude_stopwords",
        action="append",
        default=None,
        help="stopword to keep (repeatable)",
    )
    p.add_argument(
        "--stats", action="store_true", help="print stats and savings as JSON to stderr"
    )
    return p


def main(argv: list[str] | None = None) -> int:
    logging.basicConfig(
        level=logging.INFO, format="%(asctime)s - %(levelname)s - %(message)s"
    )
    args = build_parser().parse_args(argv)

    cfg = load_config(args.config)
    overrides = {
        k: v
        for k, v in {
            "remove_stopwords": args.remove_stopwords,
            "remove_punctuation": args.remove_punctuation,
            "remove_spaces": args.remove_spaces,
            "language": args.language,
        }.items()
        if v is not None
    }
    for key in ("custom_stopwords", "exclude_stopwords"):
        extra = getattr(args, key)
        if extra:
            overrides[key] = tuple(getattr(cfg, key)) + tuple(extra)
    if args.stemmer is not None:
        overrides["use_stemming"] = True
        overrides["stemmer"] = args.stemmer
    cfg = replace(cfg, **overrides)

    if args.input:
        with open(args.input, "r", encoding="utf-8") as file:
            text = file.read()
    else:
        text = sys.stdin.read()

    result = ReductionService().reduce(text, cfg, with_savings=args.stats)
    sys.stdout.write(result.reduced + "\n")

    if args.stats:
        payload = result.to_dict()
        payload.pop("original")
        payload.pop("reduced")
        sys.stderr.write(json.dumps(payload, indent=2) + "\n")
        savings = result.savings
        if savings is not None and savings.cost_savings:
            top = savings.cost_savings[0]
            logger.info(
                f"Saved {savings.tokens_saved} tokens ({savings.percentage_saved:.1f}%), "
                f"{format_cost(top.total_cost)} per call on {top.model}"
            )
    return 0


if __name__ == "__main__":
    sys.exit(main())
