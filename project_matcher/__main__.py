"""
Run the recommendation engine against a survey file and a CSV catalog.

Usage:
    python -m project_matcher --survey survey.json --catalog projects.csv [--top-n 5]
"""
from __future__ import annotations

import argparse
import asyncio
import json
import logging
import sys
from pathlib import Path

from .llm.config import DEFAULT_LLM_CONFIG, LLMConfig
from .recommendations.data_store import CsvCandidateStore
from .recommendations.engine import DEFAULT_TOP_N, RecommendationEngine
from .recommendations.exceptions import RecommendationError
from .recommendations.explanations import build_explainer
from .recommendations.models import Survey


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="project_matcher", description=__doc__.splitlines()[1])
    parser.add_argument("--survey", required=True, type=Path, help="JSON file with the survey answers")
    parser.add_argument("--catalog", required=True, type=Path, help="CSV project catalog")
    parser.add_argument("--top-n", type=int, default=DEFAULT_TOP_N)
    parser.add_argument("--no-llm", action="store_true", help="Use template explanations only")
    parser.add_argument("--verbose", action="store_true")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = _parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    survey = Survey.model_validate_json(args.survey.read_text(encoding="utf-8"))
    config = LLMConfig(enabled=False) if args.no_llm else DEFAULT_LLM_CONFIG
    engine = RecommendationEngine(CsvCandidateStore(args.catalog), build_explainer(config))

    try:
        result = asyncio.run(engine.process_survey(survey, args.top_n))
    except RecommendationError as exc:
        print(f"Failed to generate recommendations: {exc}", file=sys.stderr)
        return 1

    print(json.dumps(result.model_dump(), indent=2, ensure_ascii=False))
    return 0


if __name__ == "__main__":
    sys.exit(main())
