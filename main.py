import sys
import json
import logging
import argparse

import yaml
from pydantic import ValidationError

from matchmaking.config_loader import load_config
from matchmaking.schemas import load_fruits, MatchSummary
from matchmaking.scorer import MatchingService
from matchmaking.llm import (
    describe_attributes, describe_preferences, generate_fallback_message
)

logger = logging.getLogger(__name__)


def configure_logging(level: str):
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        stream=sys.stderr
    )


def find_seeker(fruits, seeker_id=None, seeker_index=None):
    """Pick the seeker out of the loaded fruits by id or position."""
    if seeker_id is not None:
        for fruit in fruits:
            if fruit.id == seeker_id:
                return fruit
        raise LookupError(f"No fruit with id {seeker_id!r}")

    if seeker_index is None or not 0 <= seeker_index < len(fruits):
        raise LookupError(f"Seeker index {seeker_index} out of range for {len(fruits)} fruits")
    return fruits[seeker_index]


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Fruit Matchmaking - rank matches for one fruit")
    parser.add_argument('--fruits', type=str, required=True,
                        help='JSON file with an array of fruit records')
    seeker = parser.add_mutually_exclusive_group(required=True)
    seeker.add_argument('--seeker-id', type=str, help='Id of the fruit looking for matches')
    seeker.add_argument('--seeker-index', type=int, help='Position of the seeker in the fruit file')
    parser.add_argument('--limit', type=int, default=None,
                        help='Maximum matches to return (default: ranking.top_k from config)')
    parser.add_argument('--workers', type=int, default=None,
                        help='Thread pool size for scoring (default: ranking.max_workers from config)')
    parser.add_argument('--config', type=str, default='config.yaml',
                        help='Path to YAML config (default: config.yaml)')
    parser.add_argument('--explain', action='store_true',
                        help='Include self-descriptions and the template match message')
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    try:
        config = load_config(args.config)
    except (FileNotFoundError, ValidationError, ValueError, yaml.YAMLError) as e:
        configure_logging("INFO")
        logger.error(f"Invalid configuration: {e}")
        return 1

    configure_logging(config.logging.level)

    if args.workers is not None:
        config.ranking.max_workers = max(1, args.workers)

    try:
        fruits = load_fruits(args.fruits)
        seeker = find_seeker(fruits, args.seeker_id, args.seeker_index)
    except (FileNotFoundError, ValidationError, LookupError,
            json.JSONDecodeError, UnicodeDecodeError) as e:
        logger.error(f"Could not load seeker: {e}")
        return 1

    if args.limit is not None and args.limit < 0:
        logger.error(f"--limit must be >= 0, got {args.limit}")
        return 1

    service = MatchingService.from_config(config)
    logger.info(f"Ranking {len(fruits)} fruits for {seeker.type.value} {seeker.id}")
    matches = service.rank_pool(seeker, fruits, limit=args.limit)

    output = {
        'seeker': {'id': seeker.id, 'type': seeker.type.value},
        'matches': [MatchSummary.from_match(m).model_dump(mode='json', by_alias=True) for m in matches],
        # Aligned with 'matches'
        'reasons': [service.explain(seeker, m) for m in matches],
    }

    if args.explain:
        output['communication'] = {
            'attributes': describe_attributes(seeker),
            'preferences': describe_preferences(seeker),
        }
        output['message'] = generate_fallback_message(seeker, matches)

    print(json.dumps(output, indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
