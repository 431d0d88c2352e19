from __future__ import annotations

import argparse
import logging

from elaeht_block.game import GameConfig
from elaeht_block.visualization.highscore import DEFAULT_PATH


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="elaeht-block", description="Play Elaeht Block")
    p.add_argument("--seed", type=int, default=None, help="Seed for piece generation")
    p.add_argument("--mirror", action="store_true", help="Allow mirrored pieces")
    p.add_argument("--mute", action="store_true", help="Start with sound muted (toggle with M)")
    p.add_argument("--highscore", type=str, default=str(DEFAULT_PATH), help="High score file")
    p.add_argument("--log-level", type=str, default="WARNING")
    return p


def main() -> None:
    args = build_parser().parse_args()
    logging.basicConfig(level=args.log_level.upper(), format="%(asctime)s %(name)s %(levelname)s %(message)s")
    # pygame is only needed for the interactive front-end
    from elaeht_block.visualization.human_play import run

    run(GameConfig(random_seed=args.seed, allow_mirror=args.mirror), highscore_path=args.highscore,
        muted=args.mute)


if __name__ == "__main__":  # pragma: no cover
    main()
