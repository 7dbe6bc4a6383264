"""Entry point kept minimal by delegating to Engine.

Command-line flags override a few `config` values at start-up; everything
else lives in `config.py`.
"""

from __future__ import annotations

import argparse

from config import DEBUG, HIGH_SCORE_PATH, MUTE


def parse_args(argv=None) -> argparse.Namespace:
    ap = argparse.ArgumentParser(description="Route trains through the switches without crashing")
    ap.add_argument("--mute", action="store_true", default=MUTE, help="Disable sound effects")
    ap.add_argument(
        "--debug",
        action="store_true",
        default=DEBUG,
        help="Log clicks and show per-train status lines",
    )
    ap.add_argument(
        "--highscore-file",
        default=HIGH_SCORE_PATH,
        help="JSON file holding the persisted high score",
    )
    return ap.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)

    from core.engine import Engine
    from core.highscore import HighScoreStore
    from railway.railscene import RailScene
    from sound.sound_utils import Sounds

    Sounds.muted = args.mute
    Engine(
        lambda: RailScene(high_scores=HighScoreStore(args.highscore_file), debug=args.debug)
    ).run()


if __name__ == "__main__":
    main()
