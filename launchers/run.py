import argparse
import logging
import sys
from pathlib import Path
import os
os.environ['PYGAME_HIDE_SUPPORT_PROMPT'] = "hide"

# Ensure repo root is on sys.path
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from engine.app.loop import run_game


def parse_screen(value: str) -> tuple[int, int]:
    try:
        w, h = map(int, value.lower().split("x"))
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected WxH, got {value!r}")
    return w, h


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Tap Challenge Launcher")
    parser.add_argument("--game", default="tap_challenge", help="Game folder name under games/")
    parser.add_argument("--screen", type=parse_screen, default=(480, 800), help="Screen size WxH, e.g. 480x800")
    parser.add_argument("--fps", type=int, default=60, help="Frame rate cap")
    parser.add_argument("--mirror", action="store_true", help="Mirror the game window horizontally")
    parser.add_argument("--mute", action="store_true", help="Disable sound effects")
    parser.add_argument("--volume", type=float, default=0.8, help="Sound effect volume 0..1")
    parser.add_argument("--data-dir", type=Path, default=None, help="Directory for saved data (high scores)")
    parser.add_argument("--log-level", default="INFO",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"], help="Logging verbosity")
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    run_game(
        game_id=args.game,
        screen_size=args.screen,
        fps=args.fps,
        mirror=args.mirror,
        muted=args.mute,
        volume=args.volume,
        data_dir=args.data_dir,
    )


if __name__ == "__main__":
    main()
