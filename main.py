"""Entry point for playing Tank Arena."""

import argparse
import logging

from tank_arena import ArenaSettings, run_pygame


def main() -> None:
    parser = argparse.ArgumentParser(description="Tank Arena grid shooter")
    parser.add_argument("--seed", type=int, default=None, help="seed for a reproducible arena")
    parser.add_argument("--cell-size", type=int, default=24, help="character cell height in pixels")
    parser.add_argument(
        "--debug",
        action="store_true",
        help="print additional debug information to the console",
    )
    args = parser.parse_args()
    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    run_pygame(
        settings=ArenaSettings(seed=args.seed),
        seed=args.seed,
        cell_size=args.cell_size,
        debug=args.debug,
    )


if __name__ == "__main__":
    main()
