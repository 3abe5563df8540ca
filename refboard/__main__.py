"""Command-line entry point for Refboard."""

from __future__ import annotations

import argparse
import logging
from dataclasses import replace

from .app import RefboardApp
from .config import AppConfig, BoardConfig, DisplayConfig


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Arrange reference images on a board.")
    parser.add_argument(
        "images",
        nargs="*",
        help="Image files to place on the board at startup.",
    )
    parser.add_argument(
        "--width",
        type=int,
        help="Override the display width.",
    )
    parser.add_argument(
        "--height",
        type=int,
        help="Override the display height.",
    )
    parser.add_argument(
        "--fps",
        type=int,
        help="Override the target frame rate.",
    )
    parser.add_argument(
        "--fullscreen",
        dest="fullscreen",
        action="store_true",
        help="Start the board in full-screen mode.",
    )
    parser.add_argument(
        "--windowed",
        dest="fullscreen",
        action="store_false",
        help="Force the board to start in windowed mode.",
    )
    parser.add_argument(
        "--handle-radius",
        type=int,
        help="Radius in pixels of the scale and rotate handles.",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging verbosity.",
    )
    parser.set_defaults(fullscreen=None)
    return parser


def parse_config(namespace: argparse.Namespace) -> AppConfig:
    config = AppConfig()
    display = config.display
    board = config.board
    fullscreen = (
        display.fullscreen
        if namespace.fullscreen is None
        else namespace.fullscreen
    )

    return replace(
        config,
        display=DisplayConfig(
            width=namespace.width or display.width,
            height=namespace.height or display.height,
            caption=display.caption,
            frame_rate=namespace.fps or display.frame_rate,
            fullscreen=fullscreen,
            background=display.background,
        ),
        board=BoardConfig(
            handle_radius=namespace.handle_radius or board.handle_radius,
            default_card_size=board.default_card_size,
            initial_cards=board.initial_cards,
        ),
    )


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    config = parse_config(args)
    app = RefboardApp(config, images=args.images)
    app.run()
    return 0


if __name__ == "__main__":  # pragma: no cover - module use only
    raise SystemExit(main())
