"""Entry point for running the sample adventure."""

import argparse
import contextlib

from mystery.config import load_config, load_messages
from mystery.game import load_world, run
from mystery.io import ConsoleIO, run_curses


def run_cli(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(prog="mystery")
    parser.add_argument(
        "--world",
        default=None,
        metavar="FILE",
        help="World file to play (defaults to the bundled motel)",
    )
    parser.add_argument(
        "--config",
        default=None,
        metavar="FILE",
        help="YAML file overriding title, prompt and editing limits",
    )
    parser.add_argument(
        "--plain",
        action="store_true",
        help="Read raw bytes from stdin and print plain text instead of using curses",
    )
    parser.add_argument(
        "--debug",
        nargs="?",
        const=True,
        metavar="FILE",
        help="Enable debug mode; optionally provide FILE to redirect STDERR to it",
    )
    args = parser.parse_args(argv)
    debug = bool(args.debug)
    config = load_config(args.config)
    messages = load_messages()
    world = load_world(args.world, debug=debug)

    def play(io) -> None:
        run(world, io, io, config=config, messages=messages)

    with contextlib.ExitStack() as stack:
        if isinstance(args.debug, str):  # --debug FILE provided
            fh = stack.enter_context(open(args.debug, "w", encoding="utf-8"))
            stack.enter_context(contextlib.redirect_stderr(fh))
        if args.plain:
            play(ConsoleIO(wrap_width=config.wrap_width))
        else:
            run_curses(play)


if __name__ == "__main__":
    run_cli()
