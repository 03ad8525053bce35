import argparse
import sys
import threading
from typing import Callable, List, Optional, TextIO

from botocore.exceptions import BotoCoreError

from . import config
from .config import log
from .poller import Poller, Ticker
from .streams import TailError, parse_groups, resolve_streams


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Tail the latest stream of one or more CloudWatch log groups.")
    parser.add_argument("-g", dest="groups", default="", help="define multiple log groups separated by comma")
    return parser


def block_forever() -> None:
    threading.Event().wait()


def run(
    argv: Optional[List[str]] = None,
    ticker: Optional[Ticker] = None,
    wait: Callable[[], None] = block_forever,
    out: Optional[TextIO] = None,
) -> None:
    client = config.new_logs_client()

    args = build_parser().parse_args(argv)
    groups = parse_groups(args.groups)
    streams = resolve_streams(client, groups)

    ticker = ticker or Ticker(config.REFRESH_RATE)
    ticker.start()

    for group, stream in streams.items():
        Poller(client, group, stream, ticker, out=out).start()

    log.info(f"[tail] running {len(streams)} poller(s) every {ticker.interval}s")
    wait()


def main(argv: Optional[List[str]] = None) -> None:
    try:
        run(argv)
    except (TailError, BotoCoreError) as exc:
        print(exc)
        sys.exit(1)
