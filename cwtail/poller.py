from __future__ import annotations
from typing import List, Optional, TextIO
import sys
import threading
import time

from .config import log


class Ticker:
    """
    One periodic timer shared by every Poller. Each tick wakes all waiters.
    """
    def __init__(self, interval: float):
        self.interval = interval
        self._cond = threading.Condition()
        self._ticks = 0

    @property
    def ticks(self) -> int:
        with self._cond:
            return self._ticks

    def start(self) -> threading.Thread:
        t = threading.Thread(target=self._run, name="ticker", daemon=True)
        t.start()
        return t

    def _run(self) -> None:
        next_at = time.monotonic() + self.interval
        while True:
            time.sleep(max(0.0, next_at - time.monotonic()))
            self.tick()
            next_at += self.interval

    def tick(self) -> None:
        with self._cond:
            self._ticks += 1
            self._cond.notify_all()

    def wait(self, seen: int) -> int:
        """
        Block until a tick newer than `seen` has fired and return the current count.
        """
        with self._cond:
            self._cond.wait_for(lambda: self._ticks > seen)
            return self._ticks


def fetch_stream_logs(client, group: str, stream: str) -> List[str]:
    # no time range or token: the service's default window decides what comes back
    resp = client.get_log_events(logGroupName=group, logStreamName=stream)
    return [e["message"] for e in resp.get("events", [])]


class Poller:
    def __init__(self, client, group: str, stream: str, ticker: Ticker, out: Optional[TextIO] = None):
        self.client = client
        self.group = group
        self.stream = stream
        self.ticker = ticker
        self.out = out

    def _print(self, line: str) -> None:
        out = self.out or sys.stdout
        out.write(line + "\n")
        out.flush()

    def poll_once(self) -> None:
        self._print(f"fetching logs for stream: {self.stream} in group: {self.group}")
        try:
            records = fetch_stream_logs(self.client, self.group, self.stream)
        except Exception as exc:
            self._print(f"failed to fetch logs for stream {self.stream}, err: {exc}")
            log.debug(f"[poll] fetch failed group={self.group} stream={self.stream}", exc_info=True)
            return

        log.debug(f"[poll] group={self.group} stream={self.stream} records={len(records)}")
        for record in records:
            self._print(record)

    def run(self, seen: Optional[int] = None) -> None:
        if seen is None:
            seen = self.ticker.ticks
        while True:
            seen = self.ticker.wait(seen)
            self.poll_once()

    def start(self) -> threading.Thread:
        # ticks fired after start() returns must reach this poller
        t = threading.Thread(target=self.run, args=(self.ticker.ticks,), name=f"poller:{self.group}", daemon=True)
        t.start()
        log.info(f"[poll] started group={self.group} stream={self.stream}")
        return t
