"""
Background jail poller.

Fetches jails and plugins from the management API on a fixed interval, merges
them and publishes the result into the shared Snapshot. A failed cycle is
logged and skipped; the previously published snapshot stays visible until the
next successful cycle. Failed cycles still wait the full interval.
"""

import logging
import threading
from typing import Optional

from jaildash.client import JailApiClient
from jaildash.errors import FetchError, ParseError
from jaildash.merge import merge
from jaildash.snapshot import Snapshot

logger = logging.getLogger(__name__)


class JailPoller:
    """
    Poll the management API and publish into a Snapshot.
    Runs in background thread.
    """

    def __init__(self, client: JailApiClient, snapshot: Snapshot, interval: float = 30.0):
        """
        Args:
            client: API client used for both fetches
            snapshot: Snapshot to publish into (this poller is its only writer)
            interval: Seconds to wait after each cycle, successful or not (default 30s)
        """
        self.client = client
        self.snapshot = snapshot
        self.interval = interval

        self._stop_event = threading.Event()
        self._thread: Optional[threading.Thread] = None

    @property
    def running(self) -> bool:
        return self._thread is not None and self._thread.is_alive() and not self._stop_event.is_set()

    def start(self):
        """Start polling in a daemon thread; the first cycle runs immediately"""
        if self.running:
            logger.warning("Jail poller already running")
            return

        previous = self._thread
        if previous is not None and previous.is_alive():
            # A stopped loop may still be inside a fetch; it must exit before a new writer starts
            logger.info("Waiting for previous jail poller cycle to finish")
            previous.join()

        self._stop_event = threading.Event()
        self._thread = threading.Thread(
            target=self._poll_loop,
            args=(self._stop_event,),
            name="jail-poller",
            daemon=True,
        )
        self._thread.start()
        logger.info(f"Jail poller started: api={self.client.api_url_base}, interval={self.interval}s")

    def stop(self, timeout: float = 5.0):
        """Signal the loop to exit and wait briefly for the current cycle"""
        self._stop_event.set()
        if self._thread and self._thread.is_alive():
            self._thread.join(timeout=timeout)
        if self._thread and self._thread.is_alive():
            logger.info("Jail poller stopping, current cycle still in progress")
            return
        self._thread = None
        logger.info("Jail poller stopped")

    def poll_once(self) -> bool:
        """
        Run one fetch-merge-publish cycle.

        Returns:
            True if a new snapshot was published, False if the cycle failed
        """
        try:
            jails = self.client.fetch_jails()
            plugins = self.client.fetch_plugins()
        except (FetchError, ParseError) as e:
            logger.warning("Jail refresh failed, keeping previous snapshot: %s", e)
            self.snapshot.record_failure(str(e))
            return False

        records = merge(jails, plugins)
        self.snapshot.replace(records)
        logger.debug("Published snapshot with %d jail(s)", len(records))
        return True

    def _poll_loop(self, stop_event: threading.Event):
        while not stop_event.is_set():
            try:
                self.poll_once()
            except Exception as e:
                logger.error(f"Unexpected error during jail refresh: {e}", exc_info=True)
                self.snapshot.record_failure(f"unexpected error: {e}")

            stop_event.wait(self.interval)
