"""
Master process that keeps a fixed number of worker processes alive.

Any worker exit (crash, signal or clean return) is answered with exactly one
replacement, straight away. There is no backoff and no restart limit.
"""
import logging
import os
import signal
import sys
from multiprocessing import Process
from multiprocessing.connection import wait
from typing import Callable, Dict, List, Optional

logger = logging.getLogger(__name__)


def _describe_exit(exitcode: Optional[int]) -> str:
    if exitcode is not None and exitcode < 0:
        try:
            return f"signal {signal.Signals(-exitcode).name}"
        except ValueError:
            return f"signal {-exitcode}"
    return f"exit code {exitcode}"


class Supervisor:
    def __init__(self, target: Callable, worker_count: int, args: tuple = ()):
        if worker_count < 1:
            raise ValueError("worker_count must be at least 1")
        self.target = target
        self.worker_count = worker_count
        self.args = args
        self.workers: Dict[int, Process] = {}

    def spawn_worker(self) -> Process:
        # OSError from a failed fork is fatal for the master, let it propagate
        process = Process(target=self.target, args=self.args)
        process.start()
        self.workers[process.pid] = process
        return process

    def start(self) -> None:
        logger.info(f"Master process {os.getpid()} starting {self.worker_count} workers...")
        for _ in range(self.worker_count):
            self.spawn_worker()

    def reap(self, timeout: Optional[float] = None) -> List[Process]:
        """
        Wait for workers to exit and replace each one.
        Returns the replacement processes (empty if the timeout passed first).
        """
        by_sentinel = {p.sentinel: p for p in self.workers.values()}
        ready = wait(list(by_sentinel), timeout)

        replacements = []
        for sentinel in ready:
            process = by_sentinel[sentinel]
            process.join()
            self.workers.pop(process.pid, None)
            logger.warning(
                f"Worker {process.pid} stopped ({_describe_exit(process.exitcode)}). Starting a new one..."
            )
            replacements.append(self.spawn_worker())
        return replacements

    def run(self) -> None:
        # SIGTERM on the master goes through the same teardown as Ctrl+C
        signal.signal(signal.SIGTERM, lambda signum, frame: sys.exit(0))
        self.start()
        try:
            while True:
                self.reap()
        except KeyboardInterrupt:
            logger.info("Master interrupted")
        finally:
            self.stop()

    def stop(self, timeout: float = 5.0) -> None:
        """Tear every worker down without replacing it. Only used on master shutdown."""
        workers = list(self.workers.values())
        self.workers.clear()

        for process in workers:
            if process.is_alive():
                process.terminate()
        for process in workers:
            process.join(timeout)
            if process.is_alive():
                logger.warning(f"Worker {process.pid} ignored SIGTERM, killing it")
                process.kill()
                process.join()
        logger.info(f"Stopped {len(workers)} workers")
