"""
Passive Enumeration Runner
Queries every source at once and merges their names into one stream.
"""

import queue
import threading
import time
from concurrent.futures import ThreadPoolExecutor
from typing import Callable, Dict, Iterable, Iterator, Optional

from .base_tool import BaseTool
from ..core import console
from ..utils.deduplicator import Deduplicator

# Each worker puts exactly one of these last
_DONE = object()


def report_error(tool_name: str, error: Exception):
    console.error(f"{tool_name}: {error}")


class PassiveRunner:
    """
    Fan-out over the registered tools, fan-in over a shared queue.

    Ordering is kept within one tool's output only; names from different
    tools interleave however the threads happen to run.
    """

    def __init__(self, tools: Iterable[BaseTool],
                 on_error: Optional[Callable[[str, Exception], None]] = None):
        self.tools = tuple(tools)
        self.on_error = on_error or report_error
        self.stats: Dict[str, Dict] = {}
        self._stats_lock = threading.Lock()

    def stream(self, domain: str) -> Iterator[str]:
        """
        Yield raw names from all tools as they arrive.

        Finishes once every tool has finished, whether it succeeded or not.
        """
        self.stats = {}
        if not self.tools:
            return

        channel = queue.Queue()
        console.info('PASSIVE', f"Querying {len(self.tools)} sources for {domain}: "
                                f"{', '.join(tool.name for tool in self.tools)}")

        executor = ThreadPoolExecutor(max_workers=len(self.tools), thread_name_prefix='source')
        try:
            for tool in self.tools:
                executor.submit(self._run_tool, tool, domain, channel)

            outstanding = len(self.tools)
            while outstanding:
                item = channel.get()
                if item is _DONE:
                    outstanding -= 1
                    continue
                yield item
        finally:
            executor.shutdown(wait=False)

        failed = self.failed_tools()
        console.info('PASSIVE', f"{len(self.stats) - len(failed)}/{len(self.stats)} sources succeeded"
                                + (f" (failed: {', '.join(sorted(failed))})" if failed else ""))

    def _run_tool(self, tool: BaseTool, domain: str, channel: queue.Queue):
        start_time = time.time()
        forwarded = 0
        error = None

        try:
            for name in tool.fetch(domain):
                channel.put(name)
                forwarded += 1
        except Exception as e:
            error = e
            self.on_error(tool.name, e)
        finally:
            elapsed = time.time() - start_time
            with self._stats_lock:
                self.stats[tool.name] = {
                    'success': error is None,
                    'names': forwarded,
                    'error': str(error) if error is not None else None,
                    'elapsed_seconds': round(elapsed, 2)
                }
            self._log_tool(tool.name)
            channel.put(_DONE)

    def _log_tool(self, tool_name: str):
        stats = self.stats[tool_name]
        console.info('PASSIVE', f"{tool_name}: {stats['names']} names in {stats['elapsed_seconds']:.2f}s"
                                + ("" if stats['success'] else " (failed)"))

    def failed_tools(self):
        return [name for name, stats in self.stats.items() if not stats['success']]


def run_passive(domain: str, tools: Iterable[BaseTool], subs_only: bool = False,
                on_error: Optional[Callable[[str, Exception], None]] = None) -> Iterator[str]:
    """
    Unique normalized names for a domain, streamed in first-seen order.

    Args:
        domain: Target domain
        tools: Sources to query
        subs_only: Drop names outside the target domain
        on_error: Called with (tool_name, exception) for each failed source
    """
    runner = PassiveRunner(tools, on_error=on_error)
    deduplicator = Deduplicator(domain=domain, subs_only=subs_only)

    yield from deduplicator.process(runner.stream(domain))

    stats = deduplicator.get_statistics()
    console.info('DEDUP', f"{stats['unique']} unique of {stats['received']} received "
                          f"({stats['duplicates']} duplicates, {stats['filtered']} filtered)")
