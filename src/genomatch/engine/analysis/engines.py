import asyncio
from concurrent.futures import Future, ThreadPoolExecutor
from contextlib import AbstractContextManager
from typing import Any, Union
from queue import Queue

from genomatch.engine.analysis.matcher import GenomeMatcher
from genomatch.engine.exceptions.matching import NoRelatedGenomesException
from genomatch.engine.structures.genomics import Genome, NamedRelatedGenomes


class AsyncGenomeMatchingEngine(AbstractContextManager):
    """
    Runs related genome queries against a fully built GenomeMatcher on a thread pool.

    Results are yielded through async iteration in the order they complete. The
    matcher must not be given new genomes while queries are running.
    """

    def __enter__(self):
        self._thread_pool = ThreadPoolExecutor(self._max_threads, thread_name_prefix="async-genome-matching")
        return self

    def __init__(self, genome_matcher: GenomeMatcher, max_threads: int = 4, stop_on_fail: bool = False):
        self._max_threads = max_threads
        self._genome_matcher = genome_matcher
        self._stop_on_fail = stop_on_fail
        self._work_left = 0 # only touched from the submitting thread
        self._work_complete: Queue[Future] = Queue()

    def find_related_genomes(self, query: Genome, fragment_match_length: int, exact_match_only: bool, match_percent_threshold: float, **associated_data):
        work = self._thread_pool.submit(
            self.work, query, fragment_match_length, exact_match_only, match_percent_threshold, **associated_data)
        self._work_left += 1
        work.add_done_callback(self._work_complete.put)

    def work(self, query: Genome, fragment_match_length: int, exact_match_only: bool, match_percent_threshold: float, **associated_data):
        try:
            related_genomes = self._genome_matcher.find_related_genomes(query, fragment_match_length, exact_match_only, match_percent_threshold)
        except NoRelatedGenomesException as e:
            if self._stop_on_fail:
                raise e
            return NamedRelatedGenomes(query.name, None), associated_data
        return NamedRelatedGenomes(query.name, tuple(related_genomes)), associated_data

    async def next_completed(self) -> Union[tuple[NamedRelatedGenomes, dict[str, Any]], None]:
        if self._work_left <= 0:
            return None
        future_now = await asyncio.to_thread(self._work_complete.get)
        self._work_left -= 1
        return future_now.result()

    def __exit__(self, exc_type, exc_value, traceback):
        self.shutdown()

    def __aiter__(self):
        return self

    async def __anext__(self):
        result = await self.next_completed()
        if result is None:
            raise StopAsyncIteration
        return result

    def shutdown(self):
        self._thread_pool.shutdown(wait=True, cancel_futures=True)
