# services/queue/memory_queue.py
import itertools
import logging
import threading
from collections import defaultdict, deque
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field

from files_manager.services.queue.base_queue import BaseJobQueue

logger = logging.getLogger(__name__)


@dataclass
class Job:
    id: int
    job_type: str
    payload: dict = field(default_factory=dict)
    attempts: int = 0


class MemoryJobQueue(BaseJobQueue):
    """In-process queue (development and tests).

    Jobs wait until ``consume`` drains them with a thread pool. A failing job
    is retried up to ``max_retries`` times, then recorded in ``failed``.
    """

    def __init__(self, max_retries=3):
        super().__init__()
        self.max_retries = max_retries
        self.failed = []
        self._pending = defaultdict(deque)
        self._ids = itertools.count(1)
        self._lock = threading.Lock()

    def enqueue(self, job_type, payload):
        with self._lock:
            job = Job(id=next(self._ids), job_type=job_type, payload=dict(payload))
            self._pending[job_type].append(job)
        logger.debug('Queued %s job #%s', job_type, job.id)
        return job.id

    def pending(self, job_type):
        with self._lock:
            return len(self._pending[job_type])

    def consume(self, job_type, concurrency, handler):
        """Drain the jobs queued so far; return how many succeeded."""
        with self._lock:
            jobs = list(self._pending[job_type])
            self._pending[job_type].clear()
        if not jobs:
            return 0
        with ThreadPoolExecutor(max_workers=max(1, concurrency)) as pool:
            results = list(pool.map(lambda job: self._run(job, handler), jobs))
        return sum(results)

    def _run(self, job, handler):
        while True:
            job.attempts += 1
            try:
                result = handler(dict(job.payload))
            except Exception as e:
                if job.attempts > self.max_retries:
                    logger.exception('%s job #%s failed after %d attempts', job.job_type, job.id, job.attempts)
                    self.failed.append((job, e))
                    return False
                logger.warning('%s job #%s failed, retrying: %s', job.job_type, job.id, e)
                continue
            self._emit_completed(job.job_type, job.id, result)
            return True
