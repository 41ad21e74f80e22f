# services/queue/base_queue.py
from abc import ABC, abstractmethod
from collections import defaultdict
import logging

logger = logging.getLogger(__name__)


class BaseJobQueue(ABC):
    def __init__(self):
        self._completed_callbacks = defaultdict(list)

    @abstractmethod
    def enqueue(self, job_type, payload):
        """Queue ``payload`` for ``job_type`` consumers; return the job id."""
        pass

    @abstractmethod
    def consume(self, job_type, concurrency, handler):
        """Run ``handler(payload)`` for ``job_type`` jobs with ``concurrency`` workers."""
        pass

    def on_completed(self, job_type, callback):
        """Register ``callback(job_id, result)``, called after each successful job."""
        self._completed_callbacks[job_type].append(callback)

    def _emit_completed(self, job_type, job_id, result):
        for callback in self._completed_callbacks[job_type]:
            try:
                callback(job_id, result)
            except Exception:
                # 观察钩子出错不影响任务结果
                logger.exception('Completion callback failed for %s job #%s', job_type, job_id)
