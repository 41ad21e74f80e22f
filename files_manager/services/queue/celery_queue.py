# services/queue/celery_queue.py
import logging

from celery import Celery

from files_manager.services.queue.base_queue import BaseJobQueue

logger = logging.getLogger(__name__)


def make_celery(config):
    """Celery application for the job queues, configured from the Flask config."""
    celery_app = Celery(
        'files_manager',
        broker=config['CELERY_BROKER_URL'],
        backend=config['CELERY_RESULT_BACKEND'],
    )
    celery_app.conf.update(
        enable_utc=True,
        timezone='UTC',
        broker_connection_retry_on_startup=True,
        # JSON only, payloads are plain ids
        task_serializer='json',
        result_serializer='json',
        accept_content=['json'],
        task_acks_late=True,
        task_reject_on_worker_lost=True,
        worker_prefetch_multiplier=1,
    )
    celery_app.conf.update(config.get('CELERY_CONFIG') or {})
    return celery_app


class CeleryJobQueue(BaseJobQueue):
    """Job queue on Celery; one Celery queue per job type.

    Failed jobs are retried by Celery with exponential backoff, up to
    ``max_retries`` times.
    """

    def __init__(self, celery_app, max_retries=3):
        super().__init__()
        self.celery = celery_app
        self.max_retries = max_retries
        self._tasks = {}

    def enqueue(self, job_type, payload):
        task = self._tasks.get(job_type)
        if task is not None:
            result = task.apply_async(kwargs={'payload': dict(payload)}, queue=job_type)
        else:
            # 生产进程不注册任务，按名称投递
            result = self.celery.send_task(job_type, kwargs={'payload': dict(payload)}, queue=job_type)
        return result.id

    def register(self, job_type, handler):
        """Bind ``handler`` to the ``job_type`` Celery task."""
        queue = self

        @self.celery.task(
            name=job_type,
            bind=True,
            autoretry_for=(Exception,),
            retry_backoff=True,
            max_retries=self.max_retries,
        )
        def run_job(task, payload):
            result = handler(payload)
            queue._emit_completed(job_type, task.request.id, result)
            return result

        self._tasks[job_type] = run_job
        return run_job

    def consume(self, job_type, concurrency, handler):
        self.register(job_type, handler)
        logger.info('Starting %s worker with concurrency %d', job_type, concurrency)
        self.celery.worker_main(argv=[
            'worker',
            '--queues', job_type,
            '--concurrency', str(concurrency),
            '--pool', 'threads',
            '--loglevel', 'INFO',
        ])
