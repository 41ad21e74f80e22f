from files_manager.services.queue.base_queue import BaseJobQueue
from files_manager.services.queue.celery_queue import CeleryJobQueue, make_celery
from files_manager.services.queue.memory_queue import MemoryJobQueue

THUMBNAIL_JOB = 'thumbnail_generation'
WELCOME_EMAIL_JOB = 'welcome_email'


def build_job_queue(config):
    # 根据配置选择任务队列后端
    max_retries = config.get('JOB_MAX_RETRIES', 3)
    if config.get('QUEUE_BACKEND', 'celery') == 'memory':
        return MemoryJobQueue(max_retries=max_retries)
    return CeleryJobQueue(make_celery(config), max_retries=max_retries)


__all__ = [
    'BaseJobQueue',
    'CeleryJobQueue',
    'MemoryJobQueue',
    'THUMBNAIL_JOB',
    'WELCOME_EMAIL_JOB',
    'build_job_queue',
    'make_celery',
]
