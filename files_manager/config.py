import os


class Config:
    SECRET_KEY = os.getenv('SECRET_KEY', 'super-secret')
    LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO')

    # 文档库：默认 SQLite，任意 SQLAlchemy URL 均可
    SQLALCHEMY_DATABASE_URI = os.getenv('DB_URL', 'sqlite:///files_manager.db')
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    # 存储后端选择：local 或 s3
    STORAGE_BACKEND = os.getenv('STORAGE_BACKEND', 'local')
    FOLDER_PATH = os.getenv('FOLDER_PATH', '/tmp/files_manager')

    # S3 / MinIO
    S3_BUCKET = os.getenv('S3_BUCKET', 'files-manager-bucket')
    AWS_REGION = os.getenv('AWS_REGION', 'us-east-1')
    S3_ENDPOINT_URL = os.getenv('S3_ENDPOINT_URL')

    # Token 存储：redis 或 memory（内存存储，重启失效）
    TOKEN_STORE_BACKEND = os.getenv('TOKEN_STORE_BACKEND', 'redis')
    REDIS_URL = os.getenv('REDIS_URL', 'redis://localhost:6379/0')
    TOKEN_TTL = int(os.getenv('TOKEN_TTL', 60 * 60 * 24))

    # 任务队列：celery 或 memory
    QUEUE_BACKEND = os.getenv('QUEUE_BACKEND', 'celery')
    CELERY_BROKER_URL = os.getenv('CELERY_BROKER_URL', REDIS_URL)
    CELERY_RESULT_BACKEND = os.getenv('CELERY_RESULT_BACKEND', REDIS_URL)
    JOB_MAX_RETRIES = int(os.getenv('JOB_MAX_RETRIES', 3))

    PAGE_SIZE = 20
    THUMBNAIL_WIDTHS = (500, 250, 100)
    THUMBNAIL_CONCURRENCY = int(os.getenv('THUMBNAIL_CONCURRENCY', 10))
    EMAIL_CONCURRENCY = int(os.getenv('EMAIL_CONCURRENCY', 20))
