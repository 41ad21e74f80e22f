from files_manager.services.storage.base_storage import BaseStorage
from files_manager.services.storage.local_storage import LocalStorage
from files_manager.services.storage.s3_storage import S3Storage


def build_storage(config):
    # 根据配置选择存储后端
    if config.get('STORAGE_BACKEND', 'local') == 's3':
        return S3Storage(
            bucket_name=config['S3_BUCKET'],
            region_name=config.get('AWS_REGION'),
            endpoint_url=config.get('S3_ENDPOINT_URL'),
        )
    return LocalStorage(config['FOLDER_PATH'])


__all__ = ['BaseStorage', 'LocalStorage', 'S3Storage', 'build_storage']
