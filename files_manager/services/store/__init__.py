from files_manager.services.store.document_store import BaseDocumentStore, SqlDocumentStore
from files_manager.services.store.token_store import (
    BaseTokenStore,
    MemoryTokenStore,
    RedisTokenStore,
)


def build_token_store(config):
    # 根据配置选择 Token 存储后端
    if config.get('TOKEN_STORE_BACKEND', 'redis') == 'memory':
        return MemoryTokenStore()
    return RedisTokenStore.from_url(config['REDIS_URL'])


__all__ = [
    'BaseDocumentStore',
    'BaseTokenStore',
    'MemoryTokenStore',
    'RedisTokenStore',
    'SqlDocumentStore',
    'build_token_store',
]
