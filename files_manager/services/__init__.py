from dataclasses import dataclass

from flask import current_app

from files_manager.services.auth_service import AuthService
from files_manager.services.file_service import FileService
from files_manager.services.thumbnail_service import ThumbnailService
from files_manager.services.upload_service import UploadService
from files_manager.services.user_service import UserService

EXTENSION_KEY = 'files_manager'


@dataclass
class Services:
    documents: object
    tokens: object
    storage: object
    jobs: object
    auth: AuthService
    users: UserService
    uploads: UploadService
    files: FileService
    thumbnails: ThumbnailService


def build_services(config, documents, tokens, storage, jobs):
    """Wire every service to the given stores, queue and storage."""
    auth = AuthService(documents, tokens, token_ttl=config['TOKEN_TTL'])
    uploads = UploadService(storage, jobs)
    return Services(
        documents=documents,
        tokens=tokens,
        storage=storage,
        jobs=jobs,
        auth=auth,
        users=UserService(documents, jobs),
        uploads=uploads,
        files=FileService(
            documents, auth, uploads, storage,
            page_size=config['PAGE_SIZE'],
            thumbnail_widths=config['THUMBNAIL_WIDTHS'],
        ),
        thumbnails=ThumbnailService(documents, storage, widths=config['THUMBNAIL_WIDTHS']),
    )


def get_services() -> Services:
    return current_app.extensions[EXTENSION_KEY]
