import logging

import boto3
from botocore.exceptions import BotoCoreError, ClientError

from files_manager.common.errors import StorageFailure
from files_manager.services.storage.base_storage import BaseStorage

logger = logging.getLogger(__name__)


class S3Storage(BaseStorage):
    """Bytes stored as objects in one bucket; paths are object keys.

    S3 没有真正的目录，``ensure_directory`` 只负责确保 bucket 存在。
    """

    def __init__(self, bucket_name, region_name=None, endpoint_url=None, prefix='files'):
        self.s3 = boto3.client('s3', region_name=region_name, endpoint_url=endpoint_url)
        self.region = region_name
        self.bucket = bucket_name
        self.root = prefix

    def ensure_directory(self, path=None):
        try:
            self.s3.head_bucket(Bucket=self.bucket)
            return
        except ClientError as e:
            if e.response.get('Error', {}).get('Code') not in ('404', 'NoSuchBucket'):
                raise StorageFailure() from e
        except BotoCoreError as e:
            raise StorageFailure() from e
        try:
            if self.region and self.region != 'us-east-1':
                self.s3.create_bucket(
                    Bucket=self.bucket,
                    CreateBucketConfiguration={'LocationConstraint': self.region},
                )
            else:
                self.s3.create_bucket(Bucket=self.bucket)
            logger.info("Bucket '%s' created successfully", self.bucket)
        except (BotoCoreError, ClientError) as e:
            logger.exception('Failed to create bucket: %s', self.bucket)
            raise StorageFailure() from e

    def join(self, directory, name):
        return f"{directory}/{name}" if directory else name

    def write_file(self, path, data):
        try:
            self.s3.put_object(Bucket=self.bucket, Key=path, Body=data)
        except (BotoCoreError, ClientError) as e:
            logger.exception('Failed to upload object: %s', path)
            raise StorageFailure() from e

    def read_file(self, path):
        try:
            obj = self.s3.get_object(Bucket=self.bucket, Key=path)
            return obj['Body'].read()
        except (BotoCoreError, ClientError) as e:
            logger.exception('Failed to download object: %s', path)
            raise StorageFailure() from e

    def exists(self, path):
        if not path:
            return False
        try:
            self.s3.head_object(Bucket=self.bucket, Key=path)
            return True
        except ClientError as e:
            if e.response.get('Error', {}).get('Code') in ('404', 'NoSuchKey', 'NotFound'):
                return False
            raise StorageFailure() from e

    def is_alive(self):
        try:
            self.s3.head_bucket(Bucket=self.bucket)
            return True
        except (BotoCoreError, ClientError) as e:
            logger.error('S3 bucket not reachable: %s', e)
            return False
