"""Object storage for e-paper PDFs.

PDFs live in an S3 compatible bucket. The storage hands back the public URL
and the object key, which is kept on the e-paper record as its file id.
"""

import os
import uuid
from dataclasses import dataclass
from typing import BinaryIO, Optional

import boto3
from botocore.exceptions import BotoCoreError, ClientError
from slugify import slugify

from janatar_bhasha.exceptions import StorageError

PDF_CONTENT_TYPE = 'application/pdf'


@dataclass(frozen=True)
class StoredFile:
    url: str
    file_id: str
    name: str
    size: int


class EpaperStorage:
    """Flask extension wrapping the boto3 S3 client."""

    def __init__(self, app=None, client=None):
        self._client = client
        self.bucket = None
        self.folder = 'pdfs'
        self.public_url = None
        self.region = None
        self.endpoint_url = None
        self.credentials = {}
        if app is not None:
            self.init_app(app, client=client)

    def init_app(self, app, client=None):
        self.bucket = app.config['STORAGE_BUCKET']
        self.folder = app.config.get('STORAGE_UPLOAD_FOLDER', 'pdfs').strip('/')
        self.public_url = app.config.get('STORAGE_PUBLIC_URL')
        self.region = app.config.get('STORAGE_REGION')
        self.endpoint_url = app.config.get('STORAGE_ENDPOINT_URL')
        self.credentials = {
            'aws_access_key_id': app.config.get('STORAGE_ACCESS_KEY_ID'),
            'aws_secret_access_key': app.config.get('STORAGE_SECRET_ACCESS_KEY'),
        }
        self._client = client
        app.extensions['epaper_storage'] = self

    @property
    def client(self):
        if self._client is None:
            self._client = boto3.client(
                's3',
                region_name=self.region,
                endpoint_url=self.endpoint_url,
                **{k: v for k, v in self.credentials.items() if v}
            )
        return self._client

    def object_key(self, file_name, day):
        """Build ``<folder>/<YYYY-MM-DD>/<slug>-<random>.pdf`` for an upload."""
        stem, _ = os.path.splitext(file_name or '')
        slug = slugify(stem) or 'epaper'
        return f'{self.folder}/{day.isoformat()}/{slug}-{uuid.uuid4().hex[:8]}.pdf'

    def url_for(self, key):
        if self.public_url:
            return f'{self.public_url.rstrip("/")}/{key}'
        if self.endpoint_url:
            return f'{self.endpoint_url.rstrip("/")}/{self.bucket}/{key}'
        return f'https://{self.bucket}.s3.{self.region}.amazonaws.com/{key}'

    def upload(self, stream: BinaryIO, file_name: str, day) -> StoredFile:
        """Store a PDF and return where it ended up."""
        body = stream.read()
        key = self.object_key(file_name, day)
        try:
            self.client.put_object(
                Bucket=self.bucket,
                Key=key,
                Body=body,
                ContentType=PDF_CONTENT_TYPE,
            )
        except (ClientError, BotoCoreError) as e:
            raise StorageError(f'Upload failed: {e}') from e

        return StoredFile(url=self.url_for(key), file_id=key, name=file_name, size=len(body))

    def delete(self, file_id: Optional[str]) -> None:
        if not file_id:
            return
        try:
            self.client.delete_object(Bucket=self.bucket, Key=file_id)
        except (ClientError, BotoCoreError) as e:
            raise StorageError(f'Delete failed: {e}') from e
