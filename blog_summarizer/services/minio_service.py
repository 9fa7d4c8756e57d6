from minio import Minio
from minio.error import S3Error
import io
import logging
from blog_summarizer.core.config import settings
from typing import Optional
import uuid

logger = logging.getLogger(__name__)

class MinIOService:
    """Document store for raw page text."""

    def __init__(self, client: Optional[Minio] = None, bucket: Optional[str] = None):
        self.client = client or Minio(
            settings.MINIO_ENDPOINT,
            access_key=settings.MINIO_ACCESS_KEY,
            secret_key=settings.MINIO_SECRET_KEY,
            secure=False,  # Set True in production with HTTPS
            region="us-east-1"  # Explicit region to avoid lookup
        )
        self.bucket = bucket or settings.MINIO_BUCKET
        self._bucket_ready = False

    def _ensure_bucket(self):
        if self._bucket_ready:
            return
        try:
            if not self.client.bucket_exists(self.bucket):
                self.client.make_bucket(self.bucket)
            self._bucket_ready = True
        except S3Error as exc:
            logger.warning("MinIO bucket check failed: %s", exc)

    def upload_text(self, url: str, text: str) -> str:
        self._ensure_bucket()
        content = text.encode("utf-8")
        object_name = f"{uuid.uuid4()}/page.txt"
        self.client.put_object(
            self.bucket, object_name, io.BytesIO(content),
            length=len(content),
            content_type="text/plain; charset=utf-8",
            metadata={"source-url": url}
        )
        return object_name

    def download_text(self, object_name: str) -> Optional[str]:
        try:
            response = self.client.get_object(self.bucket, object_name)
        except S3Error:
            return None
        try:
            return response.read().decode("utf-8")
        finally:
            response.close()
            response.release_conn()

minio_service = MinIOService()
