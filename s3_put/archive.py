import io
import logging
import zipfile
import zlib
from typing import Optional

from s3_put.errors import MemberNotFound, UnresolvedResource
from s3_put.models import StoreLocation
from s3_put.store import ObjectStore


logger = logging.getLogger("s3put.archive")


class ZipArchiveReader:
    def open(self, body: bytes) -> zipfile.ZipFile:
        try:
            return zipfile.ZipFile(io.BytesIO(body))
        except zipfile.BadZipFile as exc:
            raise UnresolvedResource(f"Artifact object is not a zip archive: {exc}") from exc

    def read_member(self, archive: zipfile.ZipFile, name: str) -> Optional[bytes]:
        try:
            info = archive.getinfo(name)
        except KeyError:
            return None
        if info.is_dir():
            return None
        try:
            return archive.read(info)
        except (zipfile.BadZipFile, zlib.error, RuntimeError, NotImplementedError) as exc:
            raise UnresolvedResource(f"Unable to extract '{name}' from artifact object: {exc}") from exc


class ArchiveFileFetcher:
    def __init__(self, store: ObjectStore, reader: Optional[ZipArchiveReader] = None) -> None:
        self.store = store
        self.reader = reader or ZipArchiveReader()

    def fetch(self, location: StoreLocation, file_name: str) -> bytes:
        body = self.store.get(location.bucket, location.key)
        with self.reader.open(body) as archive:
            member = self.reader.read_member(archive, file_name)
        if member is None:
            raise MemberNotFound(
                f"Unable to get file from artifact object. File '{file_name}' was not found."
            )
        logger.debug(
            "archive.fetch bucket=%s key=%s file=%s size=%s",
            location.bucket,
            location.key,
            file_name,
            len(member),
        )
        return member


def get_body_from_zipped_s3_object(store: ObjectStore, bucket: str, key: str, file_name: str) -> bytes:
    return ArchiveFileFetcher(store).fetch(StoreLocation(bucket=bucket, key=key), file_name)
