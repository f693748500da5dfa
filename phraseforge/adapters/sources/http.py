# phraseforge/adapters/sources/http.py
from pathlib import Path
from typing import Optional

import httpx
import structlog

from phraseforge import __version__
from phraseforge.core.domain.exceptions import NetworkError, StorageError
from phraseforge.shared.resilience import retry_download

logger = structlog.get_logger()

CHUNK_SIZE = 64 * 1024


class HttpDownloader:
    """
    Blocking file downloader shared by the source adapters.

    Responsibilities:
    1. Stream a URL to disk through a '.part' file, renamed on completion.
    2. Retry transient transport failures (bounded, exponential backoff).
    3. Translate httpx / OS errors into NetworkError / StorageError.
    """

    def __init__(
        self,
        timeout: float = 60.0,
        attempts: int = 3,
        backoff: float = 1.0,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        self.timeout = timeout
        self.transport = transport
        self.headers = {"User-Agent": f"phraseforge/{__version__}"}
        self._fetch = retry_download(attempts=attempts, backoff=backoff)(self._stream_to_file)

    def download(self, url: str, destination: Path) -> Path:
        """
        Downloads `url` to `destination`, replacing any existing file.

        Raises:
            NetworkError: transport failure after retries, or an HTTP error status.
            StorageError: the destination cannot be written.
        """
        logger.info("download_started", url=url, destination=str(destination))
        try:
            size = self._fetch(url, destination)
        except httpx.HTTPStatusError as e:
            raise NetworkError(url, f"HTTP {e.response.status_code}") from e
        except httpx.HTTPError as e:
            raise NetworkError(url, str(e) or type(e).__name__) from e
        except OSError as e:
            raise StorageError(str(destination), e.strerror or str(e)) from e

        logger.info("download_finished", url=url, bytes=size)
        return destination

    def _stream_to_file(self, url: str, destination: Path) -> int:
        partial = destination.with_name(destination.name + ".part")
        destination.parent.mkdir(parents=True, exist_ok=True)

        size = 0
        try:
            with httpx.Client(
                timeout=self.timeout,
                follow_redirects=True,
                headers=self.headers,
                transport=self.transport,
            ) as client:
                with client.stream("GET", url) as response:
                    response.raise_for_status()
                    with open(partial, "wb") as f:
                        for chunk in response.iter_bytes(CHUNK_SIZE):
                            f.write(chunk)
                            size += len(chunk)
            partial.replace(destination)
        finally:
            partial.unlink(missing_ok=True)
        return size
