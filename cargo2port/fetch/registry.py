"""
Crate downloads from the crates.io registry.

The registry serves each published crate as a ``.crate`` file (a gzipped
tarball) at a fixed download endpoint. Downloads use a blocking httpx
client with retries on transport failures.
"""

from __future__ import annotations

import logging
import time

import httpx

from ..config import RegistryConfig
from ..errors import FetchError
from .archive import ArchiveReader, extract_lockfile

logger = logging.getLogger(__name__)


def crate_download_url(name: str, version: str, template: str) -> str:
    """Build the download URL for ``name`` at ``version``.

    Example:
        >>> crate_download_url("serde", "1.0.0", "https://crates.io/api/v1/crates/{name}/{version}/download")
        'https://crates.io/api/v1/crates/serde/1.0.0/download'
    """
    return template.format(name=name, version=version)


class RegistryClient:
    """Downloads crates and pulls their Cargo.lock out of the archive.

    Attributes:
        cfg: Registry settings (URL template, timeout, retries, headers)
        manifest_filename: Lockfile name to look for inside the archive
    """

    def __init__(
        self,
        cfg: RegistryConfig,
        manifest_filename: str = "Cargo.lock",
        transport: httpx.BaseTransport | None = None,
        reader: ArchiveReader | None = None,
    ):
        self.cfg = cfg
        self.manifest_filename = manifest_filename
        self._transport = transport
        self._reader = reader

    def download_crate(self, name: str, version: str) -> bytes:
        """Download the ``.crate`` archive and return its bytes.

        Raises:
            FetchError: On a transport failure after all retries, or a non-2xx response
        """
        url = crate_download_url(name, version, self.cfg.download_url)
        logger.info("Downloading %s", url)
        last_error: httpx.TransportError | None = None

        for attempt in range(self.cfg.retries + 1):
            try:
                with httpx.Client(
                    timeout=self.cfg.timeout_seconds,
                    headers={"User-Agent": self.cfg.user_agent},
                    follow_redirects=True,
                    trust_env=self.cfg.trust_env,
                    transport=self._transport,
                ) as client:
                    resp = client.get(url)
                    resp.raise_for_status()
                    logger.debug("Downloaded %d bytes from %s", len(resp.content), url)
                    return resp.content
            except httpx.HTTPStatusError as exc:
                raise FetchError(
                    f"failed to download {name}@{version}: HTTP {exc.response.status_code} for url {url}"
                ) from exc
            except httpx.TransportError as exc:
                last_error = exc
                logger.warning("Download attempt %d for %s failed: %s", attempt + 1, url, exc)
                if attempt < self.cfg.retries:
                    # Linear backoff: 0.5s, 1.0s, 1.5s...
                    time.sleep(0.5 * (attempt + 1))
            except httpx.HTTPError as exc:
                raise FetchError(f"failed to download {name}@{version}: {exc}") from exc

        raise FetchError(f"failed to download {name}@{version}: {last_error}") from last_error

    def fetch_lockfile_text(self, name: str, version: str) -> str:
        """Download a crate and return the text of its Cargo.lock."""
        data = self.download_crate(name, version)
        return extract_lockfile(data, self.manifest_filename, self._reader)
