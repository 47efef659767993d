"""
Archive download with explicit redirect handling and progress output.

urllib's automatic redirect handling is switched off so that every 301/302 is
seen here, counted against a cap, and re-requested with the same headers.
"""

import sys
import urllib.error
import urllib.request
from pathlib import Path
from urllib.parse import urljoin, urlparse

from ..config.env_config import DEFAULT_CHUNK_SIZE, DEFAULT_MAX_REDIRECTS, DEFAULT_USER_AGENT
from ..errors import DownloadError, TooManyRedirectsError
from ..logger import get_logger

logger = get_logger("pybundle.download")

REDIRECT_CODES = (301, 302)
ALLOWED_SCHEMES = ("http", "https")


class _NoRedirectHandler(urllib.request.HTTPRedirectHandler):
    """Surface redirects as HTTPError instead of following them."""

    def redirect_request(self, req, fp, code, msg, headers, newurl):
        return None


_opener = urllib.request.build_opener(_NoRedirectHandler)


def _open(request: urllib.request.Request):
    return _opener.open(request)


def _report_progress(downloaded: int, total: int) -> None:
    pct = downloaded * 100 / total
    filled = min(40, int(40 * downloaded // total))
    bar = "█" * filled + "░" * (40 - filled)
    sys.stdout.write(f"\r  Downloading: [{bar}] {pct:.1f}%")
    sys.stdout.flush()


def _content_length(response) -> int:
    value = response.headers.get("Content-Length")
    try:
        return int(value) if value else 0
    except ValueError:
        return 0


def _stream_to_file(response, dest: Path, chunk_size: int, show_progress: bool) -> int:
    total = _content_length(response)
    downloaded = 0
    with dest.open("wb") as handle:
        chunk = response.read(chunk_size)
        while chunk:
            handle.write(chunk)
            downloaded += len(chunk)
            if show_progress and total > 0:
                _report_progress(downloaded, total)
            chunk = response.read(chunk_size)
    if show_progress and total > 0:
        sys.stdout.write("\n")
        sys.stdout.flush()
    return downloaded


def download(
    url: str,
    dest: Path,
    *,
    user_agent: str = DEFAULT_USER_AGENT,
    max_redirects: int = DEFAULT_MAX_REDIRECTS,
    chunk_size: int = DEFAULT_CHUNK_SIZE,
    show_progress: bool = True,
) -> Path:
    """
    Download ``url`` to ``dest``, following 301/302 redirects.

    Args:
        url: URL to download from.
        dest: Destination file; its parent must exist.
        user_agent: User-Agent header sent on every hop.
        max_redirects: Redirects followed before failing.
        chunk_size: Bytes read per chunk.
        show_progress: Write a percentage line when Content-Length is known.

    Returns:
        dest

    Raises:
        TooManyRedirectsError: More than ``max_redirects`` hops.
        DownloadError: Non-200 final status, a redirect without Location
            or to a non-HTTP(S) URL, or a network failure.
    """
    current = url
    redirects = 0
    while True:
        request = urllib.request.Request(current, headers={"User-Agent": user_agent})
        try:
            with _open(request) as response:
                status = getattr(response, "status", 200)
                if status != 200:
                    raise DownloadError(f"Download failed with status {status}", status)
                downloaded = _stream_to_file(response, dest, chunk_size, show_progress)
        except urllib.error.HTTPError as e:
            if e.code not in REDIRECT_CODES:
                raise DownloadError(f"Download failed with status {e.code}", e.code) from e
            location = e.headers.get("Location") if e.headers is not None else None
            if not location:
                raise DownloadError(
                    f"Download failed with status {e.code}: redirect without Location header",
                    e.code,
                ) from e
            if redirects >= max_redirects:
                raise TooManyRedirectsError(
                    f"Download failed: more than {max_redirects} redirects for {url}",
                    e.code,
                ) from e
            e.close()
            target = urljoin(current, location)
            if urlparse(target).scheme not in ALLOWED_SCHEMES:
                raise DownloadError(
                    f"Download failed: refusing redirect from {current} to {target}",
                    e.code,
                ) from e
            redirects += 1
            current = target
            logger.debug(f"  Redirect {e.code} -> {current}")
            continue
        except urllib.error.URLError as e:
            raise DownloadError(f"Failed to download {current}: {e.reason}") from e

        logger.info("Download completed!")
        logger.debug(f"  {downloaded} bytes written to {dest}")
        return dest
