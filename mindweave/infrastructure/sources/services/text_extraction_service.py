"""Extract study text from submitted URLs."""

import asyncio
import re
from urllib.parse import parse_qs, urlparse

import httpx
import structlog
from lxml import etree  # pyright: ignore[reportAttributeAccessIssue]
from youtube_transcript_api import (
    CouldNotRetrieveTranscript,
    NoTranscriptFound,
    TranscriptsDisabled,
    VideoUnavailable,
    YouTubeTranscriptApi,
)

from mindweave.exceptions import ExtractionError

logger = structlog.get_logger(__name__)

USER_AGENT = "Mozilla/5.0 (compatible; mindweave/0.1)"
NON_CONTENT_TAGS = ("script", "style", "noscript", "template", "svg", "nav", "footer", "header")
_WHITESPACE = re.compile(r"[ \t\r\f\v]+")
_BLANK_LINES = re.compile(r"\n\s*\n+")


def extract_video_id(video_url: str) -> str | None:
    """
    Extract the video ID from the common YouTube URL formats.

    Handles youtu.be/<id>, watch?v=<id>, /embed/<id>, /shorts/<id>,
    /live/<id> and /v/<id>.
    """
    parsed = urlparse(video_url)
    host = (parsed.hostname or "").lower()

    if host == "youtu.be" or host.endswith(".youtu.be"):
        video_id = parsed.path.lstrip("/").split("/")[0]
        return video_id or None

    if host == "youtube.com" or host.endswith(".youtube.com"):
        if parsed.path == "/watch":
            return parse_qs(parsed.query).get("v", [None])[0]
        parts = [part for part in parsed.path.split("/") if part]
        if len(parts) >= 2 and parts[0] in ("embed", "shorts", "live", "v"):
            return parts[1]

    return None


def html_to_text(html: str | bytes) -> str:
    """Readable text of an HTML document, with markup and non-content elements removed."""
    if not html.strip():
        return ""
    tree = etree.fromstring(html, etree.HTMLParser())
    if tree is None:
        return ""

    etree.strip_elements(tree, *NON_CONTENT_TAGS, with_tail=False)
    etree.strip_elements(tree, etree.Comment, with_tail=False)

    body = tree.xpath("//body")
    root = body[0] if body else tree
    text = "\n".join(root.itertext())

    text = _WHITESPACE.sub(" ", text)
    return _BLANK_LINES.sub("\n\n", text).strip()


class TextExtractionService:
    """Transcripts for video URLs via youtube-transcript-api, page text for the rest."""

    def __init__(self, timeout_seconds: float = 15.0) -> None:
        self.timeout_seconds = timeout_seconds

    async def fetch_transcript(self, url: str) -> str:
        video_id = extract_video_id(url)
        if not video_id:
            raise ExtractionError(url, "unrecognized YouTube URL")

        logger.info("fetching_transcript", video_id=video_id)
        try:
            # The transcript client is synchronous
            transcript = await asyncio.to_thread(YouTubeTranscriptApi().fetch, video_id)
        except TranscriptsDisabled:
            raise ExtractionError(url, "transcripts are disabled for this video") from None
        except NoTranscriptFound:
            raise ExtractionError(url, "no transcript found for this video") from None
        except VideoUnavailable:
            raise ExtractionError(url, "video is unavailable") from None
        except CouldNotRetrieveTranscript as e:
            logger.warning("transcript_fetch_failed", video_id=video_id, error=str(e))
            raise ExtractionError(url, "could not retrieve transcript") from e

        return " ".join(snippet.text.strip() for snippet in transcript if snippet.text.strip())

    async def scrape_text(self, url: str) -> str:
        parsed = urlparse(url)
        if parsed.scheme not in ("http", "https") or not parsed.hostname:
            raise ExtractionError(url, "only http(s) URLs can be scraped")

        logger.info("scraping_url", host=parsed.hostname)
        try:
            async with httpx.AsyncClient(
                timeout=self.timeout_seconds,
                follow_redirects=True,
                headers={"User-Agent": USER_AGENT},
            ) as client:
                response = await client.get(url)
                response.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise ExtractionError(
                url, f"server responded with HTTP {e.response.status_code}"
            ) from e
        except httpx.TimeoutException as e:
            raise ExtractionError(url, "request timed out") from e
        except httpx.HTTPError as e:
            raise ExtractionError(url, str(e) or type(e).__name__) from e

        content_type = response.headers.get("content-type", "")
        if "html" not in content_type and "text" not in content_type:
            raise ExtractionError(url, f"unsupported content type '{content_type}'")

        if "html" in content_type:
            return html_to_text(response.content)
        return response.text.strip()
