"""Tests for URL text extraction helpers."""

import pytest

from mindweave.exceptions import ExtractionError
from mindweave.infrastructure.sources.services.text_extraction_service import (
    TextExtractionService,
    extract_video_id,
    html_to_text,
)


class TestExtractVideoId:
    @pytest.mark.parametrize(
        "url",
        [
            "https://www.youtube.com/watch?v=dQw4w9WgXcQ",
            "https://youtube.com/watch?v=dQw4w9WgXcQ&t=42s",
            "https://youtu.be/dQw4w9WgXcQ",
            "https://www.youtube.com/embed/dQw4w9WgXcQ",
            "https://www.youtube.com/shorts/dQw4w9WgXcQ",
            "https://m.youtube.com/live/dQw4w9WgXcQ?feature=share",
        ],
    )
    def test_known_formats(self, url: str) -> None:
        assert extract_video_id(url) == "dQw4w9WgXcQ"

    @pytest.mark.parametrize(
        "url",
        [
            "https://www.youtube.com/",
            "https://www.youtube.com/watch",
            "https://youtu.be/",
            "https://example.com/watch?v=dQw4w9WgXcQ",
        ],
    )
    def test_unrecognized(self, url: str) -> None:
        assert extract_video_id(url) is None


class TestHtmlToText:
    def test_keeps_readable_text_only(self) -> None:
        html = (
            "<html><head><title>Ignored</title><style>p { color: red; }</style></head>"
            "<body><nav>Menu</nav><h1>Osmosis</h1><p>Water   moves.</p>"
            "<script>track()</script><!-- note --><p>Across membranes.</p></body></html>"
        )
        assert html_to_text(html).splitlines() == ["Osmosis", "Water moves.", "Across membranes."]

    def test_blank_document(self) -> None:
        assert html_to_text("   ") == ""


class TestTextExtractionService:
    async def test_transcript_rejects_non_video_url(self) -> None:
        with pytest.raises(ExtractionError) as exc_info:
            await TextExtractionService().fetch_transcript("https://www.youtube.com/")
        assert exc_info.value.status_code == 400
        assert exc_info.value.reason == "unrecognized YouTube URL"

    async def test_scrape_rejects_non_http_url(self) -> None:
        with pytest.raises(ExtractionError) as exc_info:
            await TextExtractionService().scrape_text("ftp://example.com/file.txt")
        assert exc_info.value.reason == "only http(s) URLs can be scraped"
