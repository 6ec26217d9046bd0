from typing import Protocol


class TextExtractionServiceProtocol(Protocol):
    async def fetch_transcript(self, url: str) -> str:
        """Transcript of a video-hosting URL. Raises ExtractionError."""
        ...

    async def scrape_text(self, url: str) -> str:
        """Readable text of a web page. Raises ExtractionError."""
        ...
