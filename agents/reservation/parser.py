"""Parse reservations from confirmation screenshots and PDFs using Claude."""

from __future__ import annotations

import base64
import os
import tempfile
from pathlib import Path
from typing import Optional

import anthropic
import pdfplumber
import requests

from .models import ParsedReservation
from .validator import interpret_response

IMAGE_SUFFIXES = {".png", ".jpg", ".jpeg", ".webp", ".gif"}

EXTRACTION_PROMPT = """You are extracting travel reservation data from a confirmation. It may be a flight, hotel, or train reservation.

Return ONLY valid JSON matching one of these shapes (no markdown, no explanation, no code fences):

For flight: {"type":"flight","airline":"...","flightNumber":"...","departureAirport":"...","arrivalAirport":"...","departureDate":"YYYY-MM-DD","departureTime":"HH:MM","confirmationCode":"..."}
For hotel: {"type":"hotel","propertyName":"...","address":"...","checkInDate":"YYYY-MM-DD","checkOutDate":"YYYY-MM-DD","confirmationCode":"..."}
For train: {"type":"train","operator":"...","trainNumber":"...","departureStation":"...","arrivalStation":"...","departureDate":"YYYY-MM-DD","departureTime":"HH:MM","confirmationCode":"..."}
If the content is unclear or not a reservation: {"type":"unknown","rawText":"brief description of what you see"}

Rules:
- Use empty string "" for any field you cannot determine.
- For airports, use IATA codes when possible (e.g. "LAX", "JFK"). Do NOT expand them to city names.
- Dates must be ISO format YYYY-MM-DD.
- Times must be 24-hour format HH:MM.
- Return raw JSON only. No wrapping, no explanation."""


def get_mime_type(name: str) -> str:
    """Image mime type from a file name or URL, defaulting to JPEG."""
    lower = name.lower()
    if lower.endswith(".png"):
        return "image/png"
    if lower.endswith(".webp"):
        return "image/webp"
    if lower.endswith(".gif"):
        return "image/gif"
    return "image/jpeg"


class ReservationParser:
    """Parse reservations from screenshots, PDFs and text using Claude."""

    def __init__(self, api_key: Optional[str] = None):
        self.api_key = api_key or os.environ.get("ANTHROPIC_API_KEY")
        if not self.api_key:
            raise ValueError(
                "Anthropic API key required. Set ANTHROPIC_API_KEY env var or pass api_key."
            )
        self.client = anthropic.Anthropic(api_key=self.api_key)
        self.model = os.environ.get("RESERVATION_MODEL", "claude-sonnet-4-20250514")
        self.max_tokens = int(os.environ.get("RESERVATION_MAX_TOKENS", "1024"))

    def parse_file(self, file_path: str | Path) -> ParsedReservation:
        """Parse a reservation from a screenshot or PDF confirmation."""
        file_path = Path(file_path)

        if not file_path.exists():
            raise FileNotFoundError(f"File not found: {file_path}")

        suffix = file_path.suffix.lower()

        if suffix == ".pdf":
            return self.parse_pdf(file_path)
        if suffix in IMAGE_SUFFIXES:
            return self.parse_image(file_path)
        raise ValueError(f"Unsupported file format: {suffix}")

    def parse_image(self, image_path: str | Path) -> ParsedReservation:
        """Parse a reservation from a screenshot on disk."""
        image_path = Path(image_path)
        if not image_path.exists():
            raise FileNotFoundError(f"File not found: {image_path}")
        return self.parse_image_bytes(image_path.read_bytes(), get_mime_type(image_path.name))

    def parse_image_bytes(self, data: bytes, mime_type: str = "image/jpeg") -> ParsedReservation:
        """Parse a reservation from raw image bytes."""
        content = [
            {"type": "text", "text": EXTRACTION_PROMPT},
            {
                "type": "image",
                "source": {
                    "type": "base64",
                    "media_type": mime_type,
                    "data": base64.b64encode(data).decode("ascii"),
                },
            },
        ]
        return self._parse_with_claude(content)

    def parse_pdf(self, file_path: str | Path) -> ParsedReservation:
        """Parse a reservation from a PDF confirmation's text."""
        return self.parse_text(self._extract_text_from_pdf(Path(file_path)))

    def parse_text(self, text: str) -> ParsedReservation:
        """Parse a reservation from raw text (e.g. a pasted confirmation email)."""
        content = [{"type": "text", "text": f"{EXTRACTION_PROMPT}\n\nConfirmation text:\n{text}"}]
        return self._parse_with_claude(content)

    def parse_url(self, url: str) -> ParsedReservation:
        """Download a screenshot or PDF and parse it."""
        response = requests.get(url, timeout=60)
        response.raise_for_status()

        content_type = response.headers.get("Content-Type", "").split(";")[0].strip().lower()
        print(f"[PARSE] Downloaded {len(response.content)} bytes ({content_type or 'unknown type'}) from {url}")

        if content_type == "application/pdf" or response.content[:4] == b"%PDF":
            with tempfile.NamedTemporaryFile(suffix=".pdf") as f:
                f.write(response.content)
                f.flush()
                return self.parse_pdf(f.name)

        if not content_type.startswith("image/"):
            content_type = get_mime_type(url)
        return self.parse_image_bytes(response.content, content_type)

    def _extract_text_from_pdf(self, file_path: Path) -> str:
        """Extract text content from a PDF file."""
        text_parts = []

        # Try pdfplumber first (better table extraction)
        try:
            with pdfplumber.open(file_path) as pdf:
                for page in pdf.pages:
                    try:
                        page_text = page.extract_text()
                        if page_text:
                            text_parts.append(page_text)
                    except Exception as e:
                        print(f"[PARSE] Warning: pdfplumber could not extract page: {e}")
                        continue
        except Exception as e:
            print(f"[PARSE] Warning: pdfplumber failed: {e}")

        if not text_parts:
            print("[PARSE] Trying PyPDF2 as fallback...")
            try:
                from PyPDF2 import PdfReader
                reader = PdfReader(file_path)
                for page in reader.pages:
                    page_text = page.extract_text()
                    if page_text:
                        text_parts.append(page_text)
            except Exception as e:
                print(f"[PARSE] Warning: PyPDF2 also failed: {e}")

        if not text_parts:
            raise ValueError("Could not extract any text from PDF. The file may be image-based or corrupted.")

        return "\n\n".join(text_parts)

    def _parse_with_claude(self, content: list[dict]) -> ParsedReservation:
        """Send the extraction request and validate whatever comes back."""
        message = self.client.messages.create(
            model=self.model,
            max_tokens=self.max_tokens,
            messages=[{"role": "user", "content": content}],
        )

        response_text = "".join(
            block.text for block in message.content if getattr(block, "type", None) == "text"
        )
        reservation = interpret_response(response_text)
        print(f"[PARSE] Model returned a {reservation.type} reservation")
        return reservation
