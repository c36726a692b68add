"""
Steganography: LSB Text-in-Image
=================================
Hide the existence of the message itself.

Each pixel channel is a byte (0-255). Overwriting its least significant
bit changes the colour by at most 1/255, which the eye cannot see, so
every pixel can carry 3 bits: one in R, one in G, one in B.

    R=200  11001000   store '1'  ->  R=201  11001001

Encoding:    (message + "<<<CRIPTES_FIN>>>") as UTF-8, MSB first
Layout:      pixels row by row, channels R -> G -> B; alpha untouched
Unused:      pixels past the payload are left exactly as they were
Capacity:    (width * height * 3) // 8 - len(terminator) - 10  characters

Carrier format: PNG, BMP or any lossless image. JPEG and other lossy
formats destroy the LSBs; choosing the format is the caller's job.

Dependencies: Pillow >= 10.0
"""

import io
import logging
from typing import List, Union

from PIL import Image, UnidentifiedImageError

from ..config import STEGO_SETTINGS
from ..encoding import utf8
from ..errors import CapacityError, NotFoundError, ValidationError
from ..result import as_result

logger = logging.getLogger(__name__)

ImageInput = Union[str, bytes, Image.Image]


class SteganographyCodec:
    """Hide and extract text messages in image pixel LSBs."""

    TERMINATOR       = STEGO_SETTINGS["terminator"]
    TERMINATOR_BYTES = TERMINATOR.encode("utf-8")
    SAFETY_MARGIN    = STEGO_SETTINGS["safety_margin"]
    BITS_PER_PIXEL   = STEGO_SETTINGS["bits_per_pixel"]

    @as_result
    def capacity(self, image_input: ImageInput) -> int:
        """Approximate number of characters the image can carry (may be negative)."""
        w, h = self._load(image_input).size
        return (w * h * self.BITS_PER_PIXEL) // 8 - len(self.TERMINATOR) - self.SAFETY_MARGIN

    @as_result
    def embed(self, image_input: ImageInput, message: str) -> Image.Image:
        """
        Hide message in a copy of the image.

        Args:
            image_input : file path, raw image bytes, or PIL Image
            message     : UTF-8 text to hide

        Returns:
            Ok(stego PIL Image) or Err(ValidationError | CapacityError).
            The source image is never modified.
        """
        if not message or not message.strip():
            raise ValidationError("Message must not be empty.")

        img  = self._load(image_input)
        bits = self._bytes_to_bits(utf8(message, "Message") + self.TERMINATOR_BYTES)
        w, h = img.size
        available = w * h * self.BITS_PER_PIXEL
        if len(bits) > available:
            max_chars = available // 8 - len(self.TERMINATOR)
            raise CapacityError(
                f"Image too small: {len(bits)} bits needed, {available} available "
                f"(about {max(max_chars, 0)} characters max)."
            )

        stego  = self._rgb_copy(img)
        pixels = stego.load()
        i = 0
        for y in range(h):
            for x in range(w):
                if i >= len(bits):
                    break
                px = list(pixels[x, y])
                for c in range(3):
                    if i < len(bits):
                        px[c] = (px[c] & 0xFE) | bits[i]
                        i += 1
                pixels[x, y] = tuple(px)
            if i >= len(bits):
                break

        logger.debug("Embedded %d bits into %dx%d carrier (%.1f%% used)",
                     len(bits), w, h, 100.0 * len(bits) / available)
        return stego

    @as_result
    def extract(self, image_input: ImageInput) -> str:
        """
        Read LSBs until the terminator shows up.

        Scanning stops at the first terminator; the rest of the image is
        never read.
        """
        img = self._load(image_input)
        if img.mode not in ("RGB", "RGBA"):
            img = self._rgb_copy(img)
        pixels = img.load()
        w, h   = img.size
        tail   = self.TERMINATOR_BYTES

        buf  = bytearray()
        byte = 0
        nbit = 0
        for y in range(h):
            for x in range(w):
                px = pixels[x, y]
                for c in range(3):
                    byte = (byte << 1) | (px[c] & 1)
                    nbit += 1
                    if nbit == 8:
                        buf.append(byte)
                        byte = nbit = 0
                        if buf.endswith(tail):
                            logger.debug("Terminator found after %d bytes", len(buf))
                            return buf[:-len(tail)].decode("utf-8", errors="replace")

        raise NotFoundError(
            "No hidden message found in this image. "
            "Make sure it was produced by CriptES."
        )

    # ── helpers ──────────────────────────────────────────────────────────────

    @staticmethod
    def to_png_bytes(img: Image.Image) -> bytes:
        """Serialize a stego image losslessly."""
        buf = io.BytesIO()
        img.save(buf, format="PNG")
        return buf.getvalue()

    @staticmethod
    def _load(src: ImageInput) -> Image.Image:
        try:
            if isinstance(src, Image.Image):
                return src
            if isinstance(src, (bytes, bytearray)):
                src = io.BytesIO(src)
            with Image.open(src) as im:
                im.load()
                return im.copy()
        except (UnidentifiedImageError, OSError) as exc:
            raise ValidationError(f"Cannot read carrier image: {exc}") from exc

    @staticmethod
    def _rgb_copy(img: Image.Image) -> Image.Image:
        """8-bit RGB(A) copy; keeps an alpha channel if the source has one."""
        if img.mode in ("RGB", "RGBA"):
            return img.copy()
        has_alpha = "A" in img.getbands() or "transparency" in img.info
        return img.convert("RGBA" if has_alpha else "RGB")

    @staticmethod
    def _bytes_to_bits(data: bytes) -> List[int]:
        bits = []
        for byte in data:
            for i in range(7, -1, -1):
                bits.append((byte >> i) & 1)
        return bits
