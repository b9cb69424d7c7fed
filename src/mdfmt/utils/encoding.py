#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdfmt/utils/encoding.py
"""Decoding of markdown source bytes.

Markdown is read as UTF-8. Sources that are not valid UTF-8 are decoded
with the encoding chardet detects, falling back to latin-1 which accepts any
byte sequence.
"""

from __future__ import annotations

import logging

import chardet

logger = logging.getLogger(__name__)


def detect_encoding(
    data: bytes,
    sample_size: int = 8192,
    confidence_threshold: float = 0.7,
) -> str | None:
    """Detect character encoding of binary data using chardet.

    Parameters
    ----------
    data : bytes
        Binary data to analyze
    sample_size : int, default 8192
        Number of bytes to sample for detection (uses first N bytes)
    confidence_threshold : float, default 0.7
        Minimum confidence level (0.0-1.0) required to trust detection

    Returns
    -------
    str | None
        Detected encoding name, or None if detection fails or the confidence
        is below the threshold

    """
    result = chardet.detect(data[:sample_size])
    encoding = result.get("encoding") if result else None
    if not encoding:
        logger.debug("chardet: No encoding detected")
        return None

    confidence = result.get("confidence") or 0.0
    logger.debug(f"chardet detected encoding: {encoding} (confidence: {confidence:.2f})")
    if confidence < confidence_threshold:
        logger.debug(f"chardet confidence {confidence:.2f} below threshold {confidence_threshold}")
        return None
    return encoding


def decode_markdown_bytes(data: bytes) -> str:
    """Decode markdown source bytes to text.

    A UTF-8 byte order mark is dropped.

    Parameters
    ----------
    data : bytes
        Raw markdown source

    Returns
    -------
    str
        Decoded text

    Examples
    --------
    >>> decode_markdown_bytes("caf\\u00e9".encode("utf-8"))
    'café'

    """
    try:
        return data.decode("utf-8-sig")
    except UnicodeDecodeError as e:
        logger.debug(f"Source is not valid UTF-8 ({e}), detecting encoding")

    detected = detect_encoding(data)
    if detected:
        try:
            return data.decode(detected)
        except (UnicodeDecodeError, LookupError) as e:
            logger.debug(f"Failed to decode with chardet-detected encoding {detected}: {e}")

    return data.decode("latin-1")
