"""Text utilities: statistics, URL encoding and digests."""

import hashlib
import re
from typing import Any
from urllib.parse import quote, unquote

from ittools.widgets.registry import WidgetInputError, manifest, optional_choice, require_str

# Words per minute used for reading and speaking time estimates.
READING_WPM = 225
SPEAKING_WPM = 150

# Characters encodeURIComponent leaves as-is besides alphanumerics.
_URI_COMPONENT_SAFE = "-_.!~*'()"

HASH_ALGORITHMS = {
    "md5": hashlib.md5,
    "sha1": hashlib.sha1,
    "sha224": hashlib.sha224,
    "sha256": hashlib.sha256,
    "sha384": hashlib.sha384,
    "sha512": hashlib.sha512,
    "sha3": hashlib.sha3_512,
}

_NON_WORD = re.compile(r"[^\w\s]")


def text_statistics(text: str) -> dict[str, Any]:
    words = text.split()
    word_count = len(words)
    cleaned = [_NON_WORD.sub("", w) for w in words]
    longest = max(cleaned, key=len, default="")
    total_len = sum(len(w) for w in cleaned)
    paragraphs = [p for p in re.split(r"\n\s*\n", text) if p]
    return {
        "characters": len(text),
        "characters_no_spaces": len(re.sub(r"\s", "", text)),
        "words": word_count,
        "sentences": len([s for s in re.split(r"[.!?]+", text) if s]),
        "paragraphs": len(paragraphs) or 1,
        "reading_time_minutes": round(word_count / READING_WPM, 2),
        "speaking_time_minutes": round(word_count / SPEAKING_WPM, 2),
        "longest_word": longest,
        "average_word_length": round(total_len / word_count, 2) if word_count else 0,
        "unique_words": len({w.lower() for w in cleaned}),
    }


@manifest.register(
    "Text Statistics",
    category="Text",
    description="Count characters, words, sentences and estimate reading time.",
    route_path="/text-statistics",
    icon="file-text",
)
def text_statistics_widget(params: dict[str, Any]) -> dict[str, Any]:
    return text_statistics(require_str(params, "text", allow_empty=True))


@manifest.register(
    "Url Encoder and Decoder",
    category="Web",
    description="Percent-encode text for URLs or decode it back.",
    route_path="/url-encoder-and-decoder",
    icon="link",
)
def url_encoder_and_decoder(params: dict[str, Any]) -> dict[str, Any]:
    mode = optional_choice(params, "mode", "encode", ("encode", "decode"))
    text = require_str(params, "text", allow_empty=True)
    if mode == "encode":
        return {"result": quote(text, safe=_URI_COMPONENT_SAFE)}
    try:
        return {"result": unquote(text, errors="strict")}
    except UnicodeDecodeError as e:
        raise WidgetInputError("URI malformed") from e


@manifest.register(
    "Hash Text",
    category="Crypto",
    description="Hash a text with MD5, SHA-1, SHA-2 or SHA-3.",
    route_path="/hash-text",
    icon="fingerprint",
)
def hash_text(params: dict[str, Any]) -> dict[str, Any]:
    algorithm = optional_choice(params, "algorithm", "sha256", HASH_ALGORITHMS)
    text = require_str(params, "text", allow_empty=True)
    digest = HASH_ALGORITHMS[algorithm](text.encode("utf-8")).hexdigest()
    return {"algorithm": algorithm, "hash": digest}
