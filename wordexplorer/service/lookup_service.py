from __future__ import annotations

import logging
from typing import Any, Optional
from urllib.parse import quote

import httpx

from wordexplorer.config import settings
from wordexplorer.models.lookup import Definition, LookupResult, Meaning, Phonetic
from wordexplorer.service.errors import MalformedResponseError, NotFoundError, TransportError
from wordexplorer.service.word_lists import normalize_word

logger = logging.getLogger(__name__)


class LookupService:
    """Fetches one word from the remote dictionary API.

    Pure data fetch: history and favorites are updated by the caller.
    A single attempt per call; failures are mapped onto the error
    taxonomy in ``wordexplorer.service.errors``.
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.base_url = (base_url or settings.DICTIONARY_API_URL).rstrip("/")
        self.timeout = settings.HTTP_TIMEOUT if timeout is None else timeout
        self._transport = transport

    def url_for(self, word: str) -> str:
        return f"{self.base_url}/{quote(word, safe='')}"

    async def lookup(self, word: str) -> LookupResult:
        word = normalize_word(word)
        url = self.url_for(word)
        logger.debug("GET %s", url)

        try:
            async with httpx.AsyncClient(transport=self._transport, timeout=self.timeout) as client:
                response = await client.get(url)
        except httpx.HTTPError as e:
            logger.warning("Lookup of %r failed: %s", word, e)
            raise TransportError() from e

        if response.status_code == 404:
            logger.info("No entry for %r", word)
            raise NotFoundError(word)
        if not response.is_success:
            logger.warning("Lookup of %r returned HTTP %s", word, response.status_code)
            raise TransportError()

        try:
            data = response.json()
        except ValueError as e:
            raise MalformedResponseError(word, "body is not JSON") from e

        result = parse_entry(word, data)
        logger.info("Looked up %r (%d meanings)", word, len(result.meanings))
        return result


# ----------------------------
# Response parsing
# ----------------------------
def parse_entry(word: str, data: Any) -> LookupResult:
    """Turn the API's JSON array into a LookupResult.

    Only the first entry is used. An empty array is malformed: a missing
    word is reported by the API as a 404, never as ``[]``.
    """
    if not isinstance(data, list) or not data:
        raise MalformedResponseError(word, "expected a non-empty array")
    entry = data[0]
    if not isinstance(entry, dict):
        raise MalformedResponseError(word, "first entry is not an object")
    headword = entry.get("word")
    if not isinstance(headword, str) or not headword.strip():
        raise MalformedResponseError(word, "entry has no word")

    return LookupResult(
        word=headword.strip(),
        phonetics=tuple(_parse_phonetic(p) for p in _dicts(entry.get("phonetics"))),
        meanings=tuple(_parse_meaning(m) for m in _dicts(entry.get("meanings"))),
    )


def _dicts(value: Any) -> list[dict]:
    if not isinstance(value, list):
        return []
    return [v for v in value if isinstance(v, dict)]


def _text(value: Any) -> Optional[str]:
    if isinstance(value, str) and value.strip():
        return value.strip()
    return None


def _strings(value: Any) -> tuple[str, ...]:
    if not isinstance(value, list):
        return ()
    return tuple(s.strip() for s in value if isinstance(s, str) and s.strip())


def _parse_phonetic(item: dict) -> Phonetic:
    return Phonetic(text=_text(item.get("text")), audio=_text(item.get("audio")))


def _parse_meaning(item: dict) -> Meaning:
    definitions = []
    for d in _dicts(item.get("definitions")):
        text = _text(d.get("definition"))
        if text:
            definitions.append(Definition(definition=text, example=_text(d.get("example"))))
    return Meaning(
        part_of_speech=_text(item.get("partOfSpeech")) or "unknown",
        definitions=tuple(definitions),
        synonyms=_strings(item.get("synonyms")),
        antonyms=_strings(item.get("antonyms")),
    )
