"""
Remote lexicon backed by the Free Dictionary API.

Contract:
  - GET https://api.dictionaryapi.dev/api/v2/entries/en/<word>
  - "found"       : 2xx and the first entry's `word` equals the query (case-insensitive)
  - "not_found"   : any non-success status, or a body that doesn't match
  - "unavailable" : timeout, connection error, or an unparseable body

Every request is bounded by `timeout` seconds; nothing here raises to the caller.
A session created here is closed by `close()` (or on leaving a `with` block);
an injected session belongs to the caller and is left open.
"""

from __future__ import annotations

import logging
from urllib.parse import quote

import requests

from seqpuzzle.config import DICTIONARY_API_URL, LEXICON_TIMEOUT_SEC, USER_AGENT
from .base import BaseLexicon, LookupOutcome, register

logger = logging.getLogger(__name__)


@register
class DictionaryApiLexicon(BaseLexicon):
    id = "dictionaryapi"
    name = "Free Dictionary API"

    def __init__(self, *, base_url: str = DICTIONARY_API_URL,
                 timeout: float = LEXICON_TIMEOUT_SEC,
                 session: requests.Session | None = None):
        self.base_url = base_url
        self.timeout = float(timeout)
        self._owns_session = session is None
        self.session = session if session is not None else requests.Session()

    def _check(self, word: str) -> LookupOutcome:
        url = self.base_url + quote(word, safe="")
        try:
            r = self.session.get(url, timeout=self.timeout, headers={"User-Agent": USER_AGENT})
        except requests.RequestException as e:
            logger.warning("dictionary lookup failed for %r: %s", word, e)
            return "unavailable"

        if not r.ok:
            return "not_found"

        try:
            data = r.json()
        except ValueError as e:
            logger.warning("dictionary returned invalid JSON for %r: %s", word, e)
            return "unavailable"

        if isinstance(data, list) and data and isinstance(data[0], dict):
            if str(data[0].get("word", "")).lower() == word:
                return "found"
        return "not_found"

    def close(self) -> None:
        if self._owns_session:
            self.session.close()
