import logging
from typing import List, Optional
from pydantic import BaseModel, Field
import requests

from .models import DEFAULT_WORDS_URL, FALLBACK_WORDS, WordSourceConfig


logger = logging.getLogger(__name__)


class WordSource(BaseModel):
    """
    Client for the remote random-word API.

    Fetches a list of uppercase words. Any failure (network error, bad
    status, malformed payload) is logged and answered with the fallback list.
    """

    url: str = DEFAULT_WORDS_URL
    count: int = 20
    word_type: str = "uppercase"
    timeout: Optional[float] = None
    fallback_words: List[str] = Field(default_factory=lambda: list(FALLBACK_WORDS))

    @classmethod
    def from_config(cls, config: WordSourceConfig) -> "WordSource":
        """Build a client from a WordSourceConfig."""
        return cls(**config.model_dump())

    @property
    def params(self) -> dict:
        """Query parameters sent with the request."""
        return {"words": self.count, "type": self.word_type}

    def fetch_remote(self) -> List[str]:
        """
        Fetch words from the API without any fallback.

        Raises:
            requests.RequestException: On network errors or a non-2xx status
            ValueError: If the body is not a JSON list of strings
        """
        response = requests.get(self.url, params=self.params, timeout=self.timeout)
        response.raise_for_status()
        data = response.json()

        if not isinstance(data, list) or not all(isinstance(w, str) for w in data):
            raise ValueError(f"Expected a JSON list of strings, got: {data!r}")

        return [w.strip().upper() for w in data]

    def fetch(self) -> List[str]:
        """
        Fetch words, substituting the fallback list on any failure.

        Returns:
            List of uppercase candidate words
        """
        try:
            words = self.fetch_remote()
        except (requests.RequestException, ValueError) as e:
            logger.warning("Error fetching words: %s", e)
            return list(self.fallback_words)

        logger.debug("Fetched %d words from %s", len(words), self.url)
        return words
