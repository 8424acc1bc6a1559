"""
LLM word provider using the OpenAI API.
"""

import json
import os
import time
from typing import Any, Dict, Optional

from openai import AsyncOpenAI

from .base_provider import BaseWordProvider, validate_word_pair
from .exceptions import WordGenerationError
from ..core import WordPair
from ..config.game_config import GameConfig, default_config


SYSTEM_PROMPT = (
    "You create word pairs for the party game 'Who is Undercover' (谁是卧底). "
    "Reply with a JSON object with exactly two string fields: "
    "\"civilian\" (the word for the majority of players) and "
    "\"spy\" (a word related to the civilian word but distinctly different)."
)


class LLMWordProvider(BaseWordProvider):
    """
    Word provider backed by an OpenAI chat model.

    The model is asked for a JSON object; anything else (empty reply, invalid
    JSON, missing or identical words, API errors) raises WordGenerationError.
    """

    def __init__(self, config: GameConfig = default_config, client: Optional[AsyncOpenAI] = None):
        super().__init__(config)
        self.model = config.llm_model
        self.temperature = config.llm_temperature
        self.client = client
        self.last_latency_ms: Optional[float] = None

    def _get_client(self) -> AsyncOpenAI:
        if self.client is None:
            api_key = os.getenv("OPENAI_API_KEY")
            if not api_key:
                raise WordGenerationError("OPENAI_API_KEY environment variable not set")
            self.client = AsyncOpenAI(api_key=api_key)
        return self.client

    def build_prompt(self, topic: str = "") -> str:
        """Build the user prompt for an optional topic."""
        language = self.config.language
        if topic:
            return (
                f"Generate a pair of words for the game 'Who is Undercover' (谁是卧底) "
                f"based on the topic: \"{topic}\". Language: {language}."
            )
        return (
            "Generate a pair of words for the game 'Who is Undercover' (谁是卧底). "
            "The words should be common nouns, idioms, or famous people that are similar "
            "but distinguishable. Make it fun and moderately challenging. "
            f"Language: {language}."
        )

    def parse_response(self, content: Optional[str], topic: str = "") -> WordPair:
        """Parse the model's JSON reply into a validated WordPair."""
        if not content or not content.strip():
            raise WordGenerationError(f"LLM returned empty response. Model: {self.model}", topic)
        try:
            data: Dict[str, Any] = json.loads(content)
        except json.JSONDecodeError as e:
            raise WordGenerationError(f"LLM returned invalid JSON: {e}", topic)
        return validate_word_pair(data)

    async def generate(self, topic: str = "") -> WordPair:
        client = self._get_client()
        topic = (topic or "").strip()

        try:
            start_time = time.time()
            response = await client.chat.completions.create(
                model=self.model,
                messages=[
                    {"role": "system", "content": SYSTEM_PROMPT},
                    {"role": "user", "content": self.build_prompt(topic)}
                ],
                response_format={"type": "json_object"},
                temperature=self.temperature
            )
            self.last_latency_ms = (time.time() - start_time) * 1000
        except Exception as e:
            raise WordGenerationError(f"LLM API call failed: {e}", topic)

        if not response.choices:
            raise WordGenerationError(f"LLM returned no choices. Model: {self.model}", topic)
        return self.parse_response(response.choices[0].message.content, topic)
