"""
Dummy word provider with a built-in word list.
"""

import random
from typing import List, Optional, Tuple

from .base_provider import BaseWordProvider
from ..core import WordPair
from ..config.game_config import GameConfig, default_config


DEFAULT_WORD_PAIRS: List[Tuple[str, str]] = [
    ("苹果", "梨子"),
    ("牛奶", "豆浆"),
    ("饺子", "包子"),
    ("眉毛", "胡须"),
    ("蝴蝶", "蜜蜂"),
    ("火锅", "麻辣烫"),
    ("吉他", "琵琶"),
    ("地铁", "公交"),
    ("警察", "保安"),
    ("口红", "唇膏"),
    ("西游记", "水浒传"),
    ("近视眼", "老花眼"),
]


class DummyWordProvider(BaseWordProvider):
    """
    Offline provider that picks a pair from a fixed list.

    The topic is ignored. With a random seed in the config the sequence of
    pairs is reproducible.
    """

    def __init__(self, config: GameConfig = default_config,
                 word_pairs: Optional[List[Tuple[str, str]]] = None):
        super().__init__(config)
        self.word_pairs = word_pairs or DEFAULT_WORD_PAIRS
        self.random = random.Random(config.random_seed)

    async def generate(self, topic: str = "") -> WordPair:
        civilian, spy = self.random.choice(self.word_pairs)
        return WordPair(civilian=civilian, spy=spy)
