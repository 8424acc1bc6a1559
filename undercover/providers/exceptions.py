"""
Exceptions for word generation errors.
"""


class WordGenerationError(Exception):
    """Raised when a provider cannot produce a usable word pair."""

    def __init__(self, message: str = "", topic: str = ""):
        self.topic = topic
        self.message = message or "Word pair generation failed"
        super().__init__(self.message)
