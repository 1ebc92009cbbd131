from typing import Any


class CrackerError(Exception):
    """Base exception for all cracker errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class ValidationError(CrackerError):
    """Raised when input validation fails."""

    pass


class CiphertextTooLongError(ValidationError):
    """Raised when ciphertext exceeds maximum length."""

    def __init__(self, length: int, max_length: int):
        super().__init__(
            f"Ciphertext length {length} exceeds maximum {max_length}",
            {"length": length, "max_length": max_length},
        )


class InvalidCiphertextError(ValidationError):
    """Raised when text contains symbols outside the 128-symbol alphabet."""

    def __init__(self, position: int, symbol: str):
        super().__init__(
            f"Non-ASCII character {symbol!r} at position {position}",
            {"position": position, "symbol": symbol},
        )


class InvalidKeyError(ValidationError):
    """Raised when a shift key cannot be interpreted as an integer."""

    def __init__(self, key: object):
        super().__init__(
            f"Invalid shift key {key!r}",
            {"key": repr(key)},
        )


class EngineError(CrackerError):
    """Base exception for attack engine errors."""

    pass


class EngineNotFoundError(EngineError):
    """Raised when requested attack engine is not registered."""

    def __init__(self, attack: str):
        super().__init__(
            f"Attack engine '{attack}' not found",
            {"attack": attack},
        )


class WordlistUnavailableError(CrackerError):
    """Raised when the configured wordlist file cannot be opened."""

    def __init__(self, path: str, reason: str):
        super().__init__(
            f"Unable to open wordlist '{path}': {reason}",
            {"path": path, "reason": reason},
        )
