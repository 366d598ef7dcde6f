"""
token.py — Run Tokens
======================
Cancellation without locks.  Every run captures the token that was
current when it started; minting a new token (a new run, or a stop)
silently invalidates every older one.  Runs poll `aborted()` around
each suspension point and bail out when it turns true.
"""


class RunTokens:
    """Strictly increasing counter.  Exactly one value is current at a time."""

    def __init__(self):
        self._current: int = 0

    def new_token(self) -> int:
        self._current += 1
        return self._current

    def aborted(self, token: int) -> bool:
        return token != self._current

    def is_current(self, token: int) -> bool:
        return token == self._current

    @property
    def current(self) -> int:
        return self._current

    def __repr__(self) -> str:
        return f"RunTokens(current={self._current})"
