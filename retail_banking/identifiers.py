"""
Identifier Sequences

Monotonic identifier generators for account numbers, customer IDs and
transaction IDs. Each BankingService owns its own sequences so numbering
starts fresh per service instance.
"""


class IdSequence:
    """
    Prefixed, strictly increasing identifier generator

    IdSequence("CUST", 1000) yields CUST1001, CUST1002, ...
    IdSequence("", 100000) yields 100001, 100002, ...
    """

    def __init__(self, prefix: str = "", start: int = 0):
        self.prefix = prefix
        self._last = start

    def next_id(self) -> str:
        """Issue the next identifier"""
        self._last += 1
        return f"{self.prefix}{self._last}"

    def __repr__(self) -> str:
        return f"IdSequence(prefix={self.prefix!r}, last={self._last})"
