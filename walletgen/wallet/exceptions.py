"""Exception types for the wallet generation library."""


class WalletError(Exception):
    """Base exception for all wallet generation errors."""
    pass


class InvalidCountError(WalletError):
    """Requested batch size is outside the accepted range."""
    def __init__(self, count: object, minimum: int, maximum: int) -> None:
        super().__init__(f"Wallet count must be between {minimum} and {maximum}, got {count!r}")
        self.count = count
        self.minimum = minimum
        self.maximum = maximum


class DecodingError(WalletError):
    """Base-58 text could not be decoded into key bytes."""
    pass


class RandomSourceError(WalletError):
    """The secure random source failed while generating a key pair."""
    pass
