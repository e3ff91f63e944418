"""State models."""
from walletgen.state.models.session import Session
__all__ = ["Session"]
