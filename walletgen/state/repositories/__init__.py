"""Repositories."""
from walletgen.state.repositories.slots import SlotRepository
__all__ = ["SlotRepository"]
