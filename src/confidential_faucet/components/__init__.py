"""Reusable UI components for the Confidential Faucet console."""

from .token_card import TokenCard

__all__ = ["TokenCard"]
