"""
Quote records and their validation.
"""
from .models import Quote, QuoteBuilder, close_of, high_of, low_of, open_of, volume_of

__all__ = ["Quote", "QuoteBuilder", "open_of", "high_of", "low_of", "close_of", "volume_of"]
