"""Session names, EKS tokens, credential assumers, AWS Config types and topology trees."""

__version__ = "0.1.0"