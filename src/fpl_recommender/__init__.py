"""FPL Transfer Recommender: fixture difficulty and squad building over the public FPL API."""

__version__ = "1.0.0"
