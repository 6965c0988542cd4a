"""SalesRank - BSR to monthly sales and revenue estimation."""

__version__ = "0.1.0"
