"""Market data sources, pair list and cache for alert-bot."""

from src.alert_bot.data.cache import PairCache
from src.alert_bot.data.fetchers.base import BaseFetcher
from src.alert_bot.data.fetchers.ccxt_fetcher import CCXTFetcher
from src.alert_bot.data.fetchers.cryptocompare_fetcher import CryptoCompareFetcher
from src.alert_bot.data.pairs import PairListFile

__all__ = [
    "BaseFetcher",
    "CCXTFetcher",
    "CryptoCompareFetcher",
    "PairCache",
    "PairListFile",
]
