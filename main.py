"""Main script for running the pair alert bot."""

import asyncio
import logging
import signal
import sys
from pathlib import Path

from dotenv import load_dotenv

from src.alert_bot.config import Settings
from src.alert_bot.cycle import CycleOrchestrator, IntervalScheduler
from src.alert_bot.data import (
    BaseFetcher,
    CCXTFetcher,
    CryptoCompareFetcher,
    PairCache,
    PairListFile,
)
from src.alert_bot.exceptions import ConfigurationMissingError
from src.alert_bot.notifications import TelegramNotifier

logger = logging.getLogger(__name__)

# Load .env file if it exists
ENV_PATH = Path(__file__).parent / ".env"


def setup_logging(level: str) -> None:
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler(sys.stdout)],
    )


def build_fetcher(settings: Settings) -> BaseFetcher:
    """Create the market data source selected in the settings."""
    if settings.market_data_source == "ccxt":
        return CCXTFetcher(settings.ccxt_exchange)
    return CryptoCompareFetcher(api_key=settings.cryptocompare_api_key or "")


async def run(settings: Settings) -> None:
    """Run analysis cycles until the process is stopped."""
    cache = PairCache(ttl_seconds=settings.cache_ttl_seconds)

    async with build_fetcher(settings) as fetcher, TelegramNotifier(
        settings.telegram_bot_token, settings.telegram_chat_id
    ) as notifier:
        orchestrator = CycleOrchestrator(
            pairs=PairListFile(settings.pairs_file),
            fetcher=fetcher,
            notifier=notifier,
            cache=cache,
            quote=settings.quote_symbol,
            candle_limit=settings.candle_limit,
        )
        scheduler = IntervalScheduler(
            orchestrator.run_cycle, interval=settings.cycle_interval_seconds
        )

        loop = asyncio.get_running_loop()
        main_task = asyncio.current_task()
        for sig in (signal.SIGINT, signal.SIGTERM):
            try:
                loop.add_signal_handler(sig, main_task.cancel)
            except NotImplementedError:
                # add_signal_handler is unavailable on Windows event loops
                pass

        print("🚀 Starting pair alert bot...")
        print(f"   Pairs file: {settings.pairs_file}")
        print(f"   Data source: {fetcher.source_id}")
        print(f"   Quote: {settings.quote_symbol}")
        print(f"   Interval: {settings.cycle_interval_seconds}s")
        print("   Press Ctrl+C to stop\n")

        try:
            await scheduler.run()
        except asyncio.CancelledError:
            print("\n⚠️  Received interrupt signal. Stopping...")
        finally:
            scheduler.stop()
            print(f"✅ Bot stopped cleanly after {scheduler.cycles} cycles")


def main() -> int:
    """Main entry point for the application."""
    if ENV_PATH.exists():
        load_dotenv(ENV_PATH)

    try:
        settings = Settings.from_env()
    except ConfigurationMissingError as e:
        setup_logging("INFO")
        logger.error(f"❌ Configuration error: {e}")
        return 1

    setup_logging(settings.log_level)

    try:
        asyncio.run(run(settings))
    except KeyboardInterrupt:
        print("\n✅ Bot stopped")
    return 0


if __name__ == "__main__":
    sys.exit(main())
