"""
Full activity summary for the configured wallet: volumes, balances,
active days/weeks/months, contract interactions and bridge usage.
"""
import asyncio
import json
import logging

from arc_tracker.config import get_settings
from arc_tracker.core.errors import NoActivityFoundError
from arc_tracker.core.services import WalletService
from arc_tracker.infrastructure.gateways.arcscan_api import ArcScanGateway


async def main():
    settings = get_settings()
    logging.basicConfig(level=settings.log_level.upper())

    service = WalletService(ArcScanGateway(settings), settings)
    try:
        summary = await service.analyze(settings.tracked_wallet, require_activity=True)
    except NoActivityFoundError as err:
        print(err)
        return
    except Exception as err:
        print(f"ERROR: {err}")
        return

    print("\n===== WALLET SUMMARY =====")
    print(json.dumps(summary.model_dump(), indent=2))
    print("==========================")


if __name__ == "__main__":
    asyncio.run(main())
