"""
Block-scanning wallet tracker: walks the most recent Arc blocks over RPC,
picks the configured wallet's transactions and compares their gas cost
against Ethereum.
"""
import asyncio
import json
import logging

from arc_tracker.config import get_settings
from arc_tracker.core.services import GasReportService
from arc_tracker.infrastructure.gateways.arc_rpc import ArcRpcGateway


async def main():
    settings = get_settings()
    logging.basicConfig(level=settings.log_level.upper())

    print("Starting wallet analysis...")
    print(f"Wallet: {settings.tracked_wallet}")
    service = GasReportService(settings, chain=ArcRpcGateway(settings))
    try:
        report = await service.from_blocks(settings.tracked_wallet)
    except Exception as err:
        print(f"Error running wallet tracker: {err}")
        return

    print("\n===== WALLET SUMMARY =====")
    print(json.dumps(report.model_dump(exclude={"firstTxDate"}), indent=2))
    print("==========================")


if __name__ == "__main__":
    asyncio.run(main())
