"""
ArcScan wallet tracker: gas spent on Arc and savings versus Ethereum,
computed from the explorer's transaction list for the configured wallet.
"""
import asyncio
import json
import logging

from arc_tracker.config import get_settings
from arc_tracker.core.services import GasReportService
from arc_tracker.infrastructure.gateways.arcscan_api import ArcScanGateway


async def main():
    settings = get_settings()
    logging.basicConfig(level=settings.log_level.upper())

    print("Starting ArcScan wallet analysis...")
    print(f"Wallet: {settings.tracked_wallet}")
    service = GasReportService(settings, explorer=ArcScanGateway(settings))
    try:
        report = await service.from_explorer(settings.tracked_wallet)
    except Exception as err:
        print(f"ERROR: {err}")
        return

    print("\n===== WALLET SUMMARY =====")
    print(json.dumps(report.model_dump(), indent=2))
    print("==========================")


if __name__ == "__main__":
    asyncio.run(main())
