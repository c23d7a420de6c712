"""
Connects to the Arc Testnet RPC endpoint and prints the current block.
"""
import asyncio
import logging

from arc_tracker.config import get_settings
from arc_tracker.infrastructure.gateways.arc_rpc import ArcRpcGateway


async def main():
    settings = get_settings()
    logging.basicConfig(level=settings.log_level.upper())

    print("Connecting to Arc Testnet...")
    try:
        block_number = await ArcRpcGateway(settings).get_block_number()
    except Exception as err:
        print(f"Connection failed: {err}")
        return
    print(f"Connected! Current Arc Testnet block: {block_number}")


if __name__ == "__main__":
    asyncio.run(main())
