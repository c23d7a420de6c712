import sys

try:
    from arc_tracker.core.entities.transaction import TransactionRecord
    from arc_tracker.core.use_cases.wallet_aggregator import WalletActivityAggregator
    from arc_tracker.infrastructure.gateways.arcscan_api import ArcScanGateway
    from arc_tracker.api.main import app
    print("✅ All imports successful.")
except Exception as e:
    print(f"❌ Import failed: {e}")
    sys.exit(1)

# Test Aggregator Logic Simple
def test_aggregate():
    try:
        t1 = TransactionRecord(timestamp=1700000000, from_address="0xabc", to=None, value="1000000000000000000", input="0x")
        t2 = TransactionRecord(timestamp=1700090000, from_address="0xabc", to="0xContract", value="0", input="0xabc123")

        summary = WalletActivityAggregator().aggregate("0xabc", [t1, t2], [], "0", now_ms=1700100000000)

        if summary.volume.native == "1.000000" and summary.contracts.totalInteractions == 1:
            print("✅ Aggregation logic basic test passed.")
        else:
            print(f"❌ Aggregation logic failed, got {summary.model_dump()}")
    except Exception as e:
        print(f"❌ Aggregation raised exception: {e}")

if __name__ == "__main__":
    test_aggregate()
