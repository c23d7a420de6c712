import logging
from functools import lru_cache
from fastapi import FastAPI, Depends
from fastapi.middleware.cors import CORSMiddleware

# --- Imports ---
from arc_tracker.config import Settings, get_settings
from arc_tracker.core.address import is_valid_address
from arc_tracker.core.entities.eligibility import EligibilityResponse
from arc_tracker.core.interfaces.datasource import IEligibilityStore, IExplorerDataSource
from arc_tracker.core.services import WalletService
from arc_tracker.infrastructure.eligibility.proofs_store import EligibilityStore
from arc_tracker.infrastructure.gateways.arcscan_api import ArcScanGateway

# Setup Logging
logging.basicConfig(level=get_settings().log_level.upper())
logger = logging.getLogger("ArcTracker")

app = FastAPI(title="Arc Tracker API", version="1.0.0", description="Wallet activity analytics for Arc Testnet")

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)

# --- Dependency Injection ---

def get_datasource(settings: Settings = Depends(get_settings)) -> IExplorerDataSource:
    return ArcScanGateway(settings)

@lru_cache
def _load_store(path: str) -> EligibilityStore:
    return EligibilityStore.from_json(path)

def get_eligibility_store(settings: Settings = Depends(get_settings)) -> IEligibilityStore:
    return _load_store(str(settings.proofs_path))

# --- Endpoints ---

@app.get("/health")
async def health():
    return {"status": "healthy", "mode": "ArcScan API via Gateway"}

@app.get("/wallet/{address}")
async def get_wallet(
    address: str,
    gateway: IExplorerDataSource = Depends(get_datasource),
    settings: Settings = Depends(get_settings)
):
    """
    Wallet summary for one address.
    Errors are reported as 200 with an `error` field.
    """
    address = address.strip()
    if not is_valid_address(address):
        return {"error": "Invalid wallet address"}

    try:
        summary = await WalletService(gateway, settings).analyze(address)
    except Exception as e:
        logger.error(f"Failed to analyze {address}: {e}")
        return {"error": "Unable to fetch data"}

    return summary.model_dump()

@app.get("/eligibility/{address}")
async def get_eligibility(
    address: str,
    store: IEligibilityStore = Depends(get_eligibility_store)
):
    """
    Airdrop eligibility lookup. No wallet connection needed.
    """
    address = address.strip().lower()
    if not is_valid_address(address):
        return {"error": "Invalid wallet address"}

    entry = store.lookup(address)
    if entry is None:
        return EligibilityResponse(address=address, eligible=False)
    return EligibilityResponse(address=address, eligible=True, amount=entry.amount, proof=entry.proof)


if __name__ == "__main__":
    import uvicorn

    settings = get_settings()
    uvicorn.run(app, host=settings.host, port=settings.port)
