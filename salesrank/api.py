"""HTTP API for the SalesRank estimator."""

from contextlib import asynccontextmanager
import logging

from fastapi import Depends, FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel
from typing import Optional, Union

from salesrank import __version__
from salesrank.config import settings
from salesrank.errors import InvalidInput, UnknownCategory
from salesrank.intelligence import EstimationEngine, get_engine

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Load calibration before serving; a degenerate table aborts startup."""
    engine = get_engine()
    logger.info(f"Serving {len(engine.categories())} categories")
    yield


app = FastAPI(
    lifespan=lifespan,
    title="SalesRank API",
    description="Amazon BSR to sales and revenue estimation",
    version=__version__,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# Request models
# Loose types: the validator owns the error messages.
class EstimateRequest(BaseModel):
    category: Optional[str] = None
    rank: Union[int, float, str, None] = None
    price: Union[int, float, str, None] = None


# Endpoints
@app.get("/health")
async def health_check():
    return {"status": "ok", "service": settings.mcp_server_name, "version": __version__}


@app.get("/api/categories")
async def list_categories(engine: EstimationEngine = Depends(get_engine)):
    """List calibrated categories."""
    return {"categories": engine.categories()}


@app.post("/api/estimate")
async def estimate(request: EstimateRequest, engine: EstimationEngine = Depends(get_engine)):
    """Estimate monthly sales and revenue from a BSR."""
    try:
        output = engine.run(request.category, request.rank, request.price)
    except InvalidInput as e:
        raise HTTPException(status_code=400, detail=e.message)
    except UnknownCategory as e:
        raise HTTPException(status_code=404, detail=str(e))

    return {
        "category": output.category,
        "rank": output.rank,
        "monthlySales": output.monthly_units,
        "dailySales": output.daily_units,
        "monthlyRevenue": output.monthly_revenue,
        "dailyRevenue": output.daily_revenue,
        "annualRevenue": output.annual_revenue,
        "method": output.method.value,
        "priceProvided": output.price_provided,
        "methodologyText": output.narrative,
    }
