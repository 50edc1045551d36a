import logging
from datetime import datetime, timezone
from typing import Any, Dict

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
import uvicorn

from vat_calculator.agents.calculator_agent import CalculatorAgent
from vat_calculator.api.models import CalculateRequest, CalculateResponse, CountriesResponse, CountryItem
from vat_calculator.config import API_HOST, API_PORT, CORS_ALLOW_ORIGINS, DEFAULT_COUNTRY
from vat_calculator.domain.countries import UnknownCountryError, get_country, list_countries
from vat_calculator.observability.logging_config import setup_logging

logger = logging.getLogger(__name__)

# -----------------------------
# App init
# -----------------------------
setup_logging()

app = FastAPI(title="VAT Fee Calculator API")

app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ALLOW_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# -----------------------------
# Routes
# -----------------------------
@app.get("/api/health")
def health() -> Dict[str, Any]:
    return {"status": "ok", "time": datetime.now(timezone.utc).isoformat()}


@app.get("/api/countries", response_model=CountriesResponse)
def countries() -> Dict[str, Any]:
    return {"items": [c.to_dict() for c in list_countries()]}


@app.get("/api/countries/{code}", response_model=CountryItem)
def country(code: str) -> Dict[str, Any]:
    try:
        return get_country(code).to_dict()
    except UnknownCountryError as e:
        raise HTTPException(status_code=404, detail=str(e))


@app.post("/api/calculate", response_model=CalculateResponse)
def calculate(req: CalculateRequest) -> Dict[str, Any]:
    try:
        return CalculatorAgent.handle(
            country=req.country or DEFAULT_COUNTRY,
            amount=req.amount,
            flat_fee=req.flat_fee,
            percent_fee=req.percent_fee,
        )
    except UnknownCountryError as e:
        logger.warning("Calculation rejected: %s", e)
        raise HTTPException(status_code=404, detail=str(e))


if __name__ == "__main__":
    uvicorn.run(app, host=API_HOST, port=API_PORT)
