from fastapi import FastAPI, HTTPException
from typing import Any, Dict
import asyncio
import random

app = FastAPI(title="Mock Lender Server", version="1.0.0")

# Base terms per lender; each request jitters them to simulate a live quote
LENDERS: Dict[str, Dict[str, Any]] = {
    "DBS": {
        "lender": "DBS Bank", "latency": 0.3,
        "rate": (3.88, 0.25), "effective": (7.9, 0.4), "installment": (458, 20),
        "amount": (30000, 2500), "approval": 0.9,
        "processingFee": "2%", "specialFeature": "Instant disbursement",
    },
    "OCBC": {
        "lender": "OCBC", "latency": 0.4,
        "rate": (4.28, 0.3), "effective": (8.5, 0.4), "installment": (465, 20),
        "amount": (28000, 2000), "approval": 0.85,
        "processingFee": "2.5%", "specialFeature": "Flexible repayment",
    },
    "SC": {
        "lender": "Standard Chartered", "latency": 0.35,
        "rate": (3.48, 0.2), "effective": (6.8, 0.3), "installment": (443, 15),
        "amount": (35000, 2500), "approval": 0.88,
        "processingFee": "1.8%", "specialFeature": "Low interest rate",
    },
    "UOB": {
        "lender": "UOB", "latency": 0.38,
        "rate": (4.68, 0.3), "effective": (8.8, 0.4), "installment": (475, 25),
        "amount": (25000, 1500), "approval": 0.82,
        "processingFee": "2.8%", "specialFeature": "Cash rebates",
    },
}


def jitter(base: float, spread: float) -> float:
    return base + random.uniform(-spread, spread)


@app.get("/health")
def health(): return {"status": "ok"}

@app.post("/lenders/{code}/offers")
async def quote(code: str, application: Dict[str, Any]):
    lender = LENDERS.get(code.upper())
    if lender is None:
        raise HTTPException(status_code=404, detail="lender not found")

    await asyncio.sleep(lender["latency"])

    return {
        "lender": lender["lender"],
        "logo": code.upper(),
        "interestRate": jitter(*lender["rate"]),
        "effectiveInterestRate": jitter(*lender["effective"]),
        "monthlyInstallment": int(jitter(*lender["installment"])),
        "tenureMonths": 36,
        "maxLoanAmount": int(jitter(*lender["amount"])),
        "approved": random.random() < lender["approval"],
        "processingFee": lender["processingFee"],
        "specialFeature": lender["specialFeature"],
    }
