"""Structured JSON logging for production observability"""

import logging
import sys
from datetime import datetime, timezone
from typing import Any, Dict
from pythonjsonlogger import jsonlogger
from loan_compare.config import settings


class CustomJsonFormatter(jsonlogger.JsonFormatter):
    """Custom JSON formatter with timestamp and service metadata"""

    def add_fields(self, log_record: Dict[str, Any], record: logging.LogRecord, message_dict: Dict[str, Any]) -> None:
        super().add_fields(log_record, record, message_dict)
        log_record["timestamp"] = datetime.now(timezone.utc).isoformat()
        log_record["level"] = record.levelname
        log_record["service"] = settings.service_name


def setup_logging(level: str = "INFO") -> None:
    """Configure structured JSON logging"""
    logger = logging.getLogger()
    logger.setLevel(level)

    # Remove existing handlers
    logger.handlers.clear()

    # JSON handler for stdout
    handler = logging.StreamHandler(sys.stdout)
    formatter = CustomJsonFormatter(
        "%(timestamp)s %(level)s %(name)s %(message)s"
    )
    handler.setFormatter(formatter)
    logger.addHandler(handler)


def log_offer_batch(
    request_id: str,
    individual_count: int,
    approved_count: int,
    bundle_count: int,
    duration_ms: float,
) -> None:
    """Log the outcome of one offer comparison request"""
    logging.info(
        "Offers compiled",
        extra={
            "request_id": request_id,
            "step": "offers_complete",
            "individual_count": individual_count,
            "approved_count": approved_count,
            "bundle_count": bundle_count,
            "duration_ms": duration_ms,
        },
    )


def log_recommendation(
    request_id: str,
    user_id: str,
    candidate_count: int,
    eligible_count: int,
    top_offer_id: str | None,
    top_score: int | None,
) -> None:
    """Log structured recommendation outcome for analysis"""
    logging.info(
        "Recommendations ranked",
        extra={
            "request_id": request_id,
            "user_id": user_id,
            "step": "recommendation_complete",
            "candidate_count": candidate_count,
            "eligible_count": eligible_count,
            "top_offer_id": top_offer_id,
            "top_score": top_score,
        },
    )


def log_appointment_confirmation(request_id: str, appointment_id: str, name: str, when: str) -> None:
    """Stand-in for the lender/customer notification channel"""
    logging.info(
        f"Appointment {appointment_id} confirmed for {name} on {when}",
        extra={
            "request_id": request_id,
            "step": "appointment_confirmed",
            "appointment_id": appointment_id,
        },
    )
