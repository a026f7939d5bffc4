"""Structured JSON logging for production observability"""

import logging
import sys
from datetime import datetime, timezone
from typing import Any, Dict
from pythonjsonlogger import jsonlogger
from moro_scoring.config import settings


class CustomJsonFormatter(jsonlogger.JsonFormatter):
    """JSON formatter adding timestamp, level and service name"""

    def add_fields(self, log_record: Dict[str, Any], record: logging.LogRecord, message_dict: Dict[str, Any]) -> None:
        super().add_fields(log_record, record, message_dict)
        log_record["timestamp"] = datetime.now(timezone.utc).isoformat()
        log_record["level"] = record.levelname
        log_record["service"] = settings.service_name


def setup_logging(level: str = "INFO") -> None:
    """Route the root logger to stdout as JSON"""
    logger = logging.getLogger()
    logger.setLevel(level)
    logger.handlers.clear()

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(CustomJsonFormatter("%(timestamp)s %(level)s %(name)s %(message)s"))
    logger.addHandler(handler)


def log_scoring(
    request_id: str,
    applicant_id: str,
    total_score: int,
    risk_level: str,
    recommendation: str,
    duration_ms: float,
) -> None:
    """Log one structured record per scoring outcome for audit"""
    logging.info(
        "Scoring completed",
        extra={
            "request_id": request_id,
            "applicant_id": applicant_id,
            "step": "scoring_complete",
            "total_score": total_score,
            "risk_level": risk_level,
            "recommendation": recommendation,
            "duration_ms": duration_ms,
        },
    )
