# backend/customer_registry/core/config.py
import os
from typing import Dict, Any, List

DEFAULT_DISALLOWED_EMAIL_DOMAINS = "tempmail.com,10minutemail.com,guerrillamail.com"
DEFAULT_CORS_ORIGINS = "http://localhost:3000,http://localhost:8000,http://127.0.0.1:8000,*"

def _split_csv(value: str) -> List[str]:
    return [item.strip() for item in value.split(",") if item.strip()]

def get_settings() -> Dict[str, Any]:
    """Get service configuration from environment variables"""
    return {
        "disallowed_email_domains": frozenset(
            domain.lower()
            for domain in _split_csv(os.getenv("DISALLOWED_EMAIL_DOMAINS", DEFAULT_DISALLOWED_EMAIL_DOMAINS))
        ),
        "log_level": os.getenv("LOG_LEVEL", "INFO").upper(),
        "cors_origins": _split_csv(os.getenv("CORS_ORIGINS", DEFAULT_CORS_ORIGINS)),
    }
