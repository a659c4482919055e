# backend/customer_registry/main.py

import logging
import time
from collections import defaultdict

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from customer_registry.api import customer_api
from customer_registry.core.config import get_settings

settings = get_settings()

# Setup Logging
logging.basicConfig(
    level=settings["log_level"],
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)

app = FastAPI(title="Customer Registry API")

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings["cors_origins"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(customer_api.router, prefix="/api/v1", tags=["Customers"])

@app.get("/")
async def read_root():
    return {"message": "Welcome to the Customer Registry API!"}

@app.get("/health")
async def health_check():
    return {
        "status": "healthy",
        "customers": len(customer_api.customer_repo.get_all_customers()),
    }

@app.middleware("http")
async def log_requests(request: Request, call_next):
    """Log every request with its status and processing time"""
    start_time = time.time()
    response = await call_next(request)
    process_time = time.time() - start_time
    logger.info(
        f"{request.method} {request.url.path} "
        f"- Status: {response.status_code} "
        f"- Time: {process_time:.3f}s"
    )
    return response

@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    """Report unparseable request bodies in the same field -> messages shape as rule violations"""
    errors = defaultdict(list)
    for error in exc.errors():
        location = [str(part) for part in error.get("loc", ()) if part != "body"]
        field = location[-1] if location else "body"
        errors[field].append(error.get("msg", "Invalid value"))
    logger.warning(f"Malformed request to {request.url.path}: {sorted(errors)}")
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": {"errors": dict(errors)}},
    )
