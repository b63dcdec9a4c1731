"""
ALDENAIR Storefront

Cart, bundle pricing and checkout handoff for the perfume storefront.
"""

import os
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from dotenv import load_dotenv

# Load environment variables before settings are read
load_dotenv(os.path.join(os.path.dirname(__file__), "..", "config", ".env"))

from .core.config import settings
from .routes import products_router, cart_router, bundles_router, checkout_router, loyalty_router

# Configure logging
logging.basicConfig(
    level=logging.DEBUG if settings.debug else logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan events"""
    logger.info(f"{settings.app_name} starting up...")
    logger.info(f"Cart snapshots: {settings.cart_snapshot_dir or 'disabled'}")
    yield
    logger.info(f"{settings.app_name} shutting down...")


# Create FastAPI app
app = FastAPI(
    title=settings.app_name,
    description="Cart and bundle pricing for the ALDENAIR perfume storefront",
    version="1.0.0",
    lifespan=lifespan,
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # In production, restrict this
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include API routers
app.include_router(products_router)
app.include_router(cart_router)
app.include_router(bundles_router)
app.include_router(checkout_router)
app.include_router(loyalty_router)


@app.get("/")
async def home():
    """Service index"""
    return {
        "message": "ALDENAIR Storefront API",
        "docs": "/docs",
        "endpoints": {
            "products": "/api/products",
            "cart": "/api/cart",
            "bundles": "/api/bundles",
            "checkout": "/api/checkout",
            "loyalty": "/api/loyalty",
        },
    }


@app.get("/health")
async def health_check():
    """Health check endpoint"""
    return {"status": "healthy", "service": "aldenair-storefront"}


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "aldenair.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
    )
