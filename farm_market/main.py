from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse
from mangum import Mangum
import logging

from farm_market import config
from farm_market.routers.auth.auth import router as auth_router
from farm_market.routers.orders.orders import router as orders_router
from farm_market.routers.payments.payments import router as payments_router
from farm_market.routers.products.products import router as products_router
from farm_market.routers.farmer.farmer import router as farmer_router
from farm_market.routers.farmers.farmers import router as farmers_router
from farm_market.routers.markets.markets import router as markets_router
from farm_market.routers.logistics.logistics import router as logistics_router
from farm_market.routers.admin.admin import router as admin_router

config.configure_logging()
logger = logging.getLogger(__name__)

IS_PRODUCTION = config.ENVIRONMENT == "prod"


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Report database reachability on startup and release the pool on
    shutdown. An unreachable database does not stop the server.
    """
    logger.info(f"Starting Digital Farm Marketplace API in {config.ENVIRONMENT} mode")
    if config.DATABASE_URL:
        if await config.check_database() and config.DB_CREATE_TABLES:
            await config.init_db()
            logger.info("Database tables created")
    else:
        logger.warning("DATABASE_URL is not set; database routes will fail")

    yield

    await config.dispose_engine()
    logger.info("Shutting down application")


app = FastAPI(
    title="Digital Farm Marketplace API",
    description="Backend for a marketplace connecting farmers, buyers, markets and delivery drivers.",
    version="1.0.0",
    root_path="/Prod" if IS_PRODUCTION else "",
    docs_url="/apidocs",
    redoc_url="/redoc",
    openapi_url="/openapi.json",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=config.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "PATCH", "DELETE"],
    allow_headers=["Content-Type", "Authorization"],
)

app.include_router(auth_router, prefix="/api/auth")
app.include_router(orders_router, prefix="/api/order")
app.include_router(orders_router, prefix="/api/orders", include_in_schema=False)
app.include_router(payments_router, prefix="/api/payment")
app.include_router(payments_router, prefix="/api/payments", include_in_schema=False)
app.include_router(products_router, prefix="/api/products")
app.include_router(farmer_router, prefix="/api/farmer")
app.include_router(farmers_router, prefix="/api/farmers")
app.include_router(markets_router, prefix="/api/market")
app.include_router(logistics_router, prefix="/api/logistics")
app.include_router(admin_router, prefix="/api/admin")


@app.get("/", response_class=PlainTextResponse)
def home():
    """Liveness banner"""
    return "Digital Farm Marketplace API is running..."


handler = Mangum(app)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("farm_market.main:app", host=config.HOST, port=config.PORT, reload=config.DEBUG)
