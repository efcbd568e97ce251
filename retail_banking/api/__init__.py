"""
Retail Banking API Application Factory
"""

from fastapi import FastAPI
import uvicorn

from .customers import router as customers_router
from .accounts import router as accounts_router
from .transactions import router as transactions_router
from .reports import router as reports_router
from .. import __version__
from ..config import get_config


def create_app() -> FastAPI:
    """Create and configure the FastAPI application"""
    app = FastAPI(
        title="Retail Banking Ledger API",
        description="Customers, savings and checking accounts, fees and interest",
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc"
    )

    app.include_router(customers_router, prefix="/customers", tags=["Customers"])
    app.include_router(accounts_router, prefix="/accounts", tags=["Accounts"])
    app.include_router(transactions_router, prefix="/transactions", tags=["Transactions"])
    app.include_router(reports_router, prefix="/reports", tags=["Reports"])

    @app.get("/health")
    async def health_check():
        """Health check endpoint"""
        return {
            "status": "healthy",
            "service": "retail_banking_api",
            "version": __version__
        }

    return app


app = create_app()


def run_server(host: str = None, port: int = None, debug: bool = False):
    """Run the FastAPI server"""
    config = get_config()
    uvicorn.run(
        "retail_banking.api:app",
        host=host or config.api_host,
        port=port or config.api_port,
        reload=debug,
        log_level=config.log_level.lower()
    )
