"""
Salesboard — FastAPI app factory with startup store wiring.
"""
from __future__ import annotations

from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import HTMLResponse
from fastapi.staticfiles import StaticFiles

from salesboard.data.store import DataStore
from salesboard.api.dependencies import set_store
from salesboard.api.router_meta import router as meta_router
from salesboard.api.router_dashboard import router as dashboard_router


def create_app(store: DataStore | None = None) -> FastAPI:
    """Build the app. ``store`` defaults to the JSON file at DB_FILE."""

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        active = store if store is not None else DataStore()
        print(f"  Record file = {active.describe()}")
        set_store(active)

        count = len(active.load())
        if count > 0:
            print(f"\nSalesboard ready — {count:,} transactions\n")
        else:
            print("\nSalesboard ready — no data yet. Call /api/initialize to seed.\n")
        yield
        set_store(None)

    app = FastAPI(
        title="Salesboard API",
        description="Product transaction dashboard — listing, monthly statistics, charts",
        version="1.0.0",
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(meta_router)
    app.include_router(dashboard_router)

    # Serve dashboard with no-cache headers so browsers always get fresh JS
    static_dir = Path(__file__).parent / "static"
    if static_dir.is_dir():
        index_html = static_dir / "index.html"

        @app.get("/", response_class=HTMLResponse, include_in_schema=False)
        async def serve_index():
            return HTMLResponse(
                content=index_html.read_text(encoding="utf-8"),
                headers={"Cache-Control": "no-cache, no-store, must-revalidate", "Pragma": "no-cache"},
            )

        app.mount("/", StaticFiles(directory=str(static_dir)), name="static")

    return app


app = create_app()
