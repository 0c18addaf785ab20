from __future__ import annotations

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .routes import homes_router, schedule_router


def create_app() -> FastAPI:
    """
    Instantiate the FastAPI application and register routers.

    The dashboard front end reads everything it renders from these routes:
    - schedule: 24-hour schedule, refresh trigger and fleet KPIs
    - homes: home cards and detail panel data

    Returns:
        FastAPI: Configured FastAPI application instance ready to serve.

    Example:
        ```python
        app = create_app()
        uvicorn.run(app, host="0.0.0.0", port=8000)
        ```
    """
    app = FastAPI(
        title="Smart Neighborhood Energy API",
        version="0.1.0",
        description="Synthetic neighbourhood schedule, home status and fleet KPIs.",
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(schedule_router)
    app.include_router(homes_router)

    return app


app = create_app()
