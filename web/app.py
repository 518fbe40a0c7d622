"""FastAPI application for training targets."""

from fastapi import FastAPI

from web.deps import cached_settings
from web.logger import setup_logger

# Create FastAPI app
app = FastAPI(
    title="Training Targets",
    description="Daily and weekly training targets for intervals.icu",
)

setup_logger(cached_settings().log_level)


# Import and include routers after app is created
from web.routes import targets

app.include_router(targets.router)
