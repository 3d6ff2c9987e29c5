"""FastAPI application entry point."""

import uvicorn
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from slowapi.errors import RateLimitExceeded

from api.limiter import RATE_LIMIT, limiter
from api.routes import club, hand
from config import config


def _rate_limit_exceeded_handler(request: Request, exc: RateLimitExceeded) -> JSONResponse:
    """Handle rate limit exceeded errors."""
    return JSONResponse(
        status_code=429,
        content={"detail": f"Rate limit exceeded: {exc.detail}"},
    )


app = FastAPI(
    title="Blackjack Basics",
    description="Two-card blackjack check and club entry check",
    version="0.1.0",
)

# Add rate limiter to app state and exception handler
app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)

# CORS middleware with configurable origins
app.add_middleware(
    CORSMiddleware,
    allow_origins=config.cors.allowed_origins,
    allow_credentials=True,
    allow_methods=list(config.cors.allow_methods),
    allow_headers=["*"],
)


@app.get("/api/health")
@limiter.limit(RATE_LIMIT)
async def health_check(request: Request) -> dict[str, str]:
    """Health check endpoint."""
    return {"status": "healthy"}


# Include routers
app.include_router(hand.router, prefix="/api/hand", tags=["hand"])
app.include_router(club.router, prefix="/api/club", tags=["club"])


def serve() -> None:
    """Run the API with uvicorn using the configured host and port."""
    uvicorn.run(app, host=config.host, port=config.port)
