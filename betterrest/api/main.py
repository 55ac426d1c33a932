# betterrest/api/main.py
import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from betterrest import __version__
from betterrest.api.routes import bedtime_routes
from betterrest.config.config_manager import ConfigManager

config = ConfigManager()

logging.basicConfig(
    level=config.get('logging.level', 'INFO'),
    format=config.get('logging.format', '%(asctime)s - %(name)s - %(levelname)s - %(message)s')
)

app = FastAPI(
    title="BetterRest API",
    description="API for estimating an ideal bedtime from wake time, sleep goal and coffee intake",
    version=__version__
)

# Enable CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # For development - restrict this in production
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(bedtime_routes.router)


@app.get("/")
async def root():
    return {
        "message": "Welcome to the BetterRest API",
        "version": __version__,
        "documentation": "/docs"
    }


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
