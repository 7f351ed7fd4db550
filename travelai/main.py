import logging
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from travelai.routers import auth, chat, compare, destinations, images, itinerary, store
from travelai.config import settings, cloud_config

logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

# Initialize FastAPI app
app = FastAPI(
    title="TravelAI API",
    version="0.1.0",
    description="AI-powered destination discovery, comparison and itinerary planning API"
)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.allowed_origins if not cloud_config.IS_CLOUD_RUN else ["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(destinations.router, prefix="/api/v1")
app.include_router(itinerary.router, prefix="/api/v1")
app.include_router(chat.router, prefix="/api/v1", tags=["chat"])
app.include_router(compare.router, prefix="/api/v1")
app.include_router(store.router, prefix="/api/v1")
app.include_router(auth.router, prefix="/api/v1")
# served at the path the frontend already calls
app.include_router(images.router)

@app.get("/health")
def health_check():
    """Health check endpoint for Cloud Run and monitoring"""
    return {
        "status": "ok",
        "message": "TravelAI API is running",
        "environment": "cloud-run" if cloud_config.IS_CLOUD_RUN else "local",
        "project_id": cloud_config.PROJECT_ID if cloud_config.IS_CLOUD_RUN else "local"
    }

@app.get("/")
def root():
    """Root endpoint with API information"""
    return {
        "name": "TravelAI API",
        "version": "0.1.0",
        "docs_url": "/docs",
        "health_url": "/health"
    }

# For Cloud Run, the port is set via environment variable
if __name__ == "__main__":
    import uvicorn
    port = cloud_config.PORT if cloud_config.IS_CLOUD_RUN else settings.port
    uvicorn.run(app, host="0.0.0.0", port=port)
