"""
Main entry point for the Contact Form Relay API.
Validates the environment, then builds the FastAPI app from it.
"""
from app.core.env_validator import validate_environment_variables
from app.main import create_app

# Validate environment variables at import time
validate_environment_variables(strict=True)

app = create_app()

if __name__ == "__main__":
    import uvicorn
    from app.core.config import API_HOST, API_PORT, DEBUG, LOG_LEVEL

    uvicorn.run(
        "main:app",
        host=API_HOST,
        port=API_PORT,
        reload=DEBUG,
        log_level=LOG_LEVEL.lower()
    )
