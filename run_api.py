"""
Run the FastAPI backend server.
"""

import uvicorn

from lineup_app.core.config import API_HOST, API_PORT

if __name__ == "__main__":
    print("=" * 60)
    print("Youth Baseball Lineup API Server")
    print("=" * 60)
    print(f"Starting server on http://localhost:{API_PORT}")
    print(f"API Documentation: http://localhost:{API_PORT}/docs")
    print("=" * 60)

    uvicorn.run(
        "lineup_app.main:app",
        host=API_HOST,
        port=API_PORT,
        reload=True,
        log_level="info"
    )
