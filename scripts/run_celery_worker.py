"""
Run Celery worker for async lineup generation.
"""

import sys
import os

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from lineup_app.core.celery_app import celery_app

if __name__ == "__main__":
    print("=" * 60)
    print("Youth Baseball Lineup - Celery Worker")
    print("=" * 60)
    print("Worker will process lineup generation tasks")
    print("=" * 60)

    celery_app.worker_main([
        "worker",
        "--loglevel=info",
        "--concurrency=2",
        "--pool=solo" if os.name == "nt" else "--pool=prefork"  # Use solo pool on Windows
    ])
