"""
Celery configuration for async lineup generation.
"""

from celery import Celery

from lineup_app.core.config import REDIS_URL

celery_app = Celery(
    "lineup_generator",
    broker=REDIS_URL,
    backend=REDIS_URL,
    include=["lineup_app.tasks.lineup_tasks"]
)

celery_app.conf.update(
    task_serializer="json",
    accept_content=["json"],
    result_serializer="json",
    timezone="America/Los_Angeles",
    enable_utc=True,
    task_track_started=True,
    task_time_limit=60,
    task_soft_time_limit=50,
    worker_prefetch_multiplier=1,
    worker_max_tasks_per_child=200,
)
