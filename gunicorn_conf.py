"""Gunicorn settings for serving app.main:app with uvicorn workers.

Usage: gunicorn -c gunicorn_conf.py app.main:app
"""

import os

proc_name = "matchmaking-api"
bind = os.getenv("GUNICORN_BIND", "0.0.0.0:8000")
worker_class = "uvicorn.workers.UvicornWorker"
workers = int(os.getenv("WEB_CONCURRENCY", 2))

timeout = int(os.getenv("GUNICORN_TIMEOUT", 30))
graceful_timeout = int(os.getenv("GUNICORN_GRACEFUL_TIMEOUT", 30))
keepalive = int(os.getenv("GUNICORN_KEEPALIVE", 5))

# Worker recycling
max_requests = int(os.getenv("GUNICORN_MAX_REQUESTS", 2000))
max_requests_jitter = int(os.getenv("GUNICORN_MAX_REQUESTS_JITTER", 200))

# Server logs go to stdout/stderr and are captured by loguru's InterceptHandler
accesslog = "-"
errorlog = "-"
loglevel = os.getenv("LOG_LEVEL", "info").lower()

# Each worker runs the app lifespan (tables, telemetry) after fork
preload_app = False
