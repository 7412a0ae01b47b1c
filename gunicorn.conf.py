"""Gunicorn config for container deployment."""
import os

# Bind to PORT or default 3000
bind = f"0.0.0.0:{os.environ.get('PORT', '3000')}"

# Uvicorn async workers; each request re-reads the record file, so workers
# share no state. Tune via WEB_CONCURRENCY env var.
worker_class = "uvicorn.workers.UvicornWorker"
workers = int(os.environ.get("WEB_CONCURRENCY", "2"))

# Timeout: a full-collection pass per request is fast; seeding waits on the upstream feed
timeout = 60

# Graceful timeout for shutdown
graceful_timeout = 30

keepalive = 65

# Logging
accesslog = "-"
errorlog = "-"
loglevel = "info"
