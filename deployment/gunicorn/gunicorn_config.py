import multiprocessing
import os

# Gunicorn settings for the farm ledger API. Every value can be overridden
# from the environment of the service unit.
bind = os.getenv("GUNICORN_BIND", "127.0.0.1:8000")
workers = int(os.getenv("GUNICORN_WORKERS", multiprocessing.cpu_count() * 2 + 1))
worker_class = "sync"
max_requests = int(os.getenv("GUNICORN_MAX_REQUESTS", 1000))
max_requests_jitter = 100
timeout = int(os.getenv("GUNICORN_TIMEOUT", 60))
keepalive = 5

# Logging ("-" sends to stdout/stderr for journald)
accesslog = os.getenv("GUNICORN_ACCESS_LOG", "-")
errorlog = os.getenv("GUNICORN_ERROR_LOG", "-")
loglevel = os.getenv("GUNICORN_LOG_LEVEL", "info")
access_log_format = '%(h)s %(t)s "%(r)s" %(s)s %(b)s %(D)s'

proc_name = "farm-ledger"

daemon = False
umask = 0o007


def on_starting(server):
    server.log.info("Starting farm ledger API")


def when_ready(server):
    server.log.info(f"Farm ledger API ready on {bind} with {workers} workers")


def worker_abort(worker):
    worker.log.warning(f"Worker {worker.pid} aborted (timeout {timeout}s)")
