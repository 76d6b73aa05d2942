# Gunicorn configuration file
# Usage: gunicorn -c deployment/gunicorn.conf.py run:app

# Server socket
bind = "0.0.0.0:8080"
backlog = 2048

# Worker processes. Each worker parses and caches the portfolio CSV on its
# first request.
workers = 2
worker_class = "sync"
timeout = 60
keepalive = 2
max_requests = 1000
max_requests_jitter = 100

preload_app = True

# Logging
accesslog = "-"
errorlog = "-"
loglevel = "info"
access_log_format = '%(h)s %(l)s %(u)s %(t)s "%(r)s" %(s)s %(b)s "%(f)s" "%(a)s" %(D)s'


# Custom access log filter to suppress health check logs
class HealthCheckFilter:
    def filter(self, record):
        if hasattr(record, 'getMessage'):
            message = record.getMessage()
            return not ('/health' in message and ' 200 ' in message)
        return True


def when_ready(server):
    import logging
    access_logger = logging.getLogger("gunicorn.access")
    access_logger.addFilter(HealthCheckFilter())


# Process naming
proc_name = "portfolio_site"

# Server mechanics
daemon = False
pidfile = "/tmp/gunicorn.pid"

# Security
limit_request_line = 4094
limit_request_fields = 100
limit_request_field_size = 8190
