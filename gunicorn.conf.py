# Gunicorn Configuration File
# Production WSGI server configuration for the career guidance API

# Server socket
bind = "0.0.0.0:5000"
backlog = 2048

# Worker processes; the engine is stateless so workers scale independently
workers = 2
worker_class = "sync"
timeout = 30
graceful_timeout = 30
keepalive = 2

# Restart workers after this many requests
max_requests = 1000
max_requests_jitter = 100

# Security
limit_request_line = 4094
limit_request_fields = 100
limit_request_field_size = 8190

# Logging
accesslog = "-"
errorlog = "-"
loglevel = "info"
access_log_format = '%(h)s %(l)s %(u)s %(t)s "%(r)s" %(s)s %(b)s "%(f)s" "%(a)s" %(D)s'

# Process naming
proc_name = 'career-guidance-api'

# Preload application code before the worker processes are forked
preload_app = True
