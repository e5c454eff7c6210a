"""
Service context extraction for distributed logging.

Identifies the running instance in every log line: `{service}@{env}:{instance}`.
"""

from functools import lru_cache
import os
import socket


@lru_cache(maxsize=1)
def get_service_context() -> str:
    service_name = os.getenv('SERVICE_NAME', 'event-registration-service')
    deploy_env = os.getenv('DEPLOY_ENV', 'local_dev')

    # Containers expose a short hostname, local runs fall back to the PID
    instance = os.getenv('HOSTNAME') or f'{socket.gethostname()}-{os.getpid()}'
    return f'{service_name}@{deploy_env}:{instance[:12]}'
