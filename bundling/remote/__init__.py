"""
Remote execution of bundled submissions.

Bundling never talks to the network; this subpackage is the only place that
does.
"""
from .client import ExecutionBackend, OneCompilerBackend, get_backend
from .config import RunnerConfig, load_runner_config

__all__ = [
    'ExecutionBackend',
    'OneCompilerBackend',
    'get_backend',
    'RunnerConfig',
    'load_runner_config',
]
