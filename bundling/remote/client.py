# ==========================================
# EXECUTION BACKENDS
# ==========================================
import os
from abc import ABC, abstractmethod
from typing import Dict

import requests

from ..errors import RemoteRunError
from ..log import debug_log
from .config import RunnerConfig

API_KEY_ENV = "ONECOMPILER_API_KEY"


class ExecutionBackend(ABC):
    """Abstract base class for remote compile-and-run services."""

    @abstractmethod
    def run(self, payload: Dict) -> Dict:
        pass


class OneCompilerBackend(ExecutionBackend):
    """Backend for the OneCompiler API hosted on RapidAPI."""

    def __init__(self, config: RunnerConfig = None):
        self.config = config or RunnerConfig()

    def run(self, payload: Dict) -> Dict:
        api_key = os.environ.get(API_KEY_ENV)
        if not api_key:
            raise RemoteRunError(
                f"Missing {API_KEY_ENV}.",
                suggestion=f"Set it with: export {API_KEY_ENV}='your-key-here'"
            )

        headers = {
            "Content-Type": "application/json",
            "X-RapidAPI-Key": api_key.strip(),
            "X-RapidAPI-Host": self.config.host,
        }
        debug_log(f"POST {self.config.url} ({len(payload.get('files', []))} file(s))")
        try:
            resp = requests.post(self.config.url, json=payload, headers=headers, timeout=self.config.timeout)
            resp.raise_for_status()
        except requests.exceptions.Timeout:
            raise RemoteRunError(
                f"Request timed out ({self.config.timeout:g}s).",
                suggestion="Try again or raise 'timeout' in tubundle.json"
            )
        except requests.exceptions.ConnectionError:
            raise RemoteRunError(
                f"Failed to connect to {self.config.url}.",
                suggestion="Check your internet connection and the configured url"
            )
        except requests.exceptions.HTTPError:
            status = resp.status_code
            if status in (401, 403):
                raise RemoteRunError(
                    "The API key was rejected.",
                    status=status,
                    suggestion=f"Check the {API_KEY_ENV} environment variable"
                )
            elif status == 429:
                raise RemoteRunError(
                    "Rate limit exceeded.",
                    status=status,
                    suggestion="Wait a minute before retrying"
                )
            elif status >= 500:
                raise RemoteRunError(
                    f"Server error ({status}). The service may be down.",
                    status=status,
                    suggestion="Try again in a moment"
                )
            else:
                raise RemoteRunError(f"API error ({status}): {resp.text}", status=status)

        try:
            return resp.json()
        except ValueError:
            raise RemoteRunError(
                f"Response is not JSON: {resp.text[:200]}",
                status=resp.status_code
            )


def get_backend(backend_type="onecompiler", config=None):
    """Factory function to get an execution backend."""
    if backend_type == "onecompiler":
        return OneCompilerBackend(config)
    raise RemoteRunError(f"Unknown backend '{backend_type}'", suggestion="Use 'onecompiler'")
