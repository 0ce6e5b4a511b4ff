"""
HTTP client for the upstream ZUS Coffee wallet API.
Sends the mobile app's headers and multipart form bodies.
"""

import time
from typing import Optional

import requests
from requests.adapters import HTTPAdapter

from app_logger import get_logger, mask_token
from config.settings import (
    ZUS_BASE_URL, REQUEST_TIMEOUT, APP_HEADERS,
    BATCH_MAX_WORKERS,
)
from models import UpstreamResult

logger = get_logger("zus_relay")


class ZusClient:
    """Executes upstream calls and never raises for HTTP or network failures."""

    def __init__(self, base_url: str = ZUS_BASE_URL, timeout: int = REQUEST_TIMEOUT):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout

        self.session = requests.Session()
        self.session.headers.update(APP_HEADERS)

        # Batch fan-out shares this session across worker threads
        adapter = HTTPAdapter(pool_connections=4, pool_maxsize=max(BATCH_MAX_WORKERS, 10))
        self.session.mount("https://", adapter)
        self.session.mount("http://", adapter)

    def url(self, path: str) -> str:
        if path.startswith("http://") or path.startswith("https://"):
            return path
        return f"{self.base_url}{path}"

    def request(
        self,
        method: str,
        path: str,
        data: Optional[dict] = None,
        bearer: Optional[str] = None,
        device_id: Optional[str] = None,
        params: Optional[dict] = None,
        bearer_fallback: bool = True,
    ) -> UpstreamResult:
        """Execute a single upstream call.

        POST/DELETE fields go out as multipart/form-data, the way the mobile
        app submits them. Without a bearer the upstream expects the literal
        token "false"; pass ``bearer_fallback=False`` to leave the
        authorization header out instead.
        """
        method = method.upper()
        headers = {}
        if bearer or bearer_fallback:
            headers["authorization"] = f"Bearer {bearer or 'false'}"
        if device_id:
            headers["device-id"] = device_id

        files = None
        if method in ("POST", "DELETE"):
            files = {k: (None, "" if v is None else str(v)) for k, v in (data or {}).items()} or None

        logger.info(
            f"Upstream request: {method} {path} | params={params or {}} | "
            f"fields={sorted(files) if files else []} | bearer={mask_token(bearer)}"
        )
        start_time = time.time()

        try:
            resp = self.session.request(
                method=method,
                url=self.url(path),
                params=params,
                files=files,
                headers=headers,
                timeout=self.timeout,
            )
        except requests.exceptions.RequestException as e:
            response_time_ms = int((time.time() - start_time) * 1000)
            logger.error(
                f"Upstream error: {method} {path} | error={e} | "
                f"response_time_ms={response_time_ms}"
            )
            return UpstreamResult(status=0, body=None, error=str(e))

        response_time_ms = int((time.time() - start_time) * 1000)

        try:
            payload = resp.json()
        except ValueError:
            payload = None

        logger.info(
            f"Upstream response: {method} {path} | status={resp.status_code} | "
            f"response_time_ms={response_time_ms}"
        )
        return UpstreamResult(status=resp.status_code, body=payload, error=None)

    def get(self, path: str, **kwargs) -> UpstreamResult:
        return self.request("GET", path, **kwargs)

    def post(self, path: str, **kwargs) -> UpstreamResult:
        return self.request("POST", path, **kwargs)

    def delete(self, path: str, **kwargs) -> UpstreamResult:
        return self.request("DELETE", path, **kwargs)


# Global ZusClient instance
zus_client = ZusClient()
