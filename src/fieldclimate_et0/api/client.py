"""
Base API client for the FieldClimate v2 API.

Handles HMAC request signing, HTTP session management, and error handling.
"""

import hashlib
import hmac
import json
import logging
import time
from email.utils import formatdate
from typing import Dict, Any, Optional, Callable

import requests  # type: ignore
from requests.adapters import HTTPAdapter  # type: ignore
from urllib3.util.retry import Retry  # type: ignore

from ..core.exceptions import FieldClimateAPIError
from .helpers import sanitize_error


DEFAULT_BASE_URL = "https://api.fieldclimate.com/v2"


class APIClient:
    """Base client for signed requests against the FieldClimate API."""

    def __init__(
        self,
        public_key: str,
        private_key: str,
        base_url: str = DEFAULT_BASE_URL,
        timeout: int = 30,
        max_retries: int = 3,
        verify_ssl: bool = True,
        logger: Optional[logging.Logger] = None,
        clock: Optional[Callable[[], float]] = None
    ):
        """
        Initialize API client.

        Args:
            public_key: HMAC public key
            private_key: HMAC private key (never sent, only used to sign)
            base_url: Base URL for the API
            timeout: Request timeout in seconds
            max_retries: Maximum number of retry attempts
            verify_ssl: Whether to verify SSL certificates
            logger: Logger instance
            clock: Returns epoch seconds for the Request-Date header
        """
        if not public_key or not private_key:
            raise ValueError("Both public and private keys are required")

        self.public_key = public_key
        self._private_key = private_key
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.verify_ssl = verify_ssl
        self.logger = logger or logging.getLogger(__name__)
        self._clock = clock or time.time

        # Setup session with retry strategy
        self.session = requests.Session()
        retry_strategy = Retry(
            total=max_retries,
            backoff_factor=1,
            status_forcelist=[429, 500, 502, 503, 504],
            allowed_methods=["GET", "POST", "PUT"]
        )
        adapter = HTTPAdapter(max_retries=retry_strategy)
        self.session.mount("http://", adapter)
        self.session.mount("https://", adapter)
        self.session.headers.update({"Accept": "application/json"})

    def sign(self, method: str, endpoint: str, timestamp: str, body: Optional[str] = None) -> str:
        """
        Compute the request signature.

        The signed content is method + endpoint + timestamp + public key,
        followed by the JSON body for requests that carry one.

        Returns:
            Hex-encoded HMAC-SHA256 digest
        """
        content = f"{method}{endpoint}{timestamp}{self.public_key}"
        if body is not None:
            content += body
        return hmac.new(
            self._private_key.encode("utf-8"),
            content.encode("utf-8"),
            hashlib.sha256
        ).hexdigest()

    def _build_headers(self, method: str, endpoint: str, body: Optional[str]) -> Dict[str, str]:
        timestamp = formatdate(self._clock(), usegmt=True)
        signature = self.sign(method, endpoint, timestamp, body)

        headers = {
            "Authorization": f"hmac {self.public_key}:{signature}",
            "Request-Date": timestamp,
        }
        if body is not None:
            headers["Content-Type"] = "application/json"
        return headers

    def _make_request(
        self,
        method: str,
        endpoint: str,
        data: Optional[Dict[str, Any]] = None
    ) -> Any:
        """
        Make a signed HTTP request.

        Args:
            method: HTTP method (GET, POST, PUT, etc.)
            endpoint: API endpoint (without base URL), e.g. '/user/stations'
            data: JSON body (ignored for GET)

        Returns:
            Decoded JSON response

        Raises:
            FieldClimateAPIError: On a non-2xx response (credentials scrubbed)
            requests.exceptions.RequestException: On transport failure
        """
        method = method.upper()
        endpoint = "/" + endpoint.lstrip("/")
        body = None
        if data is not None and method != "GET":
            body = json.dumps(data, separators=(",", ":"))

        url = f"{self.base_url}{endpoint}"
        headers = self._build_headers(method, endpoint, body)

        self.logger.debug(f"{method} {url}")

        try:
            response = self.session.request(
                method=method,
                url=url,
                headers=headers,
                data=body,
                timeout=self.timeout,
                verify=self.verify_ssl
            )
        except requests.exceptions.RequestException as e:
            message = sanitize_error(str(e), self.public_key, self._private_key)
            self.logger.error(f"API request failed: {method} {url} - {message}")
            raise

        if not response.ok:
            message = sanitize_error(response.text, self.public_key, self._private_key)
            self.logger.error(f"API request failed: {method} {url} - HTTP {response.status_code}")
            raise FieldClimateAPIError(
                f"HTTP {response.status_code}: {message}",
                status_code=response.status_code
            )

        return response.json()

    def get(self, endpoint: str) -> Any:
        """Make a signed GET request."""
        return self._make_request("GET", endpoint)

    def post(self, endpoint: str, data: Dict[str, Any]) -> Any:
        """Make a signed POST request."""
        return self._make_request("POST", endpoint, data=data)

    def close(self) -> None:
        """Close the session."""
        self.session.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
