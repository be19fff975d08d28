# api/backend_client.py
from typing import Any, Dict, List, Optional

import requests
from loguru import logger
from tenacity import retry, retry_if_exception, stop_after_attempt, wait_fixed

from api import config
from api.exceptions import BackendError


def _is_retryable(exc: BaseException) -> bool:
    """Connection errors, timeouts and 5xx; never 4xx or a bad body."""
    if not isinstance(exc, BackendError):
        return False
    return exc.status_code is None or exc.status_code >= 500


def _log_retry(retry_state) -> None:
    logger.warning(
        f"{retry_state.outcome.exception()} "
        f"(attempt {retry_state.attempt_number}), retrying"
    )


class BackendClient:
    """
    Thin wrapper over the marketplace REST backend.

    Every request carries `Authorization: Bearer <token>` when a token is
    known and expects a JSON body. Connection errors, timeouts and 5xx
    responses are retried a fixed number of times; 4xx are not.
    """

    def __init__(
        self,
        token: Optional[str] = None,
        base_url: str = config.BACKEND_URL,
        timeout: float = config.BACKEND_TIMEOUT,
        retries: int = config.BACKEND_RETRIES,
        retry_delay: float = config.BACKEND_RETRY_DELAY,
        session: Optional[requests.Session] = None,
    ):
        self.token = token or config.BACKEND_API_TOKEN
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.retries = max(1, retries)
        self.retry_delay = retry_delay
        self.session = session or requests.Session()

    # ————————————————
    # 1) RAW REQUEST WITH FIXED RETRY
    # ————————————————
    def _headers(self) -> Dict[str, str]:
        headers = {"Accept": "application/json"}
        if self.token:
            headers["Authorization"] = f"Bearer {self.token}"
        return headers

    def _send(self, method: str, path: str, **kwargs) -> Any:
        url = f"{self.base_url}/{path.lstrip('/')}"
        try:
            resp = self.session.request(
                method, url, headers=self._headers(), timeout=self.timeout, **kwargs
            )
        except (requests.ConnectionError, requests.Timeout) as e:
            raise BackendError(f"{method} {path} failed: {e}") from e

        if resp.status_code >= 400:
            raise BackendError(f"{method} {path} returned {resp.status_code}", resp.status_code)
        try:
            return resp.json()
        except ValueError as e:
            raise BackendError(
                f"{method} {path} returned invalid JSON", resp.status_code
            ) from e

    def request(self, method: str, path: str, **kwargs) -> Any:
        send = retry(
            stop=stop_after_attempt(self.retries),
            wait=wait_fixed(self.retry_delay),
            retry=retry_if_exception(_is_retryable),
            before_sleep=_log_retry,
            reraise=True,
        )(self._send)
        return send(method, path, **kwargs)

    # ————————————————
    # 2) INFLUENCER ENDPOINTS
    # ————————————————
    def list_influencers(self) -> List[Dict[str, Any]]:
        """Like fetch_influencers, but a backend failure raises BackendError."""
        data = self.request("GET", "/influencers")
        return data if isinstance(data, list) else []

    def fetch_influencers(self) -> List[Dict[str, Any]]:
        try:
            return self.list_influencers()
        except BackendError as e:
            logger.error(f"Error fetching influencers: {e}")
            return []

    def fetch_influencer_profile(self, influencer_id: str) -> Optional[Dict[str, Any]]:
        try:
            data = self.request("GET", f"/profile/{influencer_id}")
        except BackendError as e:
            logger.error(f"Error fetching influencer profile {influencer_id}: {e}")
            return None
        return data if isinstance(data, dict) else None

    def toggle_wishlist(self, influencer_id: str, is_wishlisted: bool) -> Any:
        """Unlike when already wishlisted, like otherwise. Raises on failure."""
        endpoint = "/influencers/dislike" if is_wishlisted else "/influencers/like"
        try:
            return self.request("POST", endpoint, json={"influencerId": influencer_id})
        except BackendError as e:
            logger.error(f"Error toggling wishlist for {influencer_id}: {e}")
            raise

    def fetch_wishlist(self) -> List[Dict[str, Any]]:
        try:
            data = self.request("GET", "/wishlist")
        except BackendError as e:
            logger.error(f"Error fetching wishlist: {e}")
            return []
        return data or []

    def fetch_niches(self) -> List[Any]:
        try:
            data = self.request("GET", "/niches")
        except BackendError as e:
            logger.error(f"Error fetching niches: {e}")
            return []
        return data or []
