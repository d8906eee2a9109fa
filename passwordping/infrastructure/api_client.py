"""HTTP client for the PasswordPing API."""

import logging
from typing import Any, Optional, Union
import httpx
import pydantic
from passwordping.config.config import config
from passwordping.domain.consts import ApiParams, ApiPaths, ErrorMessages, PasswordType
from passwordping.domain.errors import APIError, ConfigurationError, TransportError
from passwordping.domain.models import AccountResponse, ApiModel, ExposureDetail, ExposureSummary
from passwordping.factories.hasher_factory import calc_password_hash
from passwordping.services.credential_hashing import calc_credential_hashes, calc_password_lookup_hashes

logger = logging.getLogger(__name__)


class PasswordPing:
    """
    Async client for the PasswordPing API.

    Every call is an independent GET; a 404 answer is a negative result
    (False, an empty summary or None), never an error. Transport failures
    raise TransportError; unexpected statuses and malformed bodies raise
    APIError. Nothing is retried.
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        secret: Optional[str] = None,
        host: Optional[str] = None,
        timeout: Optional[float] = None,
    ) -> None:
        """
        Initialize the client.

        Raises:
            ConfigurationError: If api_key or secret is missing or empty.
        """
        if not api_key or not secret:
            raise ConfigurationError(ErrorMessages.MISSING_CREDENTIALS)

        self.api_key = api_key
        self.secret = secret
        self.host = host or config.API_HOST
        self.timeout = timeout if timeout is not None else config.REQUEST_TIMEOUT
        self.base_url = f"https://{self.host}{ApiPaths.VERSION_PREFIX}"
        self.client = httpx.AsyncClient(
            base_url=self.base_url,
            auth=httpx.BasicAuth(api_key, secret),
            timeout=self.timeout,
            headers={
                "Accept": "application/json",
                "User-Agent": config.USER_AGENT,
            },
        )

    @classmethod
    def from_config(cls) -> "PasswordPing":
        """Build a client from PP_API_KEY, PP_API_SECRET and PP_API_HOST."""
        return cls(config.API_KEY, config.API_SECRET, config.API_HOST)

    async def __aenter__(self) -> "PasswordPing":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()

    async def close(self) -> None:
        """
        Close HTTP client and cleanup resources.

        Should be called when done with the client to properly close connections.
        """
        await self.client.aclose()

    async def check_password(self, password: str) -> bool:
        """Return True if the password is in the breach corpus."""
        response = await self._make_rest_call(
            ApiPaths.PASSWORDS, calc_password_lookup_hashes(password)
        )
        return response is not None

    async def check_credentials(self, username: str, password: str) -> bool:
        """
        Return True if this username/password pair is known to be compromised.

        Looks the account up by the SHA-256 of the lowercased username, then
        submits one credential hash per password hash the account requires.
        """
        account = await self._make_rest_call(
            ApiPaths.ACCOUNTS,
            {ApiParams.USERNAME: calc_password_hash(PasswordType.SHA256, username.lower())},
            model=AccountResponse,
        )
        if account is None:
            return False

        credential_hashes = calc_credential_hashes(username, password, account)
        if not credential_hashes:
            logger.debug("No computable credential hashes for account")
            return False

        response = await self._make_rest_call(
            ApiPaths.CREDENTIALS, {ApiParams.HASHES: credential_hashes}
        )
        return response is not None

    async def get_exposures_for_user(self, username: str) -> ExposureSummary:
        """Return the exposures a username appears in (empty if unknown)."""
        summary = await self._make_rest_call(
            ApiPaths.EXPOSURES, {ApiParams.USERNAME: username.lower()}, model=ExposureSummary
        )
        if summary is None:
            return ExposureSummary.empty()
        return summary

    async def get_exposure_details(self, exposure_id: str) -> Optional[ExposureDetail]:
        """Return details for one exposure, or None if the ID does not exist."""
        return await self._make_rest_call(
            ApiPaths.EXPOSURES, {ApiParams.ID: exposure_id}, model=ExposureDetail
        )

    @staticmethod
    def calc_password_hash(
        password_type: Union[PasswordType, int],
        password: str,
        salt: Optional[str] = None,
    ) -> str:
        """Compute a password hash locally; see passwordping.factories.calc_password_hash."""
        return calc_password_hash(password_type, password, salt)

    async def _make_rest_call(
        self,
        path: str,
        params: dict[str, Any],
        model: Optional[type[ApiModel]] = None,
    ) -> Optional[Any]:
        """
        GET `path` with query `params`.

        Returns:
            On 200, the body parsed into `model` (or the decoded JSON when no
            model is given); None on 404.

        Raises:
            TransportError: If the request never got an HTTP response.
            APIError: On any other status, or a 200 body that does not parse.
        """
        logger.debug(f"GET {self.host}{ApiPaths.VERSION_PREFIX}{path} params={sorted(params)}")

        try:
            response = await self.client.get(path, params=params)
        except httpx.TransportError as e:
            raise TransportError(self._transport_error_message(e), host=self.host) from e

        logger.debug(f"GET {path} completed with status {response.status_code}")

        if response.status_code == httpx.codes.NOT_FOUND:
            return None

        if response.status_code != httpx.codes.OK:
            raise APIError(
                f"{ErrorMessages.UNEXPECTED_RESPONSE}: {response.status_code} {response.text}",
                status_code=response.status_code,
                body=response.text,
            )

        # Some endpoints answer 200 with an empty body
        if not response.content:
            data = {}
        else:
            try:
                data = response.json()
            except ValueError as e:
                raise APIError(
                    f"{ErrorMessages.UNEXPECTED_RESPONSE}: invalid JSON body",
                    status_code=response.status_code,
                    body=response.text,
                ) from e

        if model is None:
            return data
        try:
            return model.model_validate(data)
        except pydantic.ValidationError as e:
            raise APIError(
                f"{ErrorMessages.UNEXPECTED_RESPONSE}: unexpected {model.__name__} body "
                f"({e.error_count()} validation errors)",
                status_code=response.status_code,
                body=response.text,
            ) from e

    def _transport_error_message(self, error: httpx.TransportError) -> str:
        detail = str(error) or type(error).__name__
        message = f"{ErrorMessages.UNEXPECTED_TRANSPORT_ERROR}: {detail}"
        if self.host not in detail:
            message += f" ({self.host})"
        return message
