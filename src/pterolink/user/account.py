# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""Account settings of the key owner: details, credentials, API keys, 2FA."""

from __future__ import annotations

import builtins
from typing import TYPE_CHECKING

from ..error_handling import ErrorContext
from ..exceptions import ValidationError
from ..models.account import AccountAttributes, ApiKeyAttributes, TwoFactorDetails
from ..models.base import extract_attributes, extract_items

if TYPE_CHECKING:
    from ..client.base import BaseClient


class ApiKeys:
    """``/account/api-keys``"""

    def __init__(self, client: BaseClient) -> None:
        self._client = client

    async def list(self) -> builtins.list[ApiKeyAttributes]:
        data = await self._client.request(
            "GET", "/account/api-keys", context=ErrorContext(action="listing API keys")
        )
        return [ApiKeyAttributes.model_validate(item) for item in extract_items(data)]

    async def create(
        self, description: str, allowed_ips: builtins.list[str] | None = None
    ) -> tuple[ApiKeyAttributes, str | None]:
        """
        Create a key.

        Returns:
            The key record and the secret token; the panel only reveals the
            token in this response (``meta.secret_token``).
        """
        data = await self._client.request(
            "POST",
            "/account/api-keys",
            body={"description": description, "allowed_ips": allowed_ips or []},
            context=ErrorContext(action="creating API key"),
        )
        meta = (data.get("meta") or {}) if isinstance(data, dict) else {}
        return ApiKeyAttributes.model_validate(extract_attributes(data)), meta.get("secret_token")

    async def delete(self, identifier: str) -> None:
        await self._client.request(
            "DELETE",
            f"/account/api-keys/{identifier}",
            context=ErrorContext("API key", identifier, "deleting API key"),
        )


class TwoFactor:
    """``/account/two-factor``"""

    def __init__(self, client: BaseClient) -> None:
        self._client = client

    async def details(self) -> TwoFactorDetails:
        """QR code data and secret needed to set up 2FA."""
        data = await self._client.request(
            "GET", "/account/two-factor", context=ErrorContext(action="fetching 2FA setup")
        )
        payload = data.get("data") if isinstance(data, dict) else None
        return TwoFactorDetails.model_validate(payload or {})

    async def enable(self, code: str) -> list[str]:
        """Enable 2FA with a TOTP code; returns the recovery tokens."""
        data = await self._client.request(
            "POST",
            "/account/two-factor",
            body={"code": code},
            context=ErrorContext(action="enabling 2FA"),
        )
        attributes = data.get("attributes") if isinstance(data, dict) else None
        return list((attributes or {}).get("tokens") or [])

    async def disable(self, password: str) -> None:
        await self._client.request(
            "DELETE",
            "/account/two-factor",
            body={"password": password},
            context=ErrorContext(action="disabling 2FA"),
        )


class Account:
    """
    Account of the key owner.

    Attributes:
        api_keys: API key management
        two_factor: Two-factor authentication management
    """

    def __init__(self, client: BaseClient) -> None:
        self._client = client
        self.api_keys = ApiKeys(client)
        self.two_factor = TwoFactor(client)

    async def details(self) -> AccountAttributes:
        data = await self._client.request(
            "GET", "/account", context=ErrorContext("Account", None, "fetching account")
        )
        return AccountAttributes.model_validate(extract_attributes(data))

    async def update_email(self, email: str, password: str) -> None:
        if not email:
            raise ValidationError("Email must not be empty", [{"field": "email", "detail": "required"}])
        await self._client.request(
            "PUT",
            "/account/email",
            body={"email": email, "password": password},
            context=ErrorContext(action="updating account email"),
        )

    async def update_password(
        self,
        current_password: str,
        new_password: str,
        confirmation: str | None = None,
    ) -> None:
        """
        Change the account password.

        Raises:
            ValidationError: If the confirmation does not match, before any request
        """
        confirmation = new_password if confirmation is None else confirmation
        if confirmation != new_password:
            raise ValidationError(
                "Password confirmation does not match",
                [{"field": "password_confirmation", "detail": "does not match"}],
            )
        await self._client.request(
            "PUT",
            "/account/password",
            body={
                "current_password": current_password,
                "password": new_password,
                "password_confirmation": confirmation,
            },
            context=ErrorContext(action="updating account password"),
        )


__all__ = ["Account", "ApiKeys", "TwoFactor"]
