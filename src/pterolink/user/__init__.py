# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""
Client-scope (``/api/client``) resources.

Classes:
    ClientServers: Servers of the key owner and power control.
    Account, ApiKeys, TwoFactor: Account settings.
"""

from .account import Account, ApiKeys, TwoFactor
from .servers import POWER_SIGNALS, ClientServers, PowerSignal

__all__ = [
    "POWER_SIGNALS",
    "Account",
    "ApiKeys",
    "ClientServers",
    "PowerSignal",
    "TwoFactor",
]
