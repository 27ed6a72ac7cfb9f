# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""
HTTP transport layer.

This module provides:
- HttpResponse: Decoded response value
- HttpStatusError / TransportError: The two failure shapes a transport raises
- HttpxTransport: Default implementation over httpx
"""

from .base import HTTP_METHODS, HttpResponse, HttpStatusError, TransportError
from .httpx_transport import HttpxTransport

__all__ = [
    "HTTP_METHODS",
    "HttpResponse",
    "HttpStatusError",
    "HttpxTransport",
    "TransportError",
]
