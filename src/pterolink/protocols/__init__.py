# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""
Protocol definitions for pluggable pterolink components.

Available protocols:
- HttpTransport: Interface for the HTTP layer the clients delegate to
"""

from .transport import HttpTransport

__all__ = ["HttpTransport"]
