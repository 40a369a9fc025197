# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .registry import InMemorySessionRegistry

__all__ = ["InMemorySessionRegistry"]
