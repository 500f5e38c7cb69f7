# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""User account API: registration, JWT login, favourites and history."""

__version__ = "1.0.0"
