"""
Copyright (c) 2025 Ynosound.
All rights reserved.

See LICENSE file in the project root for full license information.
"""


class InvalidOrderError(ValueError):
    pass
