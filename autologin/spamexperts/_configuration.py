#  AutoLogin - Python library for generating auto-login URLs for third-party control panels
#  Copyright (C) 2024  Cypheriel
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Self


@dataclass(kw_only=True)
class SpamExpertsConfiguration:
    hostname: str
    username: str
    password: str = field(repr=False)
    timeout: float = 10.0
    verify: bool = True

    @property
    def base_url(self: Self) -> str:
        return f"https://{self.hostname}"
