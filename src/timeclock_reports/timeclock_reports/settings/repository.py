from __future__ import annotations

from typing import Optional, Protocol

from .model import TenantSettings


class SettingsRepository(Protocol):
    def get_for_tenant(self, tenant_id: str) -> Optional[TenantSettings]:
        raise NotImplementedError
