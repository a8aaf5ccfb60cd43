"""
Data models for jaildash.

Jail and Plugin validate the objects returned by the management API
(GET /api/v2.0/jail and GET /api/v2.0/plugin). Unknown fields are ignored.
ViewRecord is the immutable per-jail value published to the dashboard.
"""

from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Jail(BaseModel):
    """One iocage jail as reported by the API"""
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: str
    address: str = Field(default="", alias="ip4_addr")

    @field_validator("id", mode="before")
    @classmethod
    def _id_to_str(cls, value: Any) -> Any:
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return str(value)
        return value

    @field_validator("address", mode="before")
    @classmethod
    def _address_to_str(cls, value: Any) -> Any:
        if value is None:
            return ""
        return value


class Plugin(BaseModel):
    """Installed plugin metadata; matched to a jail by name (nameless plugins never match)"""
    model_config = ConfigDict(frozen=True)

    name: Optional[str] = None
    plugin_repository: str = ""
    admin_portals: List[str] = Field(default_factory=list)

    @field_validator("name", mode="before")
    @classmethod
    def _name_to_str(cls, value: Any) -> Any:
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return str(value)
        return value

    @field_validator("plugin_repository", mode="before")
    @classmethod
    def _repository_to_str(cls, value: Any) -> Any:
        if value is None:
            return ""
        return value

    @field_validator("admin_portals", mode="before")
    @classmethod
    def _portals_to_list(cls, value: Any) -> Any:
        # Anything other than an array means "no admin portal"
        if not isinstance(value, list):
            return []
        return [str(url) for url in value if url is not None]


class ViewRecord(BaseModel):
    """What the dashboard shows for a single jail"""
    model_config = ConfigDict(frozen=True)

    address: str
    admin_url: Optional[str] = None
    icon_url: Optional[str] = None
