"""
Configuration defaults for the mediation layer.
"""

from typing import Any, Mapping

from pydantic import BaseModel, ConfigDict, Field, field_validator


class MediatorConfig(BaseModel):
    """Defaults record consulted while mediating a request.

    Instances are frozen: a config is loaded once and then shared by every
    request handled by the process.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    content_type: str = Field(
        "application/json",
        alias="content-type",
        description="Mime-type rendered when the client accepts anything",
    )

    method_override_header: str = Field(
        "X-HTTP-Method-Override",
        alias="method-override-header",
        description="Request header that overrides the transport method",
    )

    indent: str = Field(
        "\t",
        description="Indent unit used when pretty-printing JSON",
    )

    no_cache_header: str = Field(
        "no-cache, no-store, max-age=0, must-revalidate",
        alias="no-cache-header",
        description="Cache-Control value set after PUT, POST and DELETE",
    )

    @field_validator("content_type")
    @classmethod
    def _content_type_is_concrete(cls, value: str) -> str:
        value = value.strip().lower()
        if "/" not in value or "*" in value:
            raise ValueError(f"default content type must be a concrete mime-type, got {value!r}")
        return value

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Any]) -> "MediatorConfig":
        """Load a config from a defaults mapping.

        Both dashed keys (``content-type``) and Python-style keys
        (``content_type``) are accepted.
        """
        return cls.model_validate(dict(mapping))


DEFAULT_CONFIG = MediatorConfig()
