"""
Posts API — Pydantic Request/Response Schemas
===============================================

What:  Pydantic models defining the API contract for the Post resource.
How:   FastAPI uses these models to validate request bodies, serialize responses,
       and generate OpenAPI documentation.

Wire format:
    Fields are camelCase on the wire (`imageUrl`) and snake_case in Python
    (`image_url`). Input accepts either spelling; output always uses the alias.

Absent vs. null:
    PostUpdate (PUT) dumps every field, so an omitted field overwrites with null.
    PostPatch (PATCH) is dumped with exclude_none, so omitted or null fields
    leave the stored value untouched.
"""

from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field


class _PostFields(BaseModel):
    """Shared author/content/imageUrl fields for all Post request shapes."""

    model_config = ConfigDict(populate_by_name=True)

    author: Optional[str] = Field(default=None, description="Post author")
    content: Optional[str] = Field(default=None, description="Post body text")
    image_url: Optional[str] = Field(
        default=None,
        alias="imageUrl",
        description="URL of an attached image",
    )


# ══════════════════════════════════════════════════════════════════════════
# Request Models
# ══════════════════════════════════════════════════════════════════════════


class PostCreate(_PostFields):
    """
    Body of POST /api/posts.

    Unknown keys (including a client-supplied `id`) are ignored; the
    database always assigns the identifier.
    """

    def to_fields(self) -> Dict[str, Any]:
        return self.model_dump()


class PostUpdate(_PostFields):
    """Body of PUT /api/posts/{id}. Every field is written, null included."""

    def to_fields(self) -> Dict[str, Any]:
        return self.model_dump()


class PostPatch(_PostFields):
    """Body of PATCH /api/posts/{id}. Only non-null fields are written."""

    def to_fields(self) -> Dict[str, Any]:
        return self.model_dump(exclude_none=True)


# ══════════════════════════════════════════════════════════════════════════
# Response Models
# ══════════════════════════════════════════════════════════════════════════


class PostResponse(_PostFields):
    """
    Full representation of a stored Post.

    Example:
        {"id": 1, "author": "alice", "content": "hi", "imageUrl": null}
    """

    model_config = ConfigDict(populate_by_name=True, from_attributes=True)

    id: int = Field(description="Unique post identifier")


class ErrorResponse(BaseModel):
    """
    Standardized error response format for all API errors.

    Fields:
        error: Machine-readable error code (e.g., "validation_error", "not_found")
        message: Human-readable description
        details: Optional extra context (e.g., which parameter failed validation)
        request_id: Correlation ID for tracing this error in server logs
    """
    error: str = Field(description="Machine-readable error code")
    message: str = Field(description="Human-readable error description")
    details: Optional[dict] = Field(default=None, description="Additional error context")
    request_id: Optional[str] = Field(default=None, description="Request correlation ID")


class HealthResponse(BaseModel):
    """Health check response showing service and database status."""
    status: str = Field(description="Overall service status: healthy, unhealthy")
    version: str = Field(description="Application version")
    database: str = Field(description="Database connectivity: connected, disconnected")
    uptime_seconds: float = Field(description="Seconds since service started")
