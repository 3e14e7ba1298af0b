"""Pydantic models for tracker API payloads."""

from pydantic import BaseModel


class FieldChange(BaseModel):
    """A single input change from the page."""

    field: str
    value: str
