"""Tool-facing response models."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field


class FlashMessage(BaseModel):
    severity: Literal["OK", "ERROR"] = Field(description="Outcome severity.")
    message: str = Field(description="User-facing message for the operation result.")


def ok(message: str) -> FlashMessage:
    return FlashMessage(severity="OK", message=message)


def error(message: str) -> FlashMessage:
    return FlashMessage(severity="ERROR", message=message)
