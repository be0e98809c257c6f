"""zt configuration."""

from __future__ import annotations

from pydantic import BaseModel, Field


class ZstdConfig(BaseModel):
    read_size: int = Field(default=131_075, gt=0)
    max_window_size: int = Field(default=0, ge=0)
    read_across_frames: bool = True


class Config(BaseModel):
    zstd: ZstdConfig = Field(default_factory=ZstdConfig)
    chunk_size: int = Field(default=64 * 1024, gt=0)
