"""Pydantic request models for API endpoints."""

from pydantic import BaseModel

from roll_tables import FillStrategy, RollTable


class GenerateBody(BaseModel):
    die_size: int
    source_items: list[str] = []
    fill_strategy: FillStrategy = "auto"
    allow_duplicates: bool = False
    source_list_name: str | None = None
    placeholder_text: str | None = None
    balanced: bool = False


class OptimizeBody(BaseModel):
    table: RollTable
    source_items: list[str]


class ShuffleBody(BaseModel):
    table: RollTable
    seed: int | None = None


class ValidateBody(BaseModel):
    table: RollTable
    die_size: int


class ExportBody(BaseModel):
    table: RollTable
    format: str
    name: str | None = None
