"""
Pydantic response schemas for the API.
"""
from __future__ import annotations

from typing import Any

from pydantic import BaseModel


class HealthResponse(BaseModel):
    status: str
    records: int
    months: dict[str, int]
    data_file: str


class StatisticsResponse(BaseModel):
    totalSaleAmount: float
    soldCount: int
    notSoldCount: int


class RangeCount(BaseModel):
    range: str
    count: int


class CombinedResponse(BaseModel):
    transactions: list[dict[str, Any]]
    statistics: StatisticsResponse
    barChart: list[RangeCount]
    pieChart: dict[str, int]


class ErrorResponse(BaseModel):
    message: str
    error: str
