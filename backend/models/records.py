from pydantic import BaseModel, Field


class Record(BaseModel):
    orderId: str
    projectId: str
    projectName: str
    projectType: str
    region: str
    price: float
    date: str


class RecordInput(BaseModel):
    projectName: str | None = None
    projectType: str | None = None
    region: str | None = None
    price: float | None = Field(None, allow_inf_nan=False)


class CreateRecordResponse(BaseModel):
    success: bool = True
    orderId: str
    projectId: str
    message: str = "Data added successfully"


class FilterCriteria(BaseModel):
    projectType: str | None = None
    region: str | None = None
    startDate: str | None = None
    endDate: str | None = None


class Statistics(BaseModel):
    totalOrders: int = 0
    totalRevenue: float = 0
    avgPrice: float = 0
    projectTypeCounts: dict[str, int] = Field(default_factory=dict)
    regionCounts: dict[str, int] = Field(default_factory=dict)


class SeedSummary(BaseModel):
    created: bool
    seeded: bool
    rows: int


class ErrorResponse(BaseModel):
    error: str
