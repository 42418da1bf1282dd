# ============================================================================
# FILE: tracknest/schemas/chart.py
# ============================================================================
from datetime import date
from tracknest.schemas.base import CamelModel

class ChartName(CamelModel):
    chart_name: str

class ChartDate(CamelModel):
    chart_date: date
