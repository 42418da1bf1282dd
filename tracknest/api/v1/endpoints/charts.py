# ============================================================================
# FILE: tracknest/api/v1/endpoints/charts.py
# ============================================================================
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from typing import List
from tracknest.db.session import get_db
from tracknest.schemas.chart import ChartName, ChartDate
from tracknest.schemas.music import SongInfo
from tracknest.services.chart_service import chart_service
from tracknest.core.exceptions import TrackNestError, ServerError
import logging

logger = logging.getLogger(__name__)
router = APIRouter()

@router.get("", response_model=List[ChartName])
async def get_chart_names(db: Session = Depends(get_db)):
    """Distinct chart names; empty list when no charts are loaded"""
    try:
        return chart_service.get_chart_names(db)
    except Exception as e:
        logger.error(f"Chart names error: {e}")
        raise ServerError("Server error while fetching top charts. Please try again later.")

@router.get("/{name}/dates", response_model=List[ChartDate])
async def get_chart_dates(name: str, db: Session = Depends(get_db)):
    """Dates available for a chart, newest first"""
    try:
        return chart_service.get_chart_dates(db, name)
    except TrackNestError:
        raise
    except Exception as e:
        logger.error(f"Chart dates error for {name!r}: {e}")
        raise ServerError("Server error while fetching dates. Please try again later.")

@router.get("/{name}/{chart_date}/songs", response_model=List[SongInfo])
async def get_chart_songs(name: str, chart_date: str, db: Session = Depends(get_db)):
    """Songs on a chart for one date, most played first"""
    try:
        return chart_service.get_chart_songs(db, name, chart_date)
    except TrackNestError:
        raise
    except Exception as e:
        logger.error(f"Chart songs error for {name!r} on {chart_date}: {e}")
        raise ServerError("Server error while fetching songs. Please try again later.")
