# ============================================================================
# FILE: tracknest/services/chart_service.py
# ============================================================================
from typing import List, Dict
from datetime import date
from sqlalchemy import and_
from sqlalchemy.orm import Session
from tracknest.db.models.chart import TopChart, ChartEntry
from tracknest.db.models.catalog import Song
from tracknest.core.cache import cache
from tracknest.core.exceptions import NotFound
from tracknest.config import settings
from tracknest.services.music_service import rows_to_dicts, song_columns, song_matches
import logging

logger = logging.getLogger(__name__)

class ChartService:
    """
    Service layer for the top chart drill-down: names, then dates, then songs.
    Chart data is read-only, so results are cached in Redis when available.
    """

    def get_chart_names(self, db: Session) -> List[Dict]:
        cache_key = "charts:names"
        cached = cache.get_cache(cache_key)
        if cached is not None:
            logger.info("Cache hit for chart names")
            return cached

        names = [
            {"chart_name": row.chart_name}
            for row in db.query(TopChart.chart_name).distinct().order_by(TopChart.chart_name).all()
        ]
        cache.set_cache(cache_key, names, settings.CACHE_EXPIRE_SECONDS)
        return names

    def get_chart_dates(self, db: Session, chart_name: str) -> List[Dict]:
        """Dates available for a chart, newest first"""
        cache_key = f"charts:{chart_name}:dates"
        cached = cache.get_cache(cache_key)
        if cached is not None:
            logger.info(f"Cache hit for chart dates: {chart_name}")
            return cached

        rows = (
            db.query(TopChart.chart_date)
            .filter(TopChart.chart_name == chart_name)
            .order_by(TopChart.chart_date.desc())
            .all()
        )
        if not rows:
            raise NotFound("Top chart not found or no dates available.")

        dates = [{"chart_date": row.chart_date.isoformat()} for row in rows]
        cache.set_cache(cache_key, dates, settings.CACHE_EXPIRE_SECONDS)
        return dates

    def get_chart_songs(self, db: Session, chart_name: str, chart_date: str) -> List[Dict]:
        """Songs on a chart for one date (YYYY-MM-DD), most played first"""
        try:
            chart_date = date.fromisoformat(chart_date)
        except ValueError:
            # No chart can exist on a date that does not parse
            raise NotFound("Top chart not found for the specified name and date.")

        cache_key = f"charts:{chart_name}:{chart_date.isoformat()}:songs"
        cached = cache.get_cache(cache_key)
        if cached is not None:
            logger.info(f"Cache hit for chart songs: {chart_name} {chart_date}")
            return cached

        chart = db.query(TopChart).filter(
            TopChart.chart_name == chart_name,
            TopChart.chart_date == chart_date,
        ).first()
        if not chart:
            raise NotFound("Top chart not found for the specified name and date.")

        query = (
            db.query(*song_columns())
            .select_from(ChartEntry)
            .join(Song, and_(*song_matches(ChartEntry)))
            .filter(ChartEntry.chart_name == chart_name, ChartEntry.chart_date == chart_date)
            .order_by(Song.plays.desc())
        )
        songs = rows_to_dicts(query)
        cache.set_cache(cache_key, songs, settings.CACHE_EXPIRE_SECONDS)
        return songs

# Create singleton instance
chart_service = ChartService()
