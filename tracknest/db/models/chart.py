
# ============================================================================
# FILE: tracknest/db/models/chart.py
# ============================================================================
from sqlalchemy import Column, String, Date, ForeignKeyConstraint
from tracknest.db.base import Base

class TopChart(Base):
    __tablename__ = "top_charts"

    chart_name = Column(String(255), primary_key=True)
    chart_date = Column(Date, primary_key=True)

class ChartEntry(Base):
    """Song placed on a chart for a given date"""
    __tablename__ = "chart_entries"
    __table_args__ = (
        ForeignKeyConstraint(
            ["chart_name", "chart_date"],
            ["top_charts.chart_name", "top_charts.chart_date"],
            ondelete="CASCADE",
        ),
        ForeignKeyConstraint(
            ["song_title", "artist_name", "album_title"],
            ["songs.song_title", "songs.artist_name", "songs.album_title"],
        ),
    )

    chart_name = Column(String(255), primary_key=True)
    chart_date = Column(Date, primary_key=True)
    song_title = Column(String(255), primary_key=True)
    artist_name = Column(String(255), primary_key=True)
    album_title = Column(String(255), primary_key=True)
