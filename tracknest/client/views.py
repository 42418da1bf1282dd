# ============================================================================
# FILE: tracknest/client/views.py
# Per-page view state driven by API calls
# ============================================================================
"""
Page view models.

Each view holds the data one page renders plus a status
(idle -> loading -> success | error) and a message banner. Views never
retry; a failed call leaves the view in the error state with the server's
message until the user acts again.
"""
from enum import Enum
from typing import Callable, Dict, List, Optional, Set
from tracknest.client.api import ApiError, TrackNestClient, song_key
from tracknest.client.session import SessionContext
from tracknest.schemas.music import SongKey
import logging

logger = logging.getLogger(__name__)

class ViewStatus(str, Enum):
    IDLE = "idle"
    LOADING = "loading"
    SUCCESS = "success"
    ERROR = "error"

class PageView:
    """Common status and banner handling"""

    def __init__(self, client: TrackNestClient, session: Optional[SessionContext] = None):
        self.client = client
        self.session = session or SessionContext()
        self.status = ViewStatus.IDLE
        self.message = ""
        self.message_type = ""

    def notify(self, message: str, message_type: str = "success"):
        self.message = message
        self.message_type = message_type

    def _run(self, call: Callable, error_message: Optional[str] = None):
        """Run one API call under loading/success/error bookkeeping; returns its result or None"""
        self.status = ViewStatus.LOADING
        self.notify("", "")
        try:
            result = call()
        except ApiError as e:
            logger.error(f"{type(self).__name__}: {e.message}")
            self.status = ViewStatus.ERROR
            self.notify(error_message or e.message, "error")
            return None
        self.status = ViewStatus.SUCCESS
        return result

    @property
    def is_loading(self) -> bool:
        return self.status is ViewStatus.LOADING

class LikeTogglingView(PageView):
    """Views that show a heart next to each song"""

    def __init__(self, client: TrackNestClient, session: Optional[SessionContext] = None):
        super().__init__(client, session)
        self.liked: Set[SongKey] = set()

    def load_likes(self):
        if not self.session.is_authenticated:
            self.liked = set()
            return
        try:
            self.liked = {song_key(s) for s in self.client.get_liked_songs(self.session)}
        except ApiError as e:
            # Hearts just render unfilled
            logger.warning(f"Could not load liked songs: {e.message}")

    def is_liked(self, song: Dict) -> bool:
        return song_key(song) in self.liked

    def toggle_like(self, song: Dict) -> bool:
        """Like or unlike `song`; returns True on success"""
        if not self.session.is_authenticated:
            self.notify("You must be logged in to like songs.", "error")
            return False

        key = song_key(song)
        try:
            if key in self.liked:
                self.client.unlike_song(self.session, key)
                self.liked.discard(key)
                self.notify(f'Unliked "{key.song_title}" successfully.')
            else:
                self.client.like_song(self.session, key)
                self.liked.add(key)
                self.notify(f'Liked "{key.song_title}" successfully.')
        except ApiError as e:
            self.notify(e.message, "error")
            return False
        return True

class SearchView(LikeTogglingView):

    def __init__(self, client: TrackNestClient, session: Optional[SessionContext] = None):
        super().__init__(client, session)
        self.filters = {
            "song_title": "",
            "artist_name": "",
            "album_title": "",
            "genre_name": "",
            "sort_order": "DESC",
            "liked": False,
        }
        self.results: List[Dict] = []

    def submit(self, **filters) -> List[Dict]:
        self.filters.update(filters)
        self.results = []
        results = self._run(lambda: self.client.search(self.session, **self.filters))
        if results is None:
            return []
        self.results = results
        if not results:
            self.notify("No songs found matching the criteria.", "error")
        self.load_likes()
        return self.results

class RecommendationsView(LikeTogglingView):

    def __init__(self, client: TrackNestClient, session: Optional[SessionContext] = None):
        super().__init__(client, session)
        self.recommendations: List[Dict] = []

    def load(self) -> List[Dict]:
        results = self._run(
            lambda: self.client.get_recommendations(self.session),
            "Failed to fetch recommendations. Please try again later.",
        )
        self.recommendations = results or []
        self.load_likes()
        return self.recommendations

class PlaylistsView(PageView):
    """The caller's own playlists with one playlist expanded at a time"""

    def __init__(self, client: TrackNestClient, session: Optional[SessionContext] = None):
        super().__init__(client, session)
        self.playlists: List[Dict] = []
        self.selected: Optional[str] = None
        self.songs: List[Dict] = []

    def load(self) -> List[Dict]:
        self.playlists = self._run(lambda: self.client.list_playlists(self.session)) or []
        return self.playlists

    def create(self, name: str) -> bool:
        if not name or not name.strip():
            self.notify("Please provide a playlist name.", "error")
            return False
        if self._run(lambda: self.client.create_playlist(self.session, name.strip())) is None:
            return False
        self.load()
        self.notify(f'Playlist "{name.strip()}" created successfully.')
        return True

    def delete(self, name: str) -> bool:
        if self._run(lambda: self.client.delete_playlist(self.session, name)) is None:
            return False
        if self.selected == name:
            self.selected = None
            self.songs = []
        self.load()
        self.notify(f'Playlist "{name}" deleted successfully.')
        return True

    def select(self, name: str) -> List[Dict]:
        songs = self._run(lambda: self.client.get_playlist_songs(self.session, name))
        if songs is None:
            return []
        self.selected = name
        self.songs = songs
        return songs

    def add_song(self, name: str, song: Dict) -> bool:
        if self._run(lambda: self.client.add_song_to_playlist(self.session, name, song_key(song))) is None:
            return False
        if self.selected == name:
            self.select(name)
        self.notify(f'Added "{song["songTitle"]}" to "{name}".')
        return True

    def remove_song(self, song: Dict) -> bool:
        if self.selected is None:
            return False
        key = song_key(song)
        if self._run(lambda: self.client.remove_song_from_playlist(self.session, self.selected, key)) is None:
            return False
        self.songs = [s for s in self.songs if song_key(s) != key]
        self.notify(f'Removed "{key.song_title}" from "{self.selected}".')
        return True

class PublicPlaylistsView(PageView):
    """Directory of everyone's playlists"""

    def __init__(self, client: TrackNestClient, session: Optional[SessionContext] = None):
        super().__init__(client, session)
        self.playlists: List[Dict] = []
        self.songs: List[Dict] = []

    def load(self) -> List[Dict]:
        self.playlists = self._run(self.client.list_all_playlists) or []
        return self.playlists

    def open(self, username: str, name: str) -> List[Dict]:
        self.songs = self._run(lambda: self.client.get_public_playlist_songs(username, name)) or []
        return self.songs

class TopChartsView(PageView):
    """Chart name -> date -> songs drill-down; each step resets the ones below it"""

    def __init__(self, client: TrackNestClient, session: Optional[SessionContext] = None):
        super().__init__(client, session)
        self.charts: List[str] = []
        self.dates: List[str] = []
        self.songs: List[Dict] = []
        self.selected_chart: Optional[str] = None
        self.selected_date: Optional[str] = None

    def load(self) -> List[str]:
        rows = self._run(self.client.get_chart_names, "Failed to fetch top charts.")
        self.charts = [row["chartName"] for row in rows or []]
        return self.charts

    def select_chart(self, chart_name: str) -> List[str]:
        self.selected_chart = chart_name
        self.selected_date = None
        self.dates = []
        self.songs = []
        rows = self._run(lambda: self.client.get_chart_dates(chart_name))
        self.dates = [row["chartDate"] for row in rows or []]
        return self.dates

    def select_date(self, chart_date: str) -> List[Dict]:
        self.selected_date = chart_date
        self.songs = self._run(lambda: self.client.get_chart_songs(self.selected_chart, chart_date)) or []
        return self.songs

class ProfileView(PageView):

    def __init__(self, client: TrackNestClient, session: Optional[SessionContext] = None):
        super().__init__(client, session)
        self.profile: Dict = {}

    def load(self) -> Dict:
        self.profile = self._run(lambda: self.client.get_profile(self.session)) or {}
        return self.profile

    def update_bio(self, bio: str) -> bool:
        result = self._run(lambda: self.client.update_bio(self.session, bio))
        if result is None:
            return False
        self.profile["bio"] = bio
        self.notify(result["message"])
        return True

    def change_password(self, current_password: str, new_password: str, confirm_new_password: str) -> bool:
        """On success the session is cleared and the user must log in again"""
        if new_password != confirm_new_password:
            self.notify("New passwords do not match.", "error")
            return False
        result = self._run(lambda: self.client.change_password(
            self.session, current_password, new_password, confirm_new_password
        ))
        if result is None:
            return False
        self.profile = {}
        self.notify(result["message"])
        return True

    def delete_account(self) -> bool:
        result = self._run(lambda: self.client.delete_account(self.session))
        if result is None:
            return False
        self.profile = {}
        self.notify(result["message"])
        return True
