# ============================================================================
# FILE: tracknest/client/api.py
# ============================================================================
from typing import Dict, List, Optional
from datetime import date
from urllib.parse import quote
import httpx
from tracknest.client.session import SessionContext
from tracknest.config import settings
from tracknest.schemas.music import SongKey
import logging

logger = logging.getLogger(__name__)

class ApiError(Exception):
    """Non-2xx answer from the API, or a protected call without a live session"""

    def __init__(self, status_code: int, message: str):
        super().__init__(message)
        self.status_code = status_code
        self.message = message

def song_payload(key: SongKey) -> Dict[str, str]:
    return {"songTitle": key.song_title, "artistName": key.artist_name, "albumTitle": key.album_title}

def song_key(song: Dict) -> SongKey:
    """Key of a song dict as returned by the API"""
    return SongKey(song["songTitle"], song["artistName"], song["albumTitle"])

def path_segment(value) -> str:
    """Percent-encode one URL path segment; names may contain '#' or '?'"""
    return quote(str(value), safe="")

class TrackNestClient:
    """
    Thin HTTP client over the TrackNest REST API.
    Every call that needs identity takes the SessionContext explicitly.
    """

    def __init__(self, base_url: str = None, http: Optional[httpx.Client] = None, api_prefix: str = "/api"):
        self.http = http or httpx.Client(base_url=base_url or settings.API_BASE_URL)
        self.api_prefix = api_prefix

    def close(self):
        self.http.close()

    def _request(self, method: str, path: str, session: Optional[SessionContext] = None,
                 auth_required: bool = False, **kwargs):
        headers = {}
        if session is not None:
            headers.update(session.auth_headers())
        if auth_required and not headers:
            # Checked locally so an expired session never reaches the server
            raise ApiError(401, "Your session has expired. Please log in again.")

        try:
            response = self.http.request(method, f"{self.api_prefix}{path}", headers=headers, **kwargs)
        except httpx.HTTPError as e:
            logger.error(f"{method} {path} failed: {e}")
            raise ApiError(0, "Could not reach the server. Please try again later.") from e

        if response.is_error:
            try:
                message = response.json().get("message", response.reason_phrase)
            except ValueError:
                message = response.reason_phrase
            raise ApiError(response.status_code, message)
        return response.json()

    # Accounts
    def register(self, username: str, email: str, password: str, bio: Optional[str] = None) -> Dict:
        return self._request("POST", "/register", json={
            "username": username, "email": email, "password": password, "bio": bio,
        })

    def login(self, email: str, password: str) -> SessionContext:
        payload = self._request("POST", "/login", json={"email": email, "password": password})
        return SessionContext.from_login(payload)

    def get_profile(self, session: SessionContext) -> Dict:
        return self._request("GET", "/profile", session, auth_required=True)

    def update_bio(self, session: SessionContext, bio: Optional[str]) -> Dict:
        return self._request("PUT", "/profile/bio", session, auth_required=True, json={"bio": bio})

    def change_password(self, session: SessionContext, current_password: str,
                        new_password: str, confirm_new_password: str) -> Dict:
        result = self._request("PUT", "/profile/password", session, auth_required=True, json={
            "currentPassword": current_password,
            "newPassword": new_password,
            "confirmNewPassword": confirm_new_password,
        })
        session.clear()
        return result

    def delete_account(self, session: SessionContext) -> Dict:
        result = self._request("DELETE", "/profile", session, auth_required=True)
        session.clear()
        return result

    def get_public_profile(self, username: str) -> Dict:
        return self._request("GET", f"/users/{path_segment(username)}/profile")

    # Catalog
    def search(self, session: Optional[SessionContext] = None, song_title: str = "", artist_name: str = "",
               album_title: str = "", genre_name: str = "", sort_order: str = "DESC",
               liked: bool = False) -> List[Dict]:
        params = {
            "songTitle": song_title,
            "artistName": artist_name,
            "albumTitle": album_title,
            "genreName": genre_name,
            "sortOrder": sort_order,
        }
        # Empty filters are left out of the query string
        params = {k: v for k, v in params.items() if v}
        if liked:
            params["liked"] = "true"
        return self._request("GET", "/search", session, auth_required=liked, params=params)

    # Playlists
    def list_playlists(self, session: SessionContext) -> List[Dict]:
        return self._request("GET", "/playlists", session, auth_required=True)

    def list_all_playlists(self) -> List[Dict]:
        return self._request("GET", "/playlists/all")

    def create_playlist(self, session: SessionContext, name: str) -> Dict:
        return self._request("POST", "/playlists", session, auth_required=True, json={"name": name})

    def delete_playlist(self, session: SessionContext, name: str) -> Dict:
        return self._request("DELETE", f"/playlists/{path_segment(name)}", session, auth_required=True)

    def add_song_to_playlist(self, session: SessionContext, name: str, key: SongKey) -> Dict:
        return self._request("POST", f"/playlists/{path_segment(name)}/songs", session, auth_required=True,
                             json=song_payload(key))

    def remove_song_from_playlist(self, session: SessionContext, name: str, key: SongKey) -> Dict:
        return self._request("DELETE", f"/playlists/{path_segment(name)}/songs", session, auth_required=True,
                             json=song_payload(key))

    def get_playlist_songs(self, session: SessionContext, name: str) -> List[Dict]:
        return self._request("GET", f"/playlists/{path_segment(name)}/songs", session, auth_required=True)

    def get_public_playlist_songs(self, username: str, name: str) -> List[Dict]:
        return self._request("GET", f"/playlists/{path_segment(username)}/{path_segment(name)}/songs")

    # Likes
    def get_liked_songs(self, session: SessionContext) -> List[Dict]:
        return self._request("GET", "/likes", session, auth_required=True)

    def like_song(self, session: SessionContext, key: SongKey) -> Dict:
        return self._request("POST", "/likes", session, auth_required=True, json=song_payload(key))

    def unlike_song(self, session: SessionContext, key: SongKey) -> Dict:
        return self._request("DELETE", "/likes", session, auth_required=True, json=song_payload(key))

    # Charts
    def get_chart_names(self) -> List[Dict]:
        return self._request("GET", "/top-charts")

    def get_chart_dates(self, chart_name: str) -> List[Dict]:
        return self._request("GET", f"/top-charts/{path_segment(chart_name)}/dates")

    def get_chart_songs(self, chart_name: str, chart_date) -> List[Dict]:
        if isinstance(chart_date, date):
            chart_date = chart_date.isoformat()
        return self._request("GET", f"/top-charts/{path_segment(chart_name)}/{path_segment(chart_date)}/songs")

    # Recommendations
    def get_recommendations(self, session: SessionContext) -> List[Dict]:
        return self._request("GET", "/recommendations", session, auth_required=True)
