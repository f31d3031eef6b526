"""REST API client for lingua server."""

import requests


class LinguaAPIClient:
    """Client for communicating with the lingua REST API."""

    def __init__(self, base_url: str = "http://localhost:8000", user_id: str = "default"):
        self.base_url = base_url.rstrip('/')
        self.user_id = user_id
        self.session = requests.Session()

    def _get(self, endpoint: str, params: dict = None) -> dict:
        """Make a GET request."""
        if params is None:
            params = {}
        params['user_id'] = self.user_id
        response = self.session.get(f"{self.base_url}{endpoint}", params=params)
        response.raise_for_status()
        return response.json()

    def _post(self, endpoint: str, data: dict = None) -> dict:
        """Make a POST request."""
        if data is None:
            data = {}
        data['user_id'] = self.user_id
        response = self.session.post(f"{self.base_url}{endpoint}", json=data)
        response.raise_for_status()
        return response.json()

    def health_check(self) -> dict:
        """Check if the server is running."""
        response = self.session.get(f"{self.base_url}/")
        response.raise_for_status()
        return response.json()

    def get_menu(self) -> list[dict]:
        """Get the list of activities."""
        response = self.session.get(f"{self.base_url}/api/menu")
        response.raise_for_status()
        return response.json()

    def get_status(self) -> dict:
        """Get score and active activity."""
        return self._get("/api/status")

    def get_activity(self) -> dict:
        """Get the current activity view."""
        return self._get("/api/activity")

    def select_activity(self, kind: str) -> dict:
        """Start an activity and load its first item."""
        return self._post("/api/activity", {'kind': kind})

    def submit_answer(self, answer: str) -> dict:
        """Submit an option or a free-text answer."""
        return self._post("/api/activity/answer", {'answer': answer})

    def next_item(self) -> dict:
        """Load the next item of the current activity."""
        return self._post("/api/activity/next")

    def back_to_menu(self) -> dict:
        """Leave the current activity."""
        return self._post("/api/menu")
