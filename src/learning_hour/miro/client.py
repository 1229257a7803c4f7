"""Miro REST v2 client."""

import html
import json
import logging
from typing import Any, Optional
from urllib.parse import urlencode

import httpx

from ..config import DEFAULT_MIRO_API_URL
from ..exceptions import ConfigurationError, UpstreamError
from ..models import CodeImage

logger = logging.getLogger(__name__)

AUTHORIZE_URL = "https://miro.com/oauth/authorize"

CODE_BLOCK_STYLE = {
    "fillColor": "#1e1e1e",
    "fillOpacity": "1.0",
    "borderColor": "#3c3c3c",
    "borderWidth": "1.0",
    "borderOpacity": "1.0",
    "color": "#d4d4d4",
    "fontFamily": "roboto_mono",
    "fontSize": "12",
    "textAlign": "left",
    "textAlignVertical": "top",
}

DEFAULT_STICKY_COLOR = "light_yellow"


def escape_html(text: str) -> str:
    """Escape text for Miro's HTML-flavoured content fields."""
    return html.escape(text, quote=True).replace("&#x27;", "&#39;")


class MiroClient:
    """Creates and reads board items through the Miro REST API.

    The HTTP session is opened lazily on the first request; a missing access
    token surfaces then as ConfigurationError.
    """

    def __init__(
        self,
        access_token: Optional[str],
        base_url: str = DEFAULT_MIRO_API_URL,
        timeout: int = 30,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        self.access_token = access_token
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._transport = transport
        self._http: Optional[httpx.Client] = None

    def close(self) -> None:
        if self._http is not None:
            self._http.close()
            self._http = None

    def __enter__(self) -> "MiroClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    # Boards

    def create_board(self, name: str, description: Optional[str] = None) -> dict[str, Any]:
        body: dict[str, Any] = {
            "name": name,
            "policy": {
                "permissionsPolicy": {
                    "collaborationToolsStartAccess": "all_editors",
                    "copyAccess": "anyone",
                    "sharingAccess": "team_members_with_editing_rights",
                }
            },
        }
        if description:
            # Miro caps board descriptions at 300 characters
            body["description"] = description[:300]
        board = self._request("POST", "/boards", "create board", json=body)
        logger.info("Created Miro board %s (%s)", board.get("id"), name)
        return board

    def list_boards(self, limit: int = 10) -> list[dict[str, Any]]:
        data = self._request("GET", "/boards", "list boards", params={"limit": limit})
        return list(data.get("data", []))

    def get_board(self, board_id: str) -> dict[str, Any]:
        return self._request("GET", f"/boards/{board_id}", "get board")

    def get_board_view_link(self, board_id: str) -> Optional[str]:
        return self.get_board(board_id).get("viewLink")

    def validate_token(self) -> bool:
        """Return True when the access token can list boards."""
        try:
            self._request("GET", "/boards", "validate token", params={"limit": 1})
        except UpstreamError as e:
            logger.warning("Miro token validation failed: %s", e)
            return False
        return True

    # Items

    def create_frame(
        self, board_id: str, title: str, x: float, y: float, width: int, height: int
    ) -> dict[str, Any]:
        body = {
            "data": {"title": title, "format": "custom", "type": "freeform"},
            "style": {"fillColor": "#ffffff"},
            "position": {"x": x, "y": y},
            "geometry": {"width": width, "height": height},
        }
        return self._request("POST", f"/boards/{board_id}/frames", "create frame", json=body)

    def create_sticky_note(
        self,
        board_id: str,
        content: str,
        x: float,
        y: float,
        color: str = DEFAULT_STICKY_COLOR,
    ) -> dict[str, Any]:
        body = {
            "data": {"content": escape_html(content), "shape": "square"},
            "style": {"fillColor": color},
            "position": {"x": x, "y": y},
        }
        return self._request("POST", f"/boards/{board_id}/sticky_notes", "create sticky note", json=body)

    def create_text(
        self, board_id: str, content: str, x: float, y: float, width: int = 400
    ) -> dict[str, Any]:
        """Create a text item. ``content`` may carry simple HTML markup."""
        body = {
            "data": {"content": content},
            "style": {"fontSize": "18", "textAlign": "left"},
            "position": {"x": x, "y": y},
            "geometry": {"width": width},
        }
        return self._request("POST", f"/boards/{board_id}/texts", "create text", json=body)

    def create_code_block(
        self,
        board_id: str,
        code: str,
        x: float,
        y: float,
        width: int = 500,
        height: int = 300,
    ) -> dict[str, Any]:
        """Create a dark rectangle holding monospace code."""
        body = {
            "data": {"content": f"<pre>{escape_html(code)}</pre>", "shape": "rectangle"},
            "style": CODE_BLOCK_STYLE,
            "position": {"x": x, "y": y},
            "geometry": {"width": width, "height": height},
        }
        return self._request("POST", f"/boards/{board_id}/shapes", "create code block", json=body)

    def create_image(
        self,
        board_id: str,
        image: CodeImage,
        x: float,
        y: float,
        title: Optional[str] = None,
    ) -> dict[str, Any]:
        """Upload a PNG and place it on the board."""
        data: dict[str, Any] = {
            "position": {"x": x, "y": y},
            "geometry": {"width": image.width},
        }
        if title:
            data["title"] = title
        files = {
            "resource": ("code.png", image.data, image.mime_type),
            "data": (None, json.dumps(data), "application/json"),
        }
        return self._request("POST", f"/boards/{board_id}/images", "upload image", files=files)

    # OAuth

    @staticmethod
    def get_authorization_url(client_id: str, redirect_uri: str, state: Optional[str] = None) -> str:
        """Build the URL a user visits to grant board access."""
        params = {
            "response_type": "code",
            "client_id": client_id,
            "redirect_uri": redirect_uri,
        }
        if state:
            params["state"] = state
        return f"{AUTHORIZE_URL}?{urlencode(params)}"

    def _client(self) -> httpx.Client:
        if self._http is None:
            if not self.access_token:
                raise ConfigurationError(
                    "Miro access token is required. Set MIRO_ACCESS_TOKEN or pass accessToken"
                )
            self._http = httpx.Client(
                base_url=self.base_url,
                headers={
                    "Authorization": f"Bearer {self.access_token}",
                    "Accept": "application/json",
                },
                timeout=self.timeout,
                transport=self._transport,
            )
        return self._http

    def _request(self, method: str, url: str, operation: str, **kwargs) -> Any:
        http = self._client()
        logger.debug("Miro %s: %s %s", operation, method, url)
        try:
            response = http.request(method, url, **kwargs)
            response.raise_for_status()
            return response.json()
        except httpx.HTTPStatusError as e:
            status = e.response.status_code
            raise UpstreamError(
                f"Failed to {operation}: {status} - {e.response.text[:200]}",
                operation=operation,
            ) from e
        except httpx.HTTPError as e:
            raise UpstreamError(f"Failed to {operation}: {e}", operation=operation) from e
        except ValueError as e:
            raise UpstreamError(
                f"Miro {operation} returned invalid JSON: {e}", operation=operation
            ) from e
