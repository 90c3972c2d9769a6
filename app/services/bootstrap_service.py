# /ministry-dashboard-backend/app/services/bootstrap_service.py

"""
Decides where a freshly loaded browser goes: the members view when a session
marker is stored locally, the login view otherwise.

The marker is only checked for presence. Its shape is not validated and the
session is not verified against the server.
"""

import json
from typing import Callable, Mapping, Optional

SESSION_STORAGE_KEY = "user"
MEMBERS_ROUTE = "/members"
LOGIN_ROUTE = "/login"


def resolve_bootstrap_route(storage: Optional[Mapping[str, Optional[str]]]) -> str:
    marker = storage.get(SESSION_STORAGE_KEY) if storage else None
    return MEMBERS_ROUTE if marker else LOGIN_ROUTE


def bootstrap_redirect(storage: Optional[Mapping[str, Optional[str]]], navigate: Callable[[str], None]) -> str:
    """Reads the session marker once and navigates exactly once."""
    route = resolve_bootstrap_route(storage)
    navigate(route)
    return route


def render_bootstrap_page() -> str:
    """
    The page served at `/`. Its script performs the same single read of
    localStorage and a single navigation, entirely in the browser.
    """
    return f"""<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="utf-8">
  <title>Ministry Dashboard</title>
</head>
<body>
  <div style="min-height:100vh;display:flex;align-items:center;justify-content:center">
    <div style="font-size:1.125rem">Redirecting...</div>
  </div>
  <script>
    (function () {{
      var userData = window.localStorage.getItem({json.dumps(SESSION_STORAGE_KEY)});
      window.location.replace(userData ? {json.dumps(MEMBERS_ROUTE)} : {json.dumps(LOGIN_ROUTE)});
    }})();
  </script>
</body>
</html>
"""
