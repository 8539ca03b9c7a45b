"""GitHub API adapter."""

from datetime import datetime
from typing import Any, Dict, List

import requests

from scribe.adapters.base import TrackerAdapter, TrackerError
from scribe.models import Comment, Issue


def _parse_iso(s: str) -> datetime:
    return datetime.fromisoformat(s.replace("Z", "+00:00"))


def _issue_from_api(data: Dict[str, Any]) -> Issue:
    return Issue(
        number=data["number"],
        title=data.get("title") or "",
        body=data.get("body") or "",
        state=data.get("state", "open"),
        created_at=_parse_iso(data["created_at"]),
        html_url=data.get("html_url"),
    )


def _comment_from_api(data: Dict[str, Any]) -> Comment:
    user = data.get("user") or {}
    return Comment(
        id=data["id"],
        body=data.get("body") or "",
        author=user.get("login", ""),
        created_at=_parse_iso(data["created_at"]),
    )


class GitHubAdapter(TrackerAdapter):
    """GitHub REST API implementation."""

    def __init__(self, token: str, api_url: str = "https://api.github.com") -> None:
        self._api_url = api_url.rstrip("/")
        self._session = requests.Session()
        self._session.headers["Authorization"] = f"token {token}"
        self._session.headers["Accept"] = "application/vnd.github.v3+json"

    def _request(
        self,
        method: str,
        path: str,
        params: Dict[str, Any] | None = None,
        json: Dict[str, Any] | None = None,
    ) -> requests.Response:
        url = f"{self._api_url}{path}" if path.startswith("/") else f"{self._api_url}/{path}"
        try:
            resp = self._session.request(method, url, params=params, json=json, timeout=30)
        except requests.RequestException as e:
            raise TrackerError(f"{method} {path}: {e}") from e
        if resp.status_code >= 400:
            msg = resp.text or resp.reason or str(resp.status_code)
            try:
                msg = resp.json().get("message", msg)
            except ValueError:
                pass
            raise TrackerError(f"{resp.status_code}: {msg}")
        return resp

    def list_comments(
        self,
        repo: str,
        issue_number: int,
        page: int = 1,
        per_page: int = 100,
    ) -> List[Comment]:
        path = f"/repos/{repo}/issues/{issue_number}/comments"
        resp = self._request("GET", path, params={"page": page, "per_page": per_page})
        data = resp.json() or []
        return [_comment_from_api(d) for d in data]

    def list_open_issues(self, repo: str, limit: int = 100) -> List[Issue]:
        """List up to limit open issues, newest first.

        GitHub /repos/{owner}/{repo}/issues returns both issues and PRs;
        items that have pull_request set are dropped and further pages are
        requested until limit issues are collected or a short page arrives.
        """
        per_page = 100
        issues: List[Issue] = []
        page = 1
        while len(issues) < limit:
            params = {
                "state": "open",
                "sort": "created",
                "direction": "desc",
                "page": page,
                "per_page": per_page,
            }
            resp = self._request("GET", f"/repos/{repo}/issues", params=params)
            data = resp.json() or []
            issues.extend(_issue_from_api(d) for d in data if "pull_request" not in d)
            if len(data) < per_page:
                break
            page += 1
        return issues[:limit]

    def create_comment(self, repo: str, issue_number: int, body: str) -> Comment:
        path = f"/repos/{repo}/issues/{issue_number}/comments"
        resp = self._request("POST", path, json={"body": body})
        return _comment_from_api(resp.json())
