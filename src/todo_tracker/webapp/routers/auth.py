"""
GitHub login, OAuth callback and logout endpoints.
"""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import RedirectResponse

from ..dependencies import (
    SESSION_USER_KEY,
    get_oauth_handler,
    get_user_repository,
)
from ..oauth_handler import GitHubOAuthHandler, OAuthError
from ..repository.interfaces import IUserRepository

log = logging.getLogger(__name__)

router = APIRouter()

LOGIN_FAILURE_REDIRECT = "/login.html?error=oauth"
LOGOUT_REDIRECT = "/login.html?loggedout=1"


@router.get("/auth/github")
async def github_login(oauth: GitHubOAuthHandler = Depends(get_oauth_handler)):
    """Start the GitHub OAuth handshake."""
    if not oauth.is_configured:
        log.error("GitHub OAuth requested but client id/secret are not configured")
        return RedirectResponse(url=LOGIN_FAILURE_REDIRECT, status_code=status.HTTP_302_FOUND)

    authorize_url = await oauth.build_authorize_url()
    log.debug("Redirecting to GitHub authorize URL")
    return RedirectResponse(url=authorize_url, status_code=status.HTTP_302_FOUND)


@router.get("/auth/github/callback")
async def github_callback(
    request: Request,
    code: Optional[str] = None,
    state: Optional[str] = None,
    oauth: GitHubOAuthHandler = Depends(get_oauth_handler),
    user_repository: IUserRepository = Depends(get_user_repository),
):
    """Finish the handshake: store the GitHub identity in the session."""
    try:
        profile = await oauth.complete_login(code, state)
    except OAuthError as e:
        log.warning("GitHub login failed: %s", e)
        return RedirectResponse(url=LOGIN_FAILURE_REDIRECT, status_code=status.HTTP_302_FOUND)

    try:
        user = user_repository.upsert_github_user(
            github_id=profile.github_id,
            username=profile.username,
            display_name=profile.display_name,
            avatar_url=profile.avatar_url,
        )
    except Exception as e:
        log.error("Failed to store GitHub user %s: %s", profile.github_id, e)
        return RedirectResponse(url=LOGIN_FAILURE_REDIRECT, status_code=status.HTTP_302_FOUND)

    if user.updated_at is None:
        log.info("First login for GitHub user %s, account created", user.username)

    request.session[SESSION_USER_KEY] = {"id": user.github_id, "username": user.username}
    log.info("GitHub user %s logged in", user.username or user.github_id)
    return RedirectResponse(url="/", status_code=status.HTTP_302_FOUND)


@router.post("/logout")
async def logout(request: Request):
    """Invalidate the session and send the browser back to the login page."""
    user = request.session.get(SESSION_USER_KEY)
    request.session.clear()
    if user:
        log.info("User %s logged out", user.get("username") or user.get("id"))
    return RedirectResponse(url=LOGOUT_REDIRECT, status_code=status.HTTP_303_SEE_OTHER)
