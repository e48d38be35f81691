"""Account linking login page.

The account linking call-to-action points users here. A real deployment
would authenticate the user before offering the success redirect.
"""

import html
import logging
from string import Template

from fastapi import APIRouter, Depends, Query
from fastapi.responses import HTMLResponse

from src.config import Settings, get_settings

logger = logging.getLogger(__name__)
router = APIRouter()

AUTHORIZE_PAGE = Template(
    """<!DOCTYPE html>
<html>
  <head>
    <meta charset="utf-8">
    <title>Account Linking</title>
  </head>
  <body>
    <h1>Account Linking</h1>
    <p>Account linking token: <code>$account_linking_token</code></p>
    <p>Redirect URI: <code>$redirect_uri</code></p>
    <p><a id="complete" href="$redirect_uri_success">Complete Account Link</a></p>
    <p><a id="cancel" href="$redirect_uri">Cancel</a></p>
  </body>
</html>
"""
)


def success_redirect_uri(redirect_uri: str, authorization_code: str) -> str:
    """Redirect target that completes linking with the given code."""
    return f"{redirect_uri}&authorization_code={authorization_code}"


@router.get("", response_class=HTMLResponse)
async def authorize(
    redirect_uri: str = Query(...),
    account_linking_token: str = Query(default=""),
    settings: Settings = Depends(get_settings),
):
    """Render the login page offering the success redirect."""
    # Authorization codes should be generated per user; this one is fixed
    redirect_uri_success = success_redirect_uri(
        redirect_uri, settings.authorization_code
    )
    logger.info("Rendering account linking page")

    return HTMLResponse(
        AUTHORIZE_PAGE.substitute(
            account_linking_token=html.escape(account_linking_token),
            redirect_uri=html.escape(redirect_uri),
            redirect_uri_success=html.escape(redirect_uri_success),
        )
    )
