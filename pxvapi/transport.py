import asyncio

import aiohttp

from .constants import CAMOUFLAGE_HEADERS, SEM_LIMIT
from .errors import AuthError
from .log import pxlog


#---------------------------------------------------------------------------#
#   Transport                                                               #
#       Sends built `PixivRequest`s, returns body texts.                    #
#       Parsing the body is left to the caller.                             #
#---------------------------------------------------------------------------#

UNAUTHORIZED = 401


def _make_headers(request, access_token):
    headers = dict(request.headers)
    if access_token:
        headers["Authorization"] = f"Bearer {access_token}"
    return headers

async def execute(request, session, *, access_token=None):
    """
    Send one request through an open session.

    Args:
        request         `PixivRequest`
        session         `aiohttp.ClientSession`
        access_token    string
            Sent as bearer token when given.

    Returns:
        string, the response body.

    Raises:
        AuthError
            The service rejected the credential.
        aiohttp.ClientResponseError
            Any other error status.
    """
    headers = _make_headers(request, access_token)
    pxlog.debug(f"{request.method.value} {request.url}")
    async with session.request(
            request.method.value, request.url, headers=headers
        ) as resp:
        if resp.status == UNAUTHORIZED:
            pxlog.warning(f"Unauthorized: {request.url}")
            raise AuthError(resp.reason)
        resp.raise_for_status()
        text = await resp.text()
    return text

async def execute_all(requests, *, access_token=None, headers=None):
    """
    Send requests concurrently over one session.

    At most `SEM_LIMIT` requests are in flight. Once one fails, the rest are
    cancelled and the error propagates.

    Returns:
        list of body strings, in the order of `requests`.
    """
    sem = asyncio.Semaphore(SEM_LIMIT)
    session_headers = dict(CAMOUFLAGE_HEADERS)
    session_headers.update(headers or {})

    async def _guarded(client, request):
        async with sem:
            return await execute(request, client, access_token=access_token)

    async with aiohttp.ClientSession(headers=session_headers) as client:
        tasks = [
            asyncio.ensure_future(_guarded(client, r))
            for r in requests
        ]
        try:
            texts = await asyncio.gather(*tasks)
        except Exception:
            #   The gather is already done here, cancel the tasks themselves
            #   and wait for them while the session is still open.
            for t in tasks:
                t.cancel()
            await asyncio.gather(*tasks, return_exceptions=True)
            raise
    pxlog.info(f"Fetched {len(texts)} requests")
    return texts

def fetch(request, *, access_token=None):
    """Blocking wrapper of `execute_all` for a single request."""
    texts = asyncio.run(
        execute_all([request], access_token=access_token)
    )
    return texts[0]
