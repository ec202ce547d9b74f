"""
Static files served under ``/app``.

Starlette's `StaticFiles` has no directory listings, so directories without an
``index.html`` fall back to a plain ``<pre>`` list of links.
"""
from __future__ import annotations

import html
import os
import stat
from urllib.parse import quote

from starlette.concurrency import run_in_threadpool
from starlette.datastructures import URL
from starlette.exceptions import HTTPException
from starlette.responses import HTMLResponse, RedirectResponse, Response
from starlette.staticfiles import StaticFiles
from starlette.types import Scope


def render_listing(directory: str) -> str:
    lines = ["<pre>"]
    with os.scandir(directory) as entries:
        for entry in sorted(entries, key=lambda e: e.name):
            name = entry.name + "/" if entry.is_dir() else entry.name
            lines.append(f'<a href="{quote(name)}">{html.escape(name)}</a>')
    lines.append("</pre>")
    return "\n".join(lines) + "\n"


class ListingStaticFiles(StaticFiles):
    async def get_response(self, path: str, scope: Scope) -> Response:
        try:
            return await super().get_response(path, scope)
        except HTTPException as exc:
            if exc.status_code != 404:
                raise
            full_path, stat_result = await run_in_threadpool(self.lookup_path, path)
            if stat_result is None or not stat.S_ISDIR(stat_result.st_mode):
                raise
            url = URL(scope=scope)
            if not url.path.endswith("/"):
                return RedirectResponse(url=url.replace(path=url.path + "/"))
            listing = await run_in_threadpool(render_listing, full_path)
            return HTMLResponse(listing)
