"""Client side of the two-phase upload used by the game.

A playthrough is registered first (``initialize_id``) and its recorded data
attached once the level ends (``upload_data``).
"""
from typing import Optional
from urllib.parse import quote
from uuid import UUID

import httpx


class CollectorError(RuntimeError):
    def __init__(self, status_code: int, text: str = ''):
        super().__init__(f"http request failed: {status_code}")
        self.status_code = status_code
        self.text = text


class CollectorClient:

    def __init__(self, base_url: str, submit_path: str = "/submit-playthrough",
                 transport: Optional[httpx.AsyncBaseTransport] = None, timeout: float = 30.0):
        self.base_url = base_url.rstrip('/')
        self.submit_path = submit_path
        self.transport = transport
        self.timeout = timeout

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(base_url=self.base_url, transport=self.transport, timeout=self.timeout)

    async def _submit(self, user: str, version: int, playthrough_id: UUID | str, data: Optional[bytes]) -> None:
        fields = {'user': user, 'version': str(version), 'id': str(playthrough_id)}
        files = {'playthrough': ('playthrough', data, 'application/octet-stream')} if data is not None else None

        async with self._client() as client:
            if files:
                resp = await client.post(self.submit_path, data=fields, files=files)
            else:
                resp = await client.post(self.submit_path, data=fields)
        if resp.status_code != 200:
            raise CollectorError(resp.status_code, resp.text)

    async def initialize_id(self, user: str, version: int, playthrough_id: UUID | str) -> None:
        await self._submit(user, version, playthrough_id, None)

    async def upload_data(self, user: str, version: int, playthrough_id: UUID | str, data: bytes) -> None:
        await self._submit(user, version, playthrough_id, data)

    async def download(self, playthrough_id: UUID | str) -> Optional[bytes]:
        """Return the stored payload, or None if the row exists without one."""
        async with self._client() as client:
            resp = await client.get(f"/playthroughs/{quote(str(playthrough_id), safe='')}")
        if resp.status_code == 204:
            return None
        if resp.status_code != 200:
            raise CollectorError(resp.status_code, resp.text)
        return resp.content
