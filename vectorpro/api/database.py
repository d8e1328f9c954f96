"""
vectorpro.api.database
───────────────────────
Database import and export for a site's development database.

Two import paths exist:
  direct   — POST the dump inline; only suitable for small files
  session  — create a session, PUT the file to its presigned upload_url,
             then run it and poll get_database_import until it settles

Exports are asynchronous too: poll get_database_export until the
download_url is populated.
"""
from __future__ import annotations

from vectorpro.api.base import BaseClient
from vectorpro.core.http import api_path
from vectorpro.types import (
    CreateDbExportRequest,
    CreateDbImportRequest,
    DbExport,
    DbImportSession,
    DirectImportResult,
)


class DatabaseApi(BaseClient):

    async def import_database_direct(
        self,
        site_id: str,
        *,
        drop_tables: bool | None = None,
        disable_foreign_keys: bool | None = None,
    ) -> DirectImportResult:
        return await self._request(
            "POST",
            api_path("sites", site_id, "db", "import"),
            query={"drop_tables": drop_tables, "disable_foreign_keys": disable_foreign_keys},
        )

    async def create_database_import(
        self, site_id: str, data: CreateDbImportRequest | None = None
    ) -> DbImportSession:
        return await self._request("POST", api_path("sites", site_id, "db", "imports"), body=data)

    async def run_database_import(self, site_id: str, import_id: str) -> DbImportSession:
        return await self._request(
            "POST", api_path("sites", site_id, "db", "imports", import_id, "run")
        )

    async def get_database_import(self, site_id: str, import_id: str) -> DbImportSession:
        return await self._request("GET", api_path("sites", site_id, "db", "imports", import_id))

    async def create_database_export(
        self, site_id: str, data: CreateDbExportRequest | None = None
    ) -> DbExport:
        return await self._request("POST", api_path("sites", site_id, "db", "export"), body=data)

    async def get_database_export(self, site_id: str, export_id: str) -> DbExport:
        return await self._request("GET", api_path("sites", site_id, "db", "exports", export_id))
