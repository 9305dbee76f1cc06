from typing import runtime_checkable, Protocol


@runtime_checkable
class CatalogSource(Protocol):
    async def fetch(self, path: str) -> str: ...
