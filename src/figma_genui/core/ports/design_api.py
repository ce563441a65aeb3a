from typing import Any, Protocol


class DesignApi(Protocol):
    async def list_files(self) -> list[dict[str, Any]]: ...

    async def get_file(self, file_key: str) -> dict[str, Any]: ...

    async def get_nodes(self, file_key: str, node_ids: list[str]) -> dict[str, Any]: ...

    async def get_images(self, file_key: str, node_ids: list[str], image_format: str, scale: int) -> dict[str, Any]: ...

    async def dispose(self) -> None: ...
