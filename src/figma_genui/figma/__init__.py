from figma_genui.figma.client import create_context, get_client
from figma_genui.figma.http import HttpDesignApi
from figma_genui.figma.memory import InMemoryDesignApi, InMemoryFile

__all__ = [
    "HttpDesignApi",
    "InMemoryDesignApi",
    "InMemoryFile",
    "create_context",
    "get_client",
]
