from figma_genui.core.context import DesignContext
from figma_genui.figma.http import HttpDesignApi
from figma_genui.settings import Settings


def get_client(settings: Settings) -> HttpDesignApi:
    return HttpDesignApi(settings.api_key, base_url=settings.api_base, timeout=settings.api_timeout)


def create_context(settings: Settings) -> DesignContext:
    return DesignContext(api=get_client(settings), default_file_key=settings.default_file_key)
