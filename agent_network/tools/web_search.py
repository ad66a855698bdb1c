"""OpenAI built-in web search tool descriptor.

Built-in tools are executed by the provider, so the descriptor is just the
dict that the OpenAI Responses API expects.
"""

WEB_SEARCH_PREVIEW = "web_search_preview"


def web_search_preview(search_context_size: str | None = None) -> dict:
    """Return the descriptor for OpenAI's hosted web search tool.

    Args:
        search_context_size: optional "low", "medium" or "high"
    """
    descriptor: dict = {"type": WEB_SEARCH_PREVIEW}
    if search_context_size is not None:
        if search_context_size not in {"low", "medium", "high"}:
            raise ValueError(
                f"search_context_size must be low, medium or high, got {search_context_size!r}"
            )
        descriptor["search_context_size"] = search_context_size
    return descriptor
