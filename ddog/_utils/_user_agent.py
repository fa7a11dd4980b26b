import importlib.metadata

from .constants import HEADER_USER_AGENT


def user_agent_value(specific_component: str) -> str:
    product = "ddog-python"

    try:
        version = importlib.metadata.version("ddog")
    except importlib.metadata.PackageNotFoundError:
        version = "unknown"

    if specific_component:
        return f"{product}/{version} ({specific_component})"
    return f"{product}/{version}"


def header_user_agent(specific_component: str) -> dict[str, str]:
    return {HEADER_USER_AGENT: user_agent_value(specific_component)}
