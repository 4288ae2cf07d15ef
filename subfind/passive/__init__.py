"""Passive sources and the runner that queries them together"""

from typing import Tuple

from .base_tool import BaseTool
from .certspotter import CertSpotterTool
from .hackertarget import HackerTargetTool
from .threatcrowd import ThreatCrowdTool
from .crtsh import CrtshTool
from .facebook import FacebookTool

# Fixed registration order
SOURCES = (
    CertSpotterTool,
    HackerTargetTool,
    ThreatCrowdTool,
    CrtshTool,
    FacebookTool,
)


def build_tools(config) -> Tuple[BaseTool, ...]:
    """
    Instantiate every enabled source

    Args:
        config: ConfigManager

    Returns:
        Immutable tuple of tools, in registration order
    """
    tools = []
    for tool_class in SOURCES:
        tool = tool_class(config.source_config(tool_class.name))
        if tool.is_enabled():
            tools.append(tool)
    return tuple(tools)


__all__ = [
    'BaseTool',
    'CertSpotterTool',
    'HackerTargetTool',
    'ThreatCrowdTool',
    'CrtshTool',
    'FacebookTool',
    'SOURCES',
    'build_tools'
]
