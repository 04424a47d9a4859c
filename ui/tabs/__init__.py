"""Settings dialog tabs."""

from .keymapping_tab import KeymappingTab
from .graphics_tab import GraphicsTab
from .jb_bypass_tab import JBBypassTab
from .info_tab import InfoTab

__all__ = ['KeymappingTab', 'GraphicsTab', 'JBBypassTab', 'InfoTab']
