"""命令行界面.

提供card-deck命令的入口和文本渲染。
"""

from .cli_game import main
from .render import CLIRenderer

__all__ = ['main', 'CLIRenderer']
