"""配置包：默认值与应用设置"""

from .settings import AppSettings

__all__ = ["AppSettings"]
