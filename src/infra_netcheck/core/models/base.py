"""基础配置类"""
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class BaseConfig(BaseModel):
    """基础配置类 - 所有配置模型的基类"""

    model_config = ConfigDict(
        frozen=True,  # 不可变
        extra='forbid',  # 禁止额外字段
        validate_assignment=True,  # 赋值时验证
        alias_generator=to_camel,  # 序列化字段使用 camelCase
        populate_by_name=True,
    )
