"""
配置文档加载
使用 anyio 异步读取 YAML/JSON 文档并构造 InfrastructureConfig
"""

from __future__ import annotations

from pathlib import Path
from typing import List

import anyio
import yaml
from anyio import Path as AsyncPath
from pydantic import ValidationError

from .core.models import InfrastructureConfig
from .core.types import Failure, Result, Success


def parse_infrastructure_config(text: str, source: str = "<string>") -> Result:
    """解析文档文本（JSON 是 YAML 的子集）"""
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as e:
        return Failure(f"{source}: 文档解析失败: {e}", "YAMLError")

    if data is None:
        data = {}
    if not isinstance(data, dict):
        return Failure(f"{source}: 文档顶层必须是映射", "InvalidDocument")

    try:
        config = InfrastructureConfig.model_validate(data)
    except ValidationError as e:
        return Failure(
            f"{source}: 配置结构无效: {e}",
            "ValidationError",
            {"errors": e.errors(include_url=False)},
        )
    return Success(config, f"已加载 {source}")


async def load_infrastructure_config(path: Path) -> Result:
    """读取单个配置文件"""
    file_path = AsyncPath(path)
    try:
        text = await file_path.read_text(encoding="utf-8")
    except OSError as e:
        return Failure.from_exception(e)
    return parse_infrastructure_config(text, str(path))


async def load_infrastructure_configs(paths: List[Path]) -> List[Result]:
    """并发读取多个配置文件，结果顺序与输入一致"""
    results: List[Result] = [Failure("未加载")] * len(paths)

    async def _load(index: int, path: Path) -> None:
        results[index] = await load_infrastructure_config(path)

    async with anyio.create_task_group() as tg:
        for index, path in enumerate(paths):
            tg.start_soon(_load, index, path)
    return results
