"""
命令行入口
使用 typer 和 rich 校验 InfrastructureConfig 文档
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import anyio
import typer
import yaml
from rich.console import Console
from rich.table import Table

from . import __version__
from .config.defaults import OUTPUT_FORMATS
from .config.settings import AppSettings
from .core.models import ValidationReport
from .core.types import ErrorList, Failure
from .loader import load_infrastructure_config, load_infrastructure_configs
from .utils.logging import configure_logging, get_logger
from .validation import validate_infrastructure_config, validate_infrastructure_config_update

# 创建应用和控制台
app = typer.Typer(
    name="infra-netcheck",
    help="基础设施网络配置校验工具",
    add_completion=False,
    rich_markup_mode="rich"
)
console = Console()
err_console = Console(stderr=True)

logger = get_logger(__name__)


# 全局配置（简单数据容器）
class GlobalConfig:
    verbose: bool = False
    settings: AppSettings = AppSettings.model_construct()


global_config = GlobalConfig()


# 回调函数
def version_callback(value: bool):
    """版本回调"""
    if value:
        console.print(f"infra-netcheck v{__version__}")
        raise typer.Exit()


# 全局选项
@app.callback()
def main(
    version: Optional[bool] = typer.Option(
        None, "--version", "-v",
        callback=version_callback,
        is_eager=True,
        help="显示版本信息"
    ),
    verbose: bool = typer.Option(
        False, "--verbose",
        help="详细输出"
    ),
    config_file: Optional[Path] = typer.Option(
        None, "--config-file", "-c", help="从设置文件加载参考网段等设置 (YAML/JSON)"
    ),
):
    """基础设施网络配置校验工具"""
    try:
        settings = AppSettings.from_file(config_file)
    except (yaml.YAMLError, ValueError, OSError) as e:
        err_console.print(f"[red]读取设置文件失败: {e}[/red]")
        raise typer.Exit(1)

    global_config.verbose = verbose or settings.verbose
    global_config.settings = settings

    # 初始化日志
    configure_logging(global_config.verbose)
    logger.info("cli_started", verbose=global_config.verbose, config_file=str(config_file) if config_file else None)


def validate_output_format(value: Optional[str]) -> Optional[str]:
    """验证输出格式"""
    if value is not None and value.lower() not in OUTPUT_FORMATS:
        raise typer.BadParameter(f"输出格式必须是 {', '.join(OUTPUT_FORMATS)} 之一")
    return value.lower() if value else value


def _reference_ranges(
    nodes: Optional[str],
    pods: Optional[str],
    services: Optional[str],
) -> tuple[Optional[str], Optional[str], Optional[str]]:
    """命令行参数优先于设置文件/环境变量"""
    settings = global_config.settings
    return (
        nodes if nodes is not None else settings.nodes_cidr,
        pods if pods is not None else settings.pods_cidr,
        services if services is not None else settings.services_cidr,
    )


# 显示函数
def display_errors(report: ValidationReport):
    """以表格显示校验错误"""
    if report.accepted:
        console.print(f"[green]{report.source}: 配置校验通过 ✓[/green]")
        return

    table = Table(title=f"{report.source}: 配置校验失败")
    table.add_column("类型", style="cyan")
    table.add_column("字段", style="yellow")
    table.add_column("详情", style="red")
    for error in report.errors:
        table.add_row(error.type.label, error.field, error.error_body())
    console.print(table)


def _finish(errors: ErrorList, source: str, output: Optional[str]) -> None:
    report = ValidationReport.from_errors(errors, source)
    output_format = output or global_config.settings.output_format

    if output_format == "json":
        typer.echo(report.model_dump_json(by_alias=True, indent=2))
    else:
        display_errors(report)

    if report.accepted:
        logger.info("validation_passed", source=source)
        return
    logger.warning("validation_failed", source=source, summary=errors.to_aggregate(), **report.count_by_type())
    raise typer.Exit(1)


def _exit_on_failure(result) -> None:
    if isinstance(result, Failure):
        err_console.print(f"[red]{result.error}[/red]")
        logger.error("load_failed", error_code=result.error_code)
        raise typer.Exit(1)


@app.command("validate")
def validate_command(
    config_path: Path = typer.Argument(..., help="InfrastructureConfig 文档 (YAML/JSON)"),
    nodes: Optional[str] = typer.Option(None, "--nodes", help="集群 Nodes CIDR"),
    pods: Optional[str] = typer.Option(None, "--pods", help="集群 Pods CIDR"),
    services: Optional[str] = typer.Option(None, "--services", help="集群 Services CIDR"),
    output: Optional[str] = typer.Option(None, "--output", "-o", callback=validate_output_format, help="输出格式 (table/json)"),
):
    """校验单个配置

    Examples:
      validate infra.yaml --nodes 10.250.0.0/16
      validate infra.yaml -o json
    """
    result = anyio.run(load_infrastructure_config, config_path)
    _exit_on_failure(result)

    errors = validate_infrastructure_config(result.value, *_reference_ranges(nodes, pods, services))
    _finish(errors, str(config_path), output)


@app.command("validate-update")
def validate_update_command(
    old_path: Path = typer.Argument(..., help="当前生效的配置"),
    new_path: Path = typer.Argument(..., help="更新后的配置"),
    nodes: Optional[str] = typer.Option(None, "--nodes", help="集群 Nodes CIDR"),
    pods: Optional[str] = typer.Option(None, "--pods", help="集群 Pods CIDR"),
    services: Optional[str] = typer.Option(None, "--services", help="集群 Services CIDR"),
    output: Optional[str] = typer.Option(None, "--output", "-o", callback=validate_output_format, help="输出格式 (table/json)"),
):
    """校验配置更新：新配置必须合法，且 networks 部分不可修改"""
    old_result, new_result = anyio.run(load_infrastructure_configs, [old_path, new_path])
    _exit_on_failure(old_result)
    _exit_on_failure(new_result)

    errors = validate_infrastructure_config_update(
        old_result.value,
        new_result.value,
        *_reference_ranges(nodes, pods, services),
    )
    _finish(errors, str(new_path), output)


# 主入口
if __name__ == "__main__":
    app()
