"""
CLI 命令模块 - urlbot 配置相关的命令行命令定义。

本模块使用 Typer 框架定义命令：
- check：组装运行时数据（不存在时生成默认配置）并打印摘要
- show：以 TOML 形式打印各配置组
- init：写入默认配置文件
- channels：频道列表管理（list / add / remove），修改后写回配置文件

技术栈：
- Typer：CLI 框架（基于 Click，支持类型注解自动生成帮助文档）
- Rich：终端美化输出（表格、颜色）
"""

from pathlib import Path

import typer
from loguru import logger
from rich.console import Console
from rich.table import Table
from rich.text import Text

from urlbot import __logo__, __version__

app = typer.Typer(
    name="urlbot",
    help=f"{__logo__} urlbot - URL title IRC bot",
    no_args_is_help=True,
)

console = Console()

CONF_HELP = "Configuration file path (default: $URLBOT_CONF or platform config dir)"
DB_HELP = "History database path, overrides database.path (default: $URLBOT_DB)"


def version_callback(value: bool):
    """--version/-v：打印版本号并退出。"""
    if value:
        console.print(f"{__logo__} urlbot v{__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        None, "--version", "-v", callback=version_callback, is_eager=True
    ),
):
    """urlbot CLI 根命令回调。处理全局选项（如 --version）。"""
    pass


def _make_options(conf: Path | None, db: Path | None = None):
    """只把命令行显式给出的参数传给 RtdOptions，其余交给环境变量/默认值。"""
    from urlbot.config.runtime import RtdOptions

    overrides = {"conf": conf, "db": db}
    return RtdOptions(**{k: v for k, v in overrides.items() if v is not None})


def _resolve_conf_path(conf: Path | None) -> Path:
    from urlbot.utils.helpers import expand_home

    return expand_home(_make_options(conf).conf)


def _fail(e: Exception) -> None:
    """打印错误（含路径和原因）并以状态码 1 退出。"""
    console.print(Text.assemble(("Error: ", "red"), str(e)))
    raise typer.Exit(1)


# ============================================================================
# Runtime check
# ============================================================================


@app.command()
def check(
    conf: Path = typer.Option(None, "--conf", "-c", help=CONF_HELP),
    db: Path = typer.Option(None, "--db", "-d", help=DB_HELP),
    logs: bool = typer.Option(True, "--logs/--no-logs", help="Show urlbot runtime logs"),
):
    """
    组装运行时数据并打印摘要。

    配置文件不存在时会生成默认配置；启用历史记录时会创建数据库所在目录。
    """
    from urlbot.config.errors import ConfigError
    from urlbot.config.runtime import load_rtd

    if logs:
        logger.enable("urlbot")
    else:
        logger.disable("urlbot")

    try:
        rtd = load_rtd(_make_options(conf, db))
    except (ConfigError, OSError) as e:
        _fail(e)

    cfg = rtd.conf
    table = Table(title=f"{__logo__} urlbot runtime")
    table.add_column("Setting", style="cyan")
    table.add_column("Value", style="yellow")
    table.add_row("Config", str(rtd.paths.conf))
    table.add_row("Network", cfg.network.name)
    table.add_row("History", "✓" if rtd.history else "✗")
    table.add_row("Database", cfg.database.db_type.value)
    table.add_row("Database path", str(rtd.paths.db) if rtd.paths.db else "[dim]none[/dim]")
    server = f"{cfg.connection.server}:{cfg.connection.port}" if cfg.connection.server else "[dim]not set[/dim]"
    table.add_row("Server", server)
    table.add_row("Channels", ", ".join(cfg.connection.channels or []) or "[dim]none[/dim]")
    table.add_row("Version", cfg.connection.version or "")
    console.print(table)


@app.command()
def show(
    conf: Path = typer.Option(None, "--conf", "-c", help=CONF_HELP),
):
    """以 TOML 形式打印各配置组（network / features / parameters / database）。"""
    from urlbot.config.errors import ConfigError
    from urlbot.config.loader import load_config

    path = _resolve_conf_path(conf)
    try:
        config = load_config(path)
    except (ConfigError, OSError) as e:
        _fail(e)

    for name in ("network", "features", "parameters", "database"):
        console.print(f"[bold cyan]\\[{name}][/bold cyan]")
        # 配置组文本中的方括号不能被当作 rich 标记解析
        console.print(Text(str(getattr(config, name))))


@app.command()
def init(
    conf: Path = typer.Option(None, "--conf", "-c", help=CONF_HELP),
    force: bool = typer.Option(False, "--force", "-f", help="Overwrite without asking"),
):
    """写入一份默认配置文件。"""
    from urlbot.config.loader import save_config
    from urlbot.config.schema import Config
    from urlbot.utils.helpers import ensure_parent_dir

    path = _resolve_conf_path(conf)

    if path.exists() and not force:
        console.print(f"[yellow]Config already exists at {path}[/yellow]")
        if not typer.confirm("Overwrite?"):
            raise typer.Exit()

    try:
        ensure_parent_dir(path)
        save_config(Config(), path)
    except OSError as e:
        _fail(e)
    console.print(f"[green]✓[/green] Created config at {path}")
    console.print("\nNext steps:")
    console.print(f"  Edit the [cyan]connection[/cyan] table in [cyan]{path}[/cyan]")


# ============================================================================
# Channel Commands
# ============================================================================


channels_app = typer.Typer(help="Manage the IRC channel list")
app.add_typer(channels_app, name="channels")


def _load_for_edit(conf: Path | None):
    """加载配置用于修改；返回 (路径, 配置)。"""
    from urlbot.config.errors import ConfigError
    from urlbot.config.loader import load_config

    path = _resolve_conf_path(conf)
    try:
        return path, load_config(path)
    except (ConfigError, OSError) as e:
        _fail(e)


def _save_after_edit(config, path: Path) -> None:
    from urlbot.config.errors import ConfigError
    from urlbot.config.loader import save_config

    try:
        save_config(config, path)
    except (ConfigError, OSError) as e:
        _fail(e)


@channels_app.command("list")
def channels_list(
    conf: Path = typer.Option(None, "--conf", "-c", help=CONF_HELP),
):
    """列出配置中的频道及状态频道。"""
    _, config = _load_for_edit(conf)

    table = Table(title="Channels")
    table.add_column("Channel", style="cyan")
    table.add_column("Status", style="green")

    status = set(config.parameters.status_channels)
    for name in config.connection.channels or []:
        table.add_row(name, "✓" if name in status else "")
    console.print(table)


@channels_app.command("add")
def channels_add(
    name: str = typer.Argument(..., help="Channel name, e.g. #urlbot"),
    conf: Path = typer.Option(None, "--conf", "-c", help=CONF_HELP),
):
    """加入频道（已存在时不做修改）。"""
    path, config = _load_for_edit(conf)
    if name in (config.connection.channels or []):
        console.print(f"[yellow]{name} is already configured[/yellow]")
        return

    config.add_channel(name)
    _save_after_edit(config, path)
    console.print(f"[green]✓[/green] Added {name}")


@channels_app.command("remove")
def channels_remove(
    name: str = typer.Argument(..., help="Channel name"),
    conf: Path = typer.Option(None, "--conf", "-c", help=CONF_HELP),
):
    """移除频道（不存在时不做修改）。"""
    path, config = _load_for_edit(conf)
    if name not in (config.connection.channels or []):
        console.print(f"[yellow]{name} is not configured[/yellow]")
        return

    config.remove_channel(name)
    _save_after_edit(config, path)
    console.print(f"[green]✓[/green] Removed {name}")


if __name__ == "__main__":
    app()
