"""Banner generation for application."""

import platform
import sys
from datetime import UTC, datetime

from pyfiglet import figlet_format

from bidmarket.config.config import Settings

__all__ = ["create_banner"]


def create_banner(settings: Settings, silent: bool = False) -> str:
    """Generate and optionally print a banner with server name and settings.

    Args:
        settings: Application configuration settings
        silent: If True, suppress console output and return banner as string

    Returns:
        The complete banner as a string
    """
    lines: list[str] = []

    banner = figlet_format("BIDMARKET", font="slant")
    lines.extend([
        "\033[1;36m" + banner + "\033[0m",
        f"\033[1;33m🔨 BIDMARKET Auction Service v{settings.version} 🔨\033[0m",
        f"\033[0;37m{'-' * 60}\033[0m",
    ])

    env_color = "\033[1;31m" if settings.app_env == "production" else "\033[1;32m"
    host = "0.0.0.0" if settings.host_binding == "0.0.0.0" else "localhost"  # noqa: S104
    lines.extend([
        f"🌍 Environment: {env_color}{settings.app_env}\033[0m",
        f"🔌 API: http://{host}:{settings.port}{settings.root_path}",
        f"📋 Docs: http://localhost:{settings.port}/docs",
        f"📊 Metrics: http://localhost:{settings.port}/metrics",
    ])

    lines.extend([
        "\n\033[1;33m💾 Database Configuration\033[0m",
        f"  • Engine: {settings.db_url.split('://')[0]}",
        f"  • Clear on Restart: {'✅' if settings.clear_db_on_restart else '❌'}",
        f"  • Seed on Start: {'✅' if settings.seed_db_on_start else '❌'}",
    ])

    sizes = ", ".join(str(size) for size in settings.allowed_page_sizes)
    lines.extend([
        "\n\033[1;33m📄 Pagination Configuration\033[0m",
        f"  • Page Sizes: {sizes} (default: {settings.default_page_size})",
        f"  • Visible Pages: {settings.max_visible_pages}",
        f"  • Window: list={settings.list_window_policy}, "
        f"search={settings.search_window_policy}",
    ])

    extend = (
        f"+{settings.auto_extend_minutes} min within "
        f"{settings.auto_extend_threshold_minutes} min of the end"
        if settings.auto_extend_enabled
        else "❌"
    )
    lines.extend([
        "\n\033[1;33m🔨 Auction Configuration\033[0m",
        f"  • Min Start Price: {settings.min_start_price}",
        f"  • Min Price Step: {settings.min_price_step}",
        f"  • Duration: {settings.min_duration_hours} h to "
        f"{settings.max_duration_days} days",
        f"  • Auto Extend: {extend}",
    ])

    lines.extend([
        "\n\033[1;33m📝 Logging Configuration\033[0m",
        f"  • Log Level: {settings.log_level}",
        f"  • Log Path: {settings.log_path if settings.app_env != 'production' else 'stderr'}",  # noqa: E501
    ])

    lines.extend([
        "\n\033[1;33m⚙️ System Information\033[0m",
        f"  • OS: {platform.system()} {platform.release()}",
        f"  • Python: {sys.version.split()[0]}",
        f"  • Auto Reload: {'✅' if settings.reload else '❌'}",
        f"  • Started at: {datetime.now(UTC).strftime('%Y-%m-%d %H:%M:%S')} UTC",
        f"\033[0;37m{'-' * 60}\033[0m",
    ])

    banner_text = "\n".join(lines)
    if not silent:
        print(banner_text)  # noqa: T201
    return banner_text
