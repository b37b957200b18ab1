"""
Notification text for a discovery outcome.
"""

import socket
from typing import Callable

from .data_models import DiscoveryOutcome, Found, NotificationReport
from ..utils import logger

UNKNOWN_HOST = "未知主机"

SUCCESS_TITLE = "[{hostname}] IP地址通知"
FAILURE_TITLE = "[{hostname}] IP地址获取失败"


def resolve_hostname(hostname_source: Callable[[], str] = socket.gethostname) -> str:
    """
    Return the host name, or the unknown-host placeholder if it cannot be read.

    Args:
        hostname_source: Callable returning the host name

    Returns:
        str: Host name used in the notification title
    """
    try:
        hostname = hostname_source()
    except OSError as e:
        logger.warning(f"Failed to get hostname: {e}")
        return UNKNOWN_HOST

    if not hostname:
        logger.warning("Host name is empty, using placeholder")
        return UNKNOWN_HOST
    return hostname


def build_report(hostname: str, outcome: DiscoveryOutcome) -> NotificationReport:
    """
    Build the notification title and body.

    A successful outcome lists every address on its own ``- `` bullet line;
    a failed one carries the elapsed time and the last scan error.
    """
    if isinstance(outcome, Found):
        lines = [f"主机：{hostname}", "发现以下IP地址："]
        lines.extend(f"- {address}" for address in outcome.addresses)
        return NotificationReport(
            title=SUCCESS_TITLE.format(hostname=hostname),
            message="\n".join(lines) + "\n",
        )

    message = (
        f"获取IP地址失败: 在{outcome.elapsed:.0f}秒内未能获取到IP地址\n"
        f"最后错误: {outcome.reason}"
    )
    return NotificationReport(
        title=FAILURE_TITLE.format(hostname=hostname),
        message=message,
    )
