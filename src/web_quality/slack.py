"""Slack notification utilities for Web Quality Analyzer.

Sends the one-time installation notice when a webhook is configured.
"""

import logging
import socket
from datetime import datetime
from typing import Optional

import httpx

from .config import SLACK_WEBHOOK_URL

logger = logging.getLogger(__name__)


def get_hostname() -> str:
    """Get the current hostname for context in notifications."""
    try:
        return socket.gethostname()
    except OSError:
        return "unknown"


def send_slack_notification(
    emoji: str,
    title: str,
    message: str,
    webhook_url: Optional[str] = None,
) -> bool:
    """Send a Slack notification via webhook.

    Args:
        emoji: Emoji to prefix the title
        title: Header text for the notification
        message: Body text (supports Slack mrkdwn formatting)
        webhook_url: Overrides the SLACK_WEBHOOK_URL setting

    Returns:
        True if notification was sent successfully, False otherwise.
    """
    webhook_url = webhook_url or SLACK_WEBHOOK_URL
    if not webhook_url:
        logger.debug(f"[Slack disabled] {title}: {message[:100]}")
        return False

    hostname = get_hostname()
    timestamp = datetime.now().strftime("%Y-%m-%d %H:%M:%S")

    payload = {
        "blocks": [
            {
                "type": "header",
                "text": {
                    "type": "plain_text",
                    "text": f"{emoji} {title}",
                    "emoji": True,
                },
            },
            {
                "type": "section",
                "text": {
                    "type": "mrkdwn",
                    "text": message,
                },
            },
            {
                "type": "context",
                "elements": [
                    {
                        "type": "mrkdwn",
                        "text": f"Server: `{hostname}` | Time: `{timestamp}`",
                    }
                ],
            },
        ],
    }

    try:
        response = httpx.post(webhook_url, json=payload, timeout=10.0)
        return response.status_code == 200
    except httpx.HTTPError as e:
        logger.warning(f"[Slack error] Failed to send notification: {e}")
        return False


def notify_installed(version: str, webhook_url: Optional[str] = None) -> bool:
    """Send notification that the analyzer was installed on this host."""
    message = f"*Version:* {version}"
    return send_slack_notification(
        "📦", "Web Quality Analyzer installed", message, webhook_url=webhook_url
    )
