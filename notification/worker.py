#!/usr/bin/env python3
"""
RQ worker that records queued in-app notifications.

Only needed when `notifications.use_async_queue` is enabled; in sync mode
notifications are written inline and nothing is queued.

Usage:
    python -m notification.worker
    python -m notification.worker --burst
    python -m notification.worker --status
"""

import sys
import argparse
import logging
from typing import Dict, List, Optional

from redis import Redis
from rq import Queue, Worker
from rq.registry import FailedJobRegistry

from core.config_loader import NotificationConfig, get_config
from notification.service import QUEUE_NAME

logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)

DEFAULT_REDIS_URL = 'redis://localhost:6379/0'


def redis_connection(config: NotificationConfig) -> Redis:
    redis_conn = Redis.from_url(config.redis_url or DEFAULT_REDIS_URL)
    redis_conn.ping()
    return redis_conn


def queue_status(redis_conn: Redis, queue_names: List[str]) -> Dict[str, Dict[str, int]]:
    """Pending and failed job counts per queue."""
    status = {}
    for name in queue_names:
        queue = Queue(name, connection=redis_conn)
        status[name] = {
            'queued': len(queue),
            'failed': len(FailedJobRegistry(queue=queue)),
        }
    return status


def start_worker(burst: bool = False, queues: Optional[List[str]] = None, config: Optional[NotificationConfig] = None):
    """Start the RQ worker on the notification queue(s)."""
    config = config or get_config().notifications
    queues = queues or [QUEUE_NAME]

    if not config.use_async_queue:
        logger.warning("notifications.use_async_queue is disabled; nothing will be enqueued for this worker")

    logger.info(f"Starting notification worker on {', '.join(queues)} (burst={burst})")

    try:
        redis_conn = redis_connection(config)
        Worker(queues, connection=redis_conn).work(burst=burst)
    except KeyboardInterrupt:
        logger.info("Worker stopped")
    except Exception as e:
        logger.error(f"Notification worker failed: {e}")
        sys.exit(1)


def main():
    parser = argparse.ArgumentParser(description='Career platform notification worker')
    parser.add_argument('--burst', action='store_true', help='Process all queued notifications and exit')
    parser.add_argument('--queues', nargs='+', default=[QUEUE_NAME])
    parser.add_argument('--status', action='store_true', help='Print queue counts and exit')
    parser.add_argument('--verbose', action='store_true')

    args = parser.parse_args()

    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    if args.status:
        redis_conn = redis_connection(get_config().notifications)
        for name, counts in queue_status(redis_conn, args.queues).items():
            logger.info(f"{name}: {counts['queued']} queued, {counts['failed']} failed")
        return

    start_worker(burst=args.burst, queues=args.queues)


if __name__ == '__main__':
    main()
