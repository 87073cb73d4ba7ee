import time

import psutil

from eafitsh.config import START_TIME, TICKS_PER_SECOND, TIMEZONE_OFFSET


def uptime_ticks():
    """Ticks since the machine booted, at TICKS_PER_SECOND"""
    uptime = time.time() - psutil.boot_time()
    return max(int(uptime * TICKS_PER_SECOND), 0)


def format_clock(ticks, start_time=START_TIME, offset=TIMEZONE_OFFSET):
    """Turn a tick count into HH:MM:SS wall time"""
    total = start_time + ticks // TICKS_PER_SECOND + offset
    hours = (total // 3600) % 24
    minutes = (total // 60) % 60
    seconds = total % 60
    return f"{hours:02d}:{minutes:02d}:{seconds:02d}"


def current_time():
    return format_clock(uptime_ticks())
